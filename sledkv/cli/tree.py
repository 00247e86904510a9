"""
Tree is a module that provides a way to read and write keys of a named tree.
"""

import re
import sys

import click
from rich.table import Table
from rich.markup import escape

from .util import console, click_group, run_with_client


@click_group()
def tree():
    """
    Read and write keys in a named tree.

    A tree is a named partition of the store, the equivalent of a conventional
    table or collection, composed of string keys and string values. Trees are
    created by the server the first time a key is put into them.
    """
    pass


@tree.command()
@click.option("--tree", "-t", "tree_name", help="Tree name", type=str, required=True)
@click.option("--key", "-k", help="Key to put", type=str, required=True)
@click.option("--value", "-v", help="Value to put", type=str, required=True)
@click.pass_obj
def put(obj, tree_name, key, value):
    """
    Puts a key-value pair into the tree.
    """
    message = run_with_client(
        obj["url"], lambda c: c.tree_insert(tree_name, key, value)
    )
    console.print(
        f"Successfully put key [green]{escape(key)}[/] to tree"
        f" [green]{escape(tree_name)}[/]."
    )
    if message:
        console.print(f"Server replied: {escape(message)}")


@tree.command()
@click.option("--tree", "-t", "tree_name", help="Tree name", type=str, required=True)
@click.option("--key", "-k", help="Key to get", type=str, required=True)
@click.pass_obj
def get(obj, tree_name, key):
    """
    Prints the value of a key in the tree.
    """
    value = run_with_client(obj["url"], lambda c: c.tree_get(tree_name, key))
    if value is None:
        console.print(
            f"Key [red]{escape(key)}[/] not found in tree"
            f" [green]{escape(tree_name)}[/]."
        )
        sys.exit(1)
    console.print(value, markup=False)


@tree.command()
@click.option("--tree", "-t", "tree_name", help="Tree name", type=str, required=True)
@click.option("--key", "-k", help="Key to delete", type=str, required=True)
@click.pass_obj
def delete(obj, tree_name, key):
    """
    Deletes a key from the tree.
    """
    run_with_client(obj["url"], lambda c: c.tree_delete(tree_name, key))
    console.print(
        f"Successfully deleted key [green]{escape(key)}[/] from tree"
        f" [green]{escape(tree_name)}[/]."
    )


@tree.command()
@click.option("--tree", "-t", "tree_name", help="Tree name", type=str, required=True)
@click.option(
    "--pattern", help="Regular expression pattern to filter keys", default=None
)
@click.pass_obj
def keys(obj, tree_name, pattern):
    """
    Lists the keys of the tree.
    """
    tree_keys = run_with_client(obj["url"], lambda c: c.tree_list_keys(tree_name))
    if pattern:
        tree_keys = [k for k in tree_keys if re.match(pattern, k)]
    table = Table(title=f"Keys in {escape(tree_name)}", show_lines=True)
    table.add_column("key")
    for k in sorted(tree_keys):
        table.add_row(escape(k))
    console.print(table)


def add_command(cli_group):
    cli_group.add_command(tree)
