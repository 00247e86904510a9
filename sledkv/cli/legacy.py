"""
Commands for the store's default namespace.
"""

import sys

import click
from rich.markup import escape

from .util import console, click_group, run_with_client


@click_group()
def legacy():
    """
    Read and write keys in the default namespace, which predates trees.
    """
    pass


@legacy.command()
@click.option("--key", "-k", help="Key to put", type=str, required=True)
@click.option("--value", "-v", help="Value to put", type=str, required=True)
@click.pass_obj
def put(obj, key, value):
    run_with_client(obj["url"], lambda c: c.insert(key, value))
    console.print(f"Successfully put key [green]{escape(key)}[/].")


@legacy.command()
@click.option("--key", "-k", help="Key to get", type=str, required=True)
@click.pass_obj
def get(obj, key):
    value = run_with_client(obj["url"], lambda c: c.get(key))
    if value is None:
        console.print(f"Key [red]{escape(key)}[/] not found.")
        sys.exit(1)
    console.print(value, markup=False)


def add_command(cli_group):
    cli_group.add_command(legacy)
