import sys

import click
from loguru import logger
from rich.table import Table
from rich.markup import escape

from sledkv import __version__
from sledkv import config
from . import legacy
from . import tree
from .util import console, click_group, run_with_client

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.version_option(__version__, "-v", "--version")
@click_group(context_settings=CONTEXT_SETTINGS)
@click.option(
    "--url",
    "-u",
    help="Base url of the store. Defaults to $SLEDKV_URL.",
    default=config.DEFAULT_URL,
    show_default=True,
)
@click.pass_context
def sledkv(ctx, url):
    """
    sledkv is the commandline interface to a sled key-value store. It provides
    commands to check the server's health, list trees, and read and write keys
    either in a named tree or in the default namespace.
    """
    # The library logs at debug level; only show that when asked to.
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if config.DEBUG else "WARNING")
    ctx.ensure_object(dict)
    ctx.obj["url"] = url


@sledkv.command()
@click.pass_obj
def health(obj):
    """
    Checks whether the store is healthy.
    """
    healthy = run_with_client(obj["url"], lambda c: c.health_check())
    if healthy:
        console.print(f"Store at {escape(obj['url'])} is [green]healthy[/].")
    else:
        console.print(f"Store at {escape(obj['url'])} is [red]unhealthy[/].")
        sys.exit(1)


@sledkv.command()
@click.pass_obj
def trees(obj):
    """
    Lists all trees in the store.
    """
    names = run_with_client(obj["url"], lambda c: c.list_all_trees())
    table = Table(title="Trees", show_lines=True)
    table.add_column("name")
    for name in sorted(names):
        table.add_row(escape(name))
    console.print(table)


# Add subcommands
tree.add_command(sledkv)
legacy.add_command(sledkv)


if __name__ == "__main__":
    sledkv()
