"""
Common utilities for the CLI.
"""

import asyncio
import sys
import traceback
from typing import Any, Awaitable, Callable

import click
import httpx
from loguru import logger
from rich.console import Console
from rich.markup import escape

from sledkv.api.api_resource import RemoteError
from sledkv.api.client import SledClient

console = Console(highlight=False)


def run_with_client(url: str, fn: Callable[[SledClient], Awaitable[Any]]) -> Any:
    """
    Opens a client on url, awaits fn(client) and closes the client again. Commands
    are synchronous, so this is where the event loop lives.
    """

    async def _run():
        async with SledClient(url) as client:
            return await fn(client)

    return asyncio.run(_run())


def click_group(*args, **kwargs):
    """
    A wrapper around click.group that allows for command shorthands as long as
    they are unambiguous. For example, `sledkv tree delete` can be shortened to
    `sledkv tr del`. It also turns store errors into readable messages and a non
    zero exit code instead of a traceback.
    """

    class ClickAliasedGroup(click.Group):
        def get_command(self, ctx, cmd_name):
            rv = click.Group.get_command(self, ctx, cmd_name)
            if rv is not None:
                return rv

            def is_abbrev(x, y):
                # first char must match, and an empty name matches nothing
                if not x or x[0] != y[0]:
                    return False
                it = iter(y)
                return all(any(c == ch for c in it) for ch in x)

            matches = [x for x in self.list_commands(ctx) if is_abbrev(cmd_name, x)]

            if not matches:
                return None
            elif len(matches) == 1:
                return click.Group.get_command(self, ctx, matches[0])
            ctx.fail(f"'{cmd_name}' is ambiguous: {', '.join(sorted(matches))}")

        def resolve_command(self, ctx, args):
            # always return the full command name
            _, cmd, args = super().resolve_command(ctx, args)
            return cmd.name, cmd, args

        def group(self, *g_args, **g_kwargs):
            # Ensure nested groups also inherit this group's behavior
            if "cls" not in g_kwargs:
                g_kwargs["cls"] = ClickAliasedGroup
            return super().group(*g_args, **g_kwargs)

        def invoke(self, ctx):
            try:
                return super().invoke(ctx)
            except RemoteError as e:
                console.print(f"[red]{e.status_code} Error[/]: {escape(e.body)}")
                sys.exit(1)
            except httpx.HTTPError as e:
                console.print(
                    f"[red]Connection error[/]: {escape(str(e))}. Is the store running at"
                    f" {escape(str(ctx.find_root().params.get('url')))}?"
                )
                sys.exit(1)
            except (click.ClickException, click.exceptions.Exit):
                raise
            except ValueError as e:
                console.print(f"[red]Error[/]: {escape(str(e))}")
                logger.trace(traceback.format_exc())
                sys.exit(1)
            except Exception as e:
                console.print(f"[red]Unexpected error[/]: {escape(str(e))}")
                console.print(traceback.format_exc(), markup=False)
                sys.exit(1)

    return click.group(*args, cls=ClickAliasedGroup, **kwargs)
