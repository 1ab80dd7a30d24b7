"""
Gateway Commands.

health, info and rpc. Each builds a Command, runs it through the dispatcher
and maps the outcome to output and an exit code.
"""

import asyncio

import typer
from rich.console import Console

from reclaw_cli.cli.state import CliState
from reclaw_cli.core.exceptions import GatewayCliError
from reclaw_cli.core.logging import get_logger, log_with_source
from reclaw_cli.gateway.client import create_gateway_client
from reclaw_cli.gateway.commands import Command, Health, Info, Rpc
from reclaw_cli.gateway.dispatcher import dispatch, render
from reclaw_cli.gateway.results import Failure, Outcome

logger = get_logger(__name__)

console = Console(emoji=False, highlight=False)
err_console = Console(stderr=True, emoji=False, highlight=False)


def health(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", "-j", help="Pretty-print the JSON payload"),
) -> None:
    """
    Query /healthz and assert ok=true.

    Examples:
        reclaw-cli health
        reclaw-cli --server http://gw:18789 health
    """
    _execute(ctx, Health(), json_output)


def info(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", "-j", help="Pretty-print the JSON payload"),
) -> None:
    """
    Query /info and print the server metadata.

    Examples:
        reclaw-cli info
        reclaw-cli info --json
    """
    _execute(ctx, Info(), json_output)


def rpc(
    ctx: typer.Context,
    method: str = typer.Argument(..., help="Remote method name, e.g. system.healthz"),
    params: str = typer.Option(..., "--params", "-p", help="Method parameters as a JSON object"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Pretty-print the JSON payload"),
) -> None:
    """
    Invoke a JSON-RPC method and print the response verbatim.

    Examples:
        reclaw-cli rpc system.healthz --params '{}'
        reclaw-cli rpc node.status --params '{"scope": "node"}' --json
    """
    _execute(ctx, Rpc(method=method, params=params), json_output)


def _execute(ctx: typer.Context, command: Command, json_output: bool) -> None:
    """Run a command and exit non-zero on failure."""
    state: CliState = ctx.obj
    pretty = state.pretty or json_output

    outcome = asyncio.run(_run(command, state))

    if isinstance(outcome, Failure):
        log_with_source(
            logger, "cli", "debug", "Command failed",
            command=command.kind.value, code=outcome.code,
        )
        err_console.print(f"reclaw-cli failed: {outcome.message}", markup=False, soft_wrap=True)
        raise typer.Exit(1)

    console.print(render(outcome.payload, pretty=pretty), markup=False, soft_wrap=True)


async def _run(command: Command, state: CliState) -> Outcome:
    """Create the client, dispatch once, and always release the connection."""
    try:
        client = create_gateway_client(state.server, state.timeout)
    except GatewayCliError as e:
        return Failure(e)

    try:
        return await dispatch(command, client)
    finally:
        await client.close()
