"""
reclaw-cli application.

Usage:
    reclaw-cli --help                                        # Show help
    reclaw-cli health                                        # Liveness probe
    reclaw-cli --json info                                   # Server metadata, pretty-printed
    reclaw-cli rpc system.healthz --params '{}'              # Invoke a remote method
    reclaw-cli --server https://gw.example:18789 health      # Target another gateway

Options:
    --server, -s      Gateway base URL (env: RECLAW_SERVER)
    --timeout         Request timeout in seconds (env: RECLAW_TIMEOUT)
    --json            Pretty-print JSON output
    --verbose, -v     Enable verbose output
    --debug, -d       Enable debug mode (detailed logging)
"""

from typing import Optional

import typer
from rich.console import Console

from reclaw_cli import __version__
from reclaw_cli.cli import commands
from reclaw_cli.cli.state import CliState
from reclaw_cli.core.exceptions import ConfigurationError
from reclaw_cli.core.logging import setup_logging

app = typer.Typer(
    name="reclaw-cli",
    help="Operational client for the reclaw gateway: health, info, and RPC.",
    no_args_is_help=True,
    add_completion=False,
)

err_console = Console(stderr=True, emoji=False, highlight=False)

app.command("health")(commands.health)
app.command("info")(commands.info)
app.command("rpc")(commands.rpc)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"reclaw-cli {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    server: Optional[str] = typer.Option(
        None,
        "--server",
        "-s",
        help="Gateway base URL (default from RECLAW_SERVER or client.yaml)",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        min=0.001,
        help="Request timeout in seconds",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Pretty-print JSON output",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Operational client for the reclaw gateway.

    Probe liveness, read server metadata, and invoke remote methods.
    """
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = None

    try:
        setup_logging(level=level)
    except ConfigurationError as e:
        err_console.print(f"reclaw-cli failed: {e}", markup=False, soft_wrap=True)
        raise typer.Exit(1)

    ctx.obj = CliState(server=server, timeout=timeout, pretty=json_output)


def run() -> None:
    """Console script entry point."""
    app()
