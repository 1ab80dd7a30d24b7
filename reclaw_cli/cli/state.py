"""Global options shared by every command through typer.Context.obj."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CliState:
    server: str | None = None
    timeout: float | None = None
    pretty: bool = False
