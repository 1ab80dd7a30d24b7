"""
Command Dispatcher.

Runs one command end to end: build request, send it once, validate the
response. The first failing stage ends the invocation; nothing after it runs.
"""

import json
from typing import Any

from reclaw_cli.core.logging import get_logger, log_with_source
from reclaw_cli.gateway.client import GatewayClient
from reclaw_cli.gateway.commands import Command
from reclaw_cli.gateway.envelope import build_request
from reclaw_cli.gateway.results import Failure, Outcome
from reclaw_cli.gateway.validator import validate

logger = get_logger(__name__)


async def dispatch(command: Command, client: GatewayClient) -> Outcome:
    """
    Execute a command against the gateway.

    The caller owns the client and is responsible for closing it.

    Returns:
        Success(payload) or Failure(error). Never raises for expected
        failures (bad params, transport errors, bad responses).
    """
    outbound = build_request(command)
    if isinstance(outbound, Failure):
        log_with_source(
            logger, "cli", "info", "Request rejected before sending",
            command=command.kind.value, code=outbound.code,
        )
        return outbound

    raw = await client.send(outbound)
    if isinstance(raw, Failure):
        return raw

    outcome = validate(command.kind, outbound, raw)
    log_with_source(
        logger,
        "cli",
        "info" if outcome.ok else "warning",
        "Command finished",
        command=command.kind.value,
        status_code=raw.status_code,
        ok=outcome.ok,
    )
    return outcome


def render(payload: Any, pretty: bool = False) -> str:
    """
    Format a payload for stdout.

    Pretty mode indents with two spaces; raw mode is compact single-line JSON.
    Non-ASCII text is emitted as-is.
    """
    if pretty:
        return json.dumps(payload, indent=2, ensure_ascii=False)
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
