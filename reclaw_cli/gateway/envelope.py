"""
Envelope Builder.

Maps each command variant to the HTTP request that carries it:

    Health -> GET  /healthz   (no body)
    Info   -> GET  /info      (no body)
    Rpc    -> POST /          {"id": 1, "method": ..., "params": {...}}

Params validation is local and happens before any network activity.
"""

import json
import math
from dataclasses import dataclass
from typing import Any

from reclaw_cli.core.exceptions import MalformedParams
from reclaw_cli.gateway.commands import Command, Health, Info, Rpc
from reclaw_cli.gateway.results import Failure

RPC_REQUEST_ID = 1

HEALTH_PATH = "/healthz"
INFO_PATH = "/info"
RPC_PATH = "/"


@dataclass(frozen=True, slots=True)
class RpcEnvelope:
    """Request body of a remote method call."""

    id: int
    method: str
    params: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "method": self.method, "params": self.params}


@dataclass(frozen=True, slots=True)
class OutboundRequest:
    """One HTTP request, ready for the transport."""

    method: str
    path: str
    body: dict[str, Any] | None = None


def _reject_constant(name: str) -> Any:
    raise MalformedParams(f"{name} is not valid JSON")


def _finite_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise MalformedParams(f"number {text} is out of range")
    return value


def parse_params(raw: str) -> dict[str, Any]:
    """
    Parse the --params text into a JSON object.

    Raises:
        MalformedParams: If the text is not valid JSON or not an object.
    """
    try:
        parsed = json.loads(raw, parse_constant=_reject_constant, parse_float=_finite_float)
    except json.JSONDecodeError as e:
        raise MalformedParams(str(e)) from e

    if not isinstance(parsed, dict):
        raise MalformedParams(
            f"params JSON must be an object, got {type(parsed).__name__}"
        )
    return parsed


def build_envelope(method: str, params: dict[str, Any]) -> RpcEnvelope:
    return RpcEnvelope(id=RPC_REQUEST_ID, method=method, params=params)


def build_request(command: Command) -> OutboundRequest | Failure:
    """
    Build the outbound request for a command.

    Returns:
        OutboundRequest on success, Failure(MalformedParams) when rpc
        params are rejected.
    """
    if isinstance(command, Health):
        return OutboundRequest("GET", HEALTH_PATH)

    if isinstance(command, Info):
        return OutboundRequest("GET", INFO_PATH)

    if isinstance(command, Rpc):
        try:
            params = parse_params(command.params)
        except MalformedParams as e:
            return Failure(e)
        envelope = build_envelope(command.method, params)
        return OutboundRequest("POST", RPC_PATH, envelope.to_dict())

    raise TypeError(f"Unknown command: {command!r}")
