"""
Response Validator.

Classifies a raw gateway response per command kind:

    any      - status must be 200
    health   - body must be a JSON object with ok == true
    info/rpc - body must be valid JSON; the value itself is not inspected
"""

import json
import math
from typing import Any

from reclaw_cli.core.exceptions import (
    InvalidHealthResponse,
    InvalidPayload,
    UnexpectedStatusError,
)
from reclaw_cli.gateway.client import RawResponse
from reclaw_cli.gateway.commands import CommandKind
from reclaw_cli.gateway.envelope import OutboundRequest
from reclaw_cli.gateway.results import Failure, Outcome, Success

_MISSING = object()


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _finite_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"number {text} is out of range")
    return value


def _decode(body: bytes) -> Any:
    """Parse a response body. Raises ValueError on invalid JSON or encoding."""
    return json.loads(body, parse_constant=_reject_constant, parse_float=_finite_float)


def check_health(body: bytes) -> Outcome:
    """Require a JSON object whose ok field is exactly true."""
    try:
        payload = _decode(body)
    except ValueError as e:
        return Failure(InvalidHealthResponse(f"response body is not valid JSON: {e}"))

    if not isinstance(payload, dict):
        return Failure(InvalidHealthResponse(
            f"expected a JSON object, got {type(payload).__name__}"
        ))

    ok = payload.get("ok", _MISSING)
    if ok is _MISSING:
        return Failure(InvalidHealthResponse("healthz response missing ok field"))
    if ok is not True:
        return Failure(InvalidHealthResponse(f"healthz reported ok={json.dumps(ok)}"))

    return Success(payload)


def check_payload(body: bytes) -> Outcome:
    """Accept any well-formed JSON value."""
    try:
        return Success(_decode(body))
    except ValueError as e:
        return Failure(InvalidPayload(f"response body is not valid JSON: {e}"))


def validate(kind: CommandKind, outbound: OutboundRequest, raw: RawResponse) -> Outcome:
    """
    Decide the outcome of a command from its raw response.

    Args:
        kind: Which command produced the request.
        outbound: The request that was sent, for error context.
        raw: Status and body returned by the transport.
    """
    if raw.status_code != 200:
        return Failure(UnexpectedStatusError(raw.status_code, outbound.method, outbound.path))

    if kind is CommandKind.HEALTH:
        return check_health(raw.body)
    return check_payload(raw.body)
