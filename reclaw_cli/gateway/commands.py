"""
Command Variants.

The closed set of operations the client can perform. Built once from the
command line and consumed once by the dispatcher.
"""

from dataclasses import dataclass
from enum import Enum


class CommandKind(str, Enum):
    HEALTH = "health"
    INFO = "info"
    RPC = "rpc"


@dataclass(frozen=True, slots=True)
class Health:
    """Query /healthz and require ok=true."""

    kind = CommandKind.HEALTH


@dataclass(frozen=True, slots=True)
class Info:
    """Query /info."""

    kind = CommandKind.INFO


@dataclass(frozen=True, slots=True)
class Rpc:
    """Invoke a remote method. params is the caller's raw JSON text."""

    method: str
    params: str

    kind = CommandKind.RPC


Command = Health | Info | Rpc
