"""Outcome type returned by every stage of the dispatch pipeline."""

from dataclasses import dataclass
from typing import Any

from reclaw_cli.core.exceptions import GatewayCliError


@dataclass(frozen=True, slots=True)
class Success:
    """The command completed; payload is the parsed server response."""

    payload: Any

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    """The command failed at the first stage that detected an error."""

    error: GatewayCliError

    @property
    def ok(self) -> bool:
        return False

    @property
    def code(self) -> str:
        return self.error.code

    @property
    def message(self) -> str:
        return str(self.error)


Outcome = Success | Failure
