"""
Custom Exceptions.

Error taxonomy for gateway client failures. Every error carries a stable
code so failures can be filtered in structured logs.

The dispatcher returns these inside a Failure outcome instead of raising
them across stage boundaries; the classes still derive from Exception so the
configuration layer can raise them during startup.
"""


class GatewayCliError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class MalformedParams(GatewayCliError):
    """The --params argument did not parse as a JSON object."""

    def __init__(self, message: str = "params JSON must be an object") -> None:
        super().__init__(message, code="CLI_MALFORMED_PARAMS")

    def __str__(self) -> str:
        return f"invalid rpc params: {self.message}"


class TransportError(GatewayCliError):
    """Connection, timeout, DNS or TLS failure during the outbound call."""

    def __init__(self, message: str = "transport failure") -> None:
        super().__init__(message, code="NET_TRANSPORT_ERROR")

    def __str__(self) -> str:
        return f"transport failure: {self.message}"


class InvalidPayload(GatewayCliError):
    """The response body could not be parsed as JSON."""

    def __init__(self, message: str = "response body is not valid JSON") -> None:
        super().__init__(message, code="PROTO_INVALID_PAYLOAD")

    def __str__(self) -> str:
        return f"protocol error: {self.message}"


class InvalidHealthResponse(GatewayCliError):
    """The health payload failed the ok == true check."""

    def __init__(self, message: str = "healthz response missing ok=true") -> None:
        super().__init__(message, code="PROTO_INVALID_HEALTH")

    def __str__(self) -> str:
        return f"health check failed: {self.message}"


class UnexpectedStatusError(GatewayCliError):
    """The server answered with a status other than 200."""

    def __init__(self, status_code: int, method: str, path: str) -> None:
        self.status_code = status_code
        super().__init__(
            f"unexpected status {status_code} for {method} {path}",
            code="PROTO_UNEXPECTED_STATUS",
        )

    def __str__(self) -> str:
        return f"protocol error: {self.message}"


class InvalidServerError(GatewayCliError):
    """The server base URL is empty or uses an unsupported scheme."""

    def __init__(self, message: str = "server URL cannot be empty") -> None:
        super().__init__(message, code="CFG_INVALID_SERVER")

    def __str__(self) -> str:
        return f"invalid server URL: {self.message}"


class ConfigurationError(GatewayCliError):
    """A configuration file failed schema validation."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message, code="CFG_INVALID")
