"""
Configuration Schemas.

Pydantic models defining the expected structure of config/settings/client.yaml.
Every section has defaults, so a missing file yields a usable configuration.
Unknown keys or wrong types raise a ValidationError at load time instead of a
cryptic KeyError deep in the command path.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SERVER = "http://127.0.0.1:18789"


class _StrictBase(BaseModel):
    """Base with extra='forbid' so unknown YAML keys are caught immediately."""

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# server
# =============================================================================


class ServerSchema(_StrictBase):
    base_url: str = DEFAULT_SERVER
    timeout: float = Field(default=30.0, gt=0)


# =============================================================================
# logging
# =============================================================================


class LogFileSchema(_StrictBase):
    enabled: bool = False
    path: str = "logs/cli.jsonl"
    max_bytes: int = 10485760
    backup_count: int = 5


class LoggingSchema(_StrictBase):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "console"] = "console"
    file: LogFileSchema = Field(default_factory=LogFileSchema)


# =============================================================================
# client.yaml
# =============================================================================


class ClientConfigSchema(_StrictBase):
    server: ServerSchema = Field(default_factory=ServerSchema)
    logging: LoggingSchema = Field(default_factory=LoggingSchema)
