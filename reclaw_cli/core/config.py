"""
Configuration Management.

The only thing the client needs to know is where the gateway lives and how
long to wait for it. Values are resolved in this order, first match wins:

    1. Command-line flags (--server, --timeout)
    2. Environment (RECLAW_SERVER, RECLAW_TIMEOUT)
    3. config/settings/client.yaml under the project root
    4. Schema defaults (http://127.0.0.1:18789, 30 seconds)

The project root is the nearest ancestor of the working directory holding a
.project_root marker file. Outside a project the YAML layer is skipped.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from reclaw_cli.core.config_schema import ClientConfigSchema
from reclaw_cli.core.exceptions import ConfigurationError

CONFIG_FILENAME = "client.yaml"


def find_project_root(start: Path | None = None) -> Path | None:
    """Find project root by looking for .project_root marker file."""
    current = (start or Path.cwd()).resolve()
    while current != current.parent:
        if (current / ".project_root").exists():
            return current
        current = current.parent
    return None


def load_yaml_config(filename: str, start: Path | None = None) -> dict[str, Any]:
    """
    Load a YAML configuration file from config/settings/.

    Returns an empty dict when there is no project root or the file
    does not exist; the schema defaults then apply.

    Raises:
        ConfigurationError: If the file is not valid YAML or its top level
            is not a mapping.
    """
    project_root = find_project_root(start)
    if project_root is None:
        return {}

    config_path = project_root / "config" / "settings" / filename
    if not config_path.exists():
        return {}

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {filename}:\n{e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in {filename}: expected a mapping, got {type(data).__name__}"
        )
    return data


class Settings(BaseSettings):
    """Environment overrides. Unset variables leave the YAML value in place."""

    server: str | None = None
    timeout: float | None = Field(default=None, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="RECLAW_",
        case_sensitive=False,
        extra="ignore",
    )


def _load_validated(filename: str, start: Path | None = None) -> ClientConfigSchema:
    """Load YAML and validate against the client schema."""
    raw = load_yaml_config(filename, start)
    try:
        return ClientConfigSchema.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


@lru_cache
def get_settings() -> Settings:
    """Get cached environment settings."""
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid RECLAW_* environment settings:\n{e}") from e


@lru_cache
def get_client_config() -> ClientConfigSchema:
    """Get cached client configuration from client.yaml."""
    return _load_validated(CONFIG_FILENAME)


def get_server_base_url(
    server: str | None = None,
    timeout: float | None = None,
) -> tuple[str, float]:
    """
    Resolve the gateway base URL and request timeout.

    Args:
        server: Value of --server, if given.
        timeout: Value of --timeout, if given.

    Returns:
        Tuple of (base_url, timeout_seconds). The URL is returned as
        configured; GatewayClient normalizes and validates it.
    """
    settings = get_settings()
    config = get_client_config().server

    if server is not None:
        base_url = server
    elif settings.server is not None:
        base_url = settings.server
    else:
        base_url = config.base_url

    if timeout is not None:
        effective_timeout = timeout
    elif settings.timeout is not None:
        effective_timeout = settings.timeout
    else:
        effective_timeout = config.timeout
    return base_url, float(effective_timeout)
