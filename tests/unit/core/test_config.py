"""
Unit Tests for Configuration Management.

Failure scenarios use tmp_path to create controlled filesystems.
No mocking: the config loader is the system under test.
"""

from pathlib import Path

import pytest

from reclaw_cli.core.config import (
    Settings,
    find_project_root,
    get_client_config,
    get_server_base_url,
    get_settings,
    load_yaml_config,
)
from reclaw_cli.core.config_schema import DEFAULT_SERVER, ClientConfigSchema
from reclaw_cli.core.exceptions import ConfigurationError


def _make_project(root: Path, yaml_text: str | None = None) -> Path:
    (root / ".project_root").touch()
    if yaml_text is not None:
        settings_dir = root / "config" / "settings"
        settings_dir.mkdir(parents=True)
        (settings_dir / "client.yaml").write_text(yaml_text)
    return root


# =============================================================================
# find_project_root
# =============================================================================


class TestFindProjectRoot:
    """Tests for .project_root marker discovery."""

    def test_finds_marker_in_start_directory(self, tmp_path: Path) -> None:
        _make_project(tmp_path)
        assert find_project_root(tmp_path) == tmp_path.resolve()

    def test_finds_marker_in_ancestor(self, tmp_path: Path) -> None:
        _make_project(tmp_path)
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_project_root(nested) == tmp_path.resolve()

    def test_returns_none_without_marker(self, tmp_path: Path) -> None:
        assert find_project_root(tmp_path) is None


# =============================================================================
# load_yaml_config
# =============================================================================


class TestLoadYamlConfig:
    """Tests for YAML loading."""

    def test_reads_file(self, tmp_path: Path) -> None:
        _make_project(tmp_path, "server:\n  base_url: http://yaml:1\n")
        assert load_yaml_config("client.yaml", tmp_path) == {"server": {"base_url": "http://yaml:1"}}

    def test_empty_file_is_empty_dict(self, tmp_path: Path) -> None:
        _make_project(tmp_path, "")
        assert load_yaml_config("client.yaml", tmp_path) == {}

    def test_missing_file_is_empty_dict(self, tmp_path: Path) -> None:
        _make_project(tmp_path)
        assert load_yaml_config("client.yaml", tmp_path) == {}

    def test_outside_project_is_empty_dict(self, tmp_path: Path) -> None:
        assert load_yaml_config("client.yaml", tmp_path) == {}


# =============================================================================
# get_client_config
# =============================================================================


class TestGetClientConfig:
    """Tests for validated client configuration."""

    def test_defaults_outside_project(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)

        config = get_client_config()

        assert isinstance(config, ClientConfigSchema)
        assert config.server.base_url == DEFAULT_SERVER
        assert config.server.timeout == 30.0
        assert config.logging.level == "WARNING"

    def test_yaml_values_are_applied(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _make_project(tmp_path, "server:\n  base_url: https://gw.example\n  timeout: 5\nlogging:\n  level: DEBUG\n")
        monkeypatch.chdir(tmp_path)

        config = get_client_config()

        assert config.server.base_url == "https://gw.example"
        assert config.server.timeout == 5.0
        assert config.logging.level == "DEBUG"
        assert config.logging.file.enabled is False

    def test_unknown_key_is_rejected(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _make_project(tmp_path, "server:\n  base_url: http://x\n  retries: 3\n")
        monkeypatch.chdir(tmp_path)

        with pytest.raises(ConfigurationError) as exc_info:
            get_client_config()

        assert "client.yaml" in exc_info.value.message
        assert exc_info.value.code == "CFG_INVALID"

    @pytest.mark.parametrize(
        "yaml_text",
        ["server: [unclosed\n", "- server\n- logging\n", "just a string\n", "1: x\n", "server: 5\n"],
    )
    def test_malformed_file_is_configuration_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, yaml_text: str,
    ) -> None:
        _make_project(tmp_path, yaml_text)
        monkeypatch.chdir(tmp_path)

        with pytest.raises(ConfigurationError) as exc_info:
            get_client_config()

        assert "client.yaml" in exc_info.value.message

    def test_non_positive_timeout_is_rejected(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _make_project(tmp_path, "server:\n  timeout: 0\n")
        monkeypatch.chdir(tmp_path)

        with pytest.raises(ConfigurationError):
            get_client_config()

    def test_result_is_cached(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert get_client_config() is get_client_config()


# =============================================================================
# get_server_base_url
# =============================================================================


class TestGetServerBaseUrl:
    """Tests for flag > env > yaml > default precedence."""

    @pytest.fixture(autouse=True)
    def _project(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _make_project(tmp_path, "server:\n  base_url: http://yaml:1\n  timeout: 9\n")
        monkeypatch.chdir(tmp_path)

    def test_yaml_over_defaults(self) -> None:
        assert get_server_base_url() == ("http://yaml:1", 9.0)

    def test_env_over_yaml(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RECLAW_SERVER", "http://env:2")
        monkeypatch.setenv("RECLAW_TIMEOUT", "4.5")
        assert get_server_base_url() == ("http://env:2", 4.5)

    def test_flags_over_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RECLAW_SERVER", "http://env:2")
        assert get_server_base_url("http://flag:3", 1.0) == ("http://flag:3", 1.0)

    def test_empty_flag_is_not_replaced(self) -> None:
        base_url, _ = get_server_base_url("")
        assert base_url == ""


class TestSettings:
    """Tests for environment settings."""

    def test_unset_environment_leaves_none(self) -> None:
        settings = Settings()
        assert settings.server is None
        assert settings.timeout is None

    @pytest.mark.parametrize("value", ["abc", "0", "-1"])
    def test_invalid_timeout_is_configuration_error(
        self, monkeypatch: pytest.MonkeyPatch, value: str,
    ) -> None:
        monkeypatch.setenv("RECLAW_TIMEOUT", value)

        with pytest.raises(ConfigurationError) as exc_info:
            get_settings()

        assert "RECLAW_" in exc_info.value.message

    def test_prefix_is_case_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("reclaw_server", "http://lower:1")
        assert Settings().server == "http://lower:1"
