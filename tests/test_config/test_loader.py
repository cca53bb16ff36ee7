"""Tests for config loading."""
from __future__ import annotations

import logging
from pathlib import Path

import pytest

from uritag.config.defaults import DEFAULT_CONFIG_YAML
from uritag.config.loader import configure_logging, load_config
from uritag.config.schema import UriTagConfig
from uritag.core.routes import RouteTable


@pytest.fixture(autouse=True)
def _isolate(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("URITAG_BASE_URL", raising=False)
    monkeypatch.delenv("URITAG_LOG_LEVEL", raising=False)


def test_load_default_config() -> None:
    config = load_config(None)
    assert isinstance(config, UriTagConfig)
    assert config.routes.base_url is None
    assert config.routes.patterns == {}
    assert config.logging.level == "WARNING"


def test_load_from_yaml(sample_config_path: Path) -> None:
    config = load_config(sample_config_path)
    assert config.routes.base_url == "https://api.example.com/v1"
    assert config.routes.patterns["member"] == "/groups/{group}/members/{user}"
    assert config.logging.level == "DEBUG"


def test_default_path_in_working_directory(tmp_path: Path) -> None:
    (tmp_path / "uritag.yaml").write_text(DEFAULT_CONFIG_YAML, encoding="utf-8")
    config = load_config(None)
    assert config.routes.patterns["user"] == "/users/{}"


def test_missing_explicit_path(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_non_mapping_yaml(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        load_config(path)


def test_non_mapping_patterns(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("routes:\n  patterns: [a, b]\n", encoding="utf-8")
    with pytest.raises(ValueError, match="patterns"):
        load_config(path)


def test_empty_yaml(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == UriTagConfig.create_default()


def test_env_override(monkeypatch: pytest.MonkeyPatch, sample_config_path: Path) -> None:
    monkeypatch.setenv("URITAG_BASE_URL", "http://localhost:8080")
    monkeypatch.setenv("URITAG_LOG_LEVEL", "info")
    config = load_config(sample_config_path)
    assert config.routes.base_url == "http://localhost:8080"
    assert config.logging.level == "INFO"


def test_explicit_overrides_beat_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("URITAG_BASE_URL", "http://localhost:8080")
    config = load_config(None, overrides={"routes.base_url": "/api"})
    assert config.routes.base_url == "/api"


def test_unknown_keys_warn(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "extra.yaml"
    path.write_text("routes:\n  prefix: /x\nextra: 1\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="uritag.config.loader"):
        load_config(path)
    assert "prefix" in caplog.text
    assert "extra" in caplog.text


def test_routes_from_loaded_config(sample_config_path: Path) -> None:
    routes = RouteTable.from_config(load_config(sample_config_path).routes)
    result = routes.build("member", group="admin/manager", user="john.doe")
    assert result == "https://api.example.com/v1/groups/admin%2Fmanager/members/john.doe"


def test_configure_logging() -> None:
    config = UriTagConfig.create_default()
    config.logging.level = "DEBUG"
    logger = logging.getLogger("uritag")
    previous = logger.level
    try:
        configure_logging(config)
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(previous)


def test_configure_logging_rejects_unknown_level() -> None:
    config = UriTagConfig.create_default()
    config.logging.level = "LOUD"
    with pytest.raises(ValueError, match="log level"):
        configure_logging(config)
