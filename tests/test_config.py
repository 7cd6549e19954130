from __future__ import annotations

import json
from pathlib import Path

import pytest

from convert_logic.providers.google import GOOGLE_TRANSLATE_BASE_URL
from web_app.config import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    AppConfig,
    ServerConfig,
    TranslationConfig,
    config_path,
    load_config,
    save_config,
)


def test_missing_file_uses_defaults() -> None:
    config = load_config()

    assert config.server == ServerConfig(host=DEFAULT_HOST, port=DEFAULT_PORT)
    assert config.translation.endpoint == GOOGLE_TRANSLATE_BASE_URL
    assert config.translation.timeout_seconds is None


def test_config_path_follows_xdg(tmp_path: Path) -> None:
    assert config_path() == tmp_path / "config" / "vnconv" / "config.json"


def test_saved_config_round_trips() -> None:
    config = AppConfig(
        server=ServerConfig(host="0.0.0.0", port=8080),
        translation=TranslationConfig(endpoint="http://localhost:9000/t", timeout_seconds=4.5),
    )

    save_config(config)

    assert load_config() == config


def test_invalid_fields_fall_back_individually() -> None:
    path = config_path()
    path.parent.mkdir(parents=True)
    path.write_text(
        json.dumps(
            {
                "server": {"host": "", "port": 70000},
                "translation": {"endpoint": "http://mirror/t", "timeout_seconds": -1},
            }
        ),
        encoding="utf-8",
    )

    config = load_config()

    assert config.server == ServerConfig(host=DEFAULT_HOST, port=DEFAULT_PORT)
    assert config.translation == TranslationConfig(
        endpoint="http://mirror/t", timeout_seconds=None
    )


def test_unreadable_file_uses_defaults() -> None:
    path = config_path()
    path.parent.mkdir(parents=True)
    path.write_text("{not json", encoding="utf-8")

    assert load_config().server.port == DEFAULT_PORT


def test_environment_overrides_server(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8765")
    monkeypatch.setenv("VNCONV_HOST", "0.0.0.0")

    config = load_config()

    assert config.server == ServerConfig(host="0.0.0.0", port=8765)


def test_invalid_port_override_is_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "http")

    assert load_config().server.port == DEFAULT_PORT
