from __future__ import annotations

from dataclasses import dataclass
import json
import os
from pathlib import Path
from typing import Final

from convert_logic.providers.google import GOOGLE_TRANSLATE_BASE_URL

CONFIG_DIR_NAME: Final[str] = "vnconv"
CONFIG_FILE_NAME: Final[str] = "config.json"
DEFAULT_HOST: Final[str] = "127.0.0.1"
DEFAULT_PORT: Final[int] = 5000
HOST_ENV: Final[str] = "VNCONV_HOST"
PORT_ENV: Final[str] = "PORT"


@dataclass(frozen=True, slots=True)
class ServerConfig:
    host: str
    port: int


@dataclass(frozen=True, slots=True)
class TranslationConfig:
    endpoint: str
    timeout_seconds: float | None


@dataclass(frozen=True, slots=True)
class AppConfig:
    server: ServerConfig
    translation: TranslationConfig


def config_path() -> Path:
    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg_home) if xdg_home else Path.home() / ".config"
    return base / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    config = _default_config()
    if path.exists():
        try:
            raw_data = path.read_text(encoding="utf-8")
            payload: object = json.loads(raw_data)
        except (OSError, json.JSONDecodeError):
            payload = None
        if payload is not None:
            config = _parse_config(payload)
    return _apply_env_overrides(config)


def save_config(config: AppConfig, path: Path | None = None) -> None:
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = _config_to_dict(config)
    data = json.dumps(payload, ensure_ascii=True, indent=2)
    path.write_text(data, encoding="utf-8")


def _default_config() -> AppConfig:
    return AppConfig(
        server=ServerConfig(host=DEFAULT_HOST, port=DEFAULT_PORT),
        translation=TranslationConfig(
            endpoint=GOOGLE_TRANSLATE_BASE_URL,
            timeout_seconds=None,
        ),
    )


def _parse_config(payload: object) -> AppConfig:
    payload_dict = _get_dict(payload)
    if payload_dict is None:
        return _default_config()
    server_data = _get_dict(payload_dict.get("server")) or {}
    translation_data = _get_dict(payload_dict.get("translation")) or {}
    return AppConfig(
        server=ServerConfig(
            host=_get_str(server_data.get("host"), DEFAULT_HOST),
            port=_get_port(server_data.get("port"), DEFAULT_PORT),
        ),
        translation=TranslationConfig(
            endpoint=_get_str(
                translation_data.get("endpoint"), GOOGLE_TRANSLATE_BASE_URL
            ),
            timeout_seconds=_get_timeout(translation_data.get("timeout_seconds")),
        ),
    )


def _apply_env_overrides(config: AppConfig) -> AppConfig:
    host = os.environ.get(HOST_ENV, "").strip() or config.server.host
    port = _get_port(os.environ.get(PORT_ENV, "").strip(), config.server.port)
    if host == config.server.host and port == config.server.port:
        return config
    return AppConfig(
        server=ServerConfig(host=host, port=port),
        translation=config.translation,
    )


def _config_to_dict(config: AppConfig) -> dict[str, object]:
    return {
        "server": {
            "host": config.server.host,
            "port": config.server.port,
        },
        "translation": {
            "endpoint": config.translation.endpoint,
            "timeout_seconds": config.translation.timeout_seconds,
        },
    }


def _get_dict(value: object) -> dict[str, object] | None:
    if isinstance(value, dict):
        return value
    return None


def _get_str(value: object, fallback: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return fallback


def _get_port(value: object, fallback: int) -> int:
    if isinstance(value, bool):
        return fallback
    if isinstance(value, str):
        if not value.isdigit():
            return fallback
        value = int(value)
    if isinstance(value, int) and 0 < value < 65536:
        return value
    return fallback


def _get_timeout(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)) and value > 0:
        return float(value)
    return None
