"""
/**
 * @file mandi_backend/config/settings.py
 * @description Startup configuration: defaults, config.json + config.local.json, then environment.
 */
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple
from urllib.parse import urlparse

from dotenv import load_dotenv


PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
CONFIG_PATH = os.path.join(PACKAGE_ROOT, "config.json")
CONFIG_LOCAL_PATH = os.path.join(PACKAGE_ROOT, "config.local.json")
CONFIG_EXAMPLE_PATH = os.path.join(PACKAGE_ROOT, "config.example.json")

DEFAULT_PORT = 5001
DEFAULT_ENDPOINT = "https://api.mymemory.translated.net/get"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

logger = logging.getLogger("config_loader")


class ConfigError(ValueError):
    pass


def _load_json(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            value = json.load(f)
            return value if isinstance(value, dict) else {}
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError as e:
        logger.error(f"Ignoring unreadable config file {path}: {e}")
        return {}


def _merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key] = _merge_dicts(base[key], value)
        else:
            base[key] = value
    return base


@dataclass(frozen=True)
class Settings:
    port: int = DEFAULT_PORT
    host: str = "0.0.0.0"
    translate_endpoint: str = DEFAULT_ENDPOINT
    source_lang: str = "en"
    engine_label: str = "MyMemory-Engine"
    upstream_timeout: Optional[float] = None
    cors_origins: Tuple[str, ...] = ("*",)
    log_level: str = "INFO"

    def validate(self) -> "Settings":
        if isinstance(self.port, bool) or not isinstance(self.port, int) or not (1 <= self.port <= 65535):
            raise ConfigError(f"port must be an integer between 1 and 65535, got {self.port!r}")
        parsed = urlparse(self.translate_endpoint or "")
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigError(f"translate_endpoint must be an http(s) URL, got {self.translate_endpoint!r}")
        if not self.source_lang:
            raise ConfigError("source_lang must not be empty")
        if self.upstream_timeout is not None and self.upstream_timeout <= 0:
            raise ConfigError(f"upstream_timeout must be positive, got {self.upstream_timeout!r}")
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}")
        return self


def _to_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    try:
        return int(str(value).strip())
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {value!r}")


def _to_timeout(value: Any) -> Optional[float]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"upstream_timeout must be a number of seconds, got {value!r}")


def _to_origins(value: Any) -> Tuple[str, ...]:
    if isinstance(value, str):
        items = [v.strip() for v in value.split(",")]
    elif isinstance(value, (list, tuple)):
        items = [str(v).strip() for v in value]
    else:
        raise ConfigError(f"cors_origins must be a list or comma separated string, got {value!r}")
    origins = tuple(v for v in items if v)
    return origins or ("*",)


# env var -> settings key
ENV_KEYS = {
    "PORT": "port",
    "HOST": "host",
    "MYMEMORY_ENDPOINT": "translate_endpoint",
    "UPSTREAM_TIMEOUT": "upstream_timeout",
    "LOG_LEVEL": "log_level",
    "CORS_ORIGINS": "cors_origins",
}


def build_settings(raw: Mapping[str, Any]) -> Settings:
    """Turn a merged raw mapping into a validated Settings instance."""
    defaults = Settings()
    server = raw.get("server") if isinstance(raw.get("server"), dict) else {}
    upstream = raw.get("upstream") if isinstance(raw.get("upstream"), dict) else {}

    port = raw.get("port", server.get("port", defaults.port))
    host = raw.get("host", server.get("host", defaults.host))
    origins = raw.get("cors_origins", server.get("cors_origins", defaults.cors_origins))
    log_level = raw.get("log_level", server.get("log_level", defaults.log_level))
    endpoint = raw.get("translate_endpoint", upstream.get("endpoint", defaults.translate_endpoint))
    timeout = raw.get("upstream_timeout", upstream.get("timeout", defaults.upstream_timeout))

    settings = Settings(
        port=_to_int("port", port),
        host=str(host).strip() or defaults.host,
        translate_endpoint=str(endpoint).strip(),
        source_lang=str(upstream.get("source_lang", defaults.source_lang)).strip(),
        engine_label=str(upstream.get("engine_label", defaults.engine_label)),
        upstream_timeout=_to_timeout(timeout),
        cors_origins=_to_origins(origins),
        log_level=str(log_level).strip().upper(),
    )
    return settings.validate()


def load_settings(
    base_path: str = CONFIG_PATH,
    local_path: str = CONFIG_LOCAL_PATH,
    example_path: str = CONFIG_EXAMPLE_PATH,
    environ: Optional[Mapping[str, str]] = None,
    dotenv: bool = True,
) -> Settings:
    """
    Resolve settings once at startup.
    Files are merged first (config.json, falling back to config.example.json,
    then config.local.json), environment variables override them.
    Raises ConfigError on invalid values.
    """
    if environ is None:
        if dotenv:
            load_dotenv()
        environ = os.environ

    base_cfg = _load_json(base_path)
    if not base_cfg and os.path.exists(example_path):
        base_cfg = _load_json(example_path)
    merged = _merge_dicts(base_cfg, _load_json(local_path))

    for env_name, key in ENV_KEYS.items():
        value = environ.get(env_name)
        if value is not None and value != "":
            merged[key] = value

    return build_settings(merged)
