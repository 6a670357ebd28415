# backend/config.py
from __future__ import annotations
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict
import json
import os
from dotenv import load_dotenv

from core.exceptions import ConfigError
from models.settings import AppConfig

# Load exactly backend/.env (do NOT call load_dotenv() without a path)
ENV_FILE = Path(__file__).with_name(".env")
load_dotenv(ENV_FILE, override=False)


def get_data_dir() -> Path:
    # Fallback to backend/data when DATA_DIR is not set
    return Path(os.getenv("DATA_DIR", str(Path(__file__).with_name("data")))).resolve()


def get_routes_file() -> Path:
    return Path(os.getenv("ROUTES_FILE", str(get_data_dir() / "routes.json")))


def get_cities_file() -> Path:
    return Path(os.getenv("CITIES_FILE", str(get_data_dir() / "cities-br.json")))


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "y", "on")


def _env_number(name: str, cast):
    raw = os.environ[name]
    try:
        return cast(raw.strip())
    except ValueError as e:
        raise ConfigError(f"{name} must be a number (got {raw!r})") from e


def _read_override_file() -> Dict[str, Any]:
    path = os.getenv("APP_CONFIG_FILE")
    if not path:
        return {}
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigError(f"Could not read APP_CONFIG_FILE {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"APP_CONFIG_FILE {path} must contain a JSON object")
    return data


def build_settings(overrides: Dict[str, Any] | None = None) -> AppConfig:
    """
    Build the configuration from (lowest to highest priority):
      1) model defaults
      2) APP_CONFIG_FILE (JSON object with any of the AppConfig blocks)
      3) environment variables
      4) explicit `overrides`
    """
    raw: Dict[str, Any] = _read_override_file()

    routing = dict(raw.get("routing") or {})
    if os.getenv("ROUTING_ENABLED") is not None:
        routing["enabled"] = _env_bool("ROUTING_ENABLED", False)
    if os.getenv("ROUTING_ENDPOINT"):
        routing["endpoint"] = os.environ["ROUTING_ENDPOINT"]
    if os.getenv("ROUTING_API_KEY"):
        routing["api_key"] = os.environ["ROUTING_API_KEY"]
    if os.getenv("ROUTING_CACHE_TTL_MS"):
        routing["cache_ttl_ms"] = _env_number("ROUTING_CACHE_TTL_MS", int)
    if os.getenv("HTTP_TIMEOUT_S"):
        routing["timeout_s"] = _env_number("HTTP_TIMEOUT_S", float)
    if routing:
        raw["routing"] = routing

    if os.getenv("DEFAULT_TRANSPORT"):
        defaults = dict(raw.get("defaults") or {})
        defaults["transport"] = os.environ["DEFAULT_TRANSPORT"]
        raw["defaults"] = defaults

    raw.update(overrides or {})
    try:
        return AppConfig(**raw)
    except ValueError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


@lru_cache(maxsize=1)
def get_settings() -> AppConfig:
    return build_settings()
