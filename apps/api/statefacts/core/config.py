from __future__ import annotations

"""Configuration helpers and environment-driven settings."""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

BUNDLED_STATES_PATH = Path(__file__).resolve().parents[1] / "data" / "states.json"


def _get_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return default


def _get_str(name: str, default: str) -> str:
    return os.getenv(name, default)


@dataclass(frozen=True)
class Settings:
    """Typed configuration values used across the backend."""

    cors_origins: list[str]
    facts_store_path: str
    states_data_path: str
    log_level: str
    host: str
    port: int


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment with defaults."""
    cors_raw = _get_str("CORS_ORIGINS", "*")
    cors_origins = [o.strip() for o in cors_raw.split(",") if o.strip()]
    if not cors_origins:
        cors_origins = ["*"]
    return Settings(
        cors_origins=cors_origins,
        facts_store_path=_get_str("FACTS_STORE_PATH", "data/funfacts.json"),
        states_data_path=_get_str("STATES_DATA_PATH", str(BUNDLED_STATES_PATH)),
        log_level=_get_str("LOG_LEVEL", "INFO").upper(),
        host=_get_str("HOST", "0.0.0.0"),
        port=_get_int("PORT", 3000),
    )


def resolve_data_path(path_str: str) -> Path:
    """Resolve relative data paths against the API root rather than the cwd."""
    path = Path(path_str)
    if path.is_absolute():
        return path
    api_root = Path(__file__).resolve().parents[2]
    return api_root / path
