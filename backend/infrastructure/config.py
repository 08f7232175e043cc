"""Configuration utilities for infrastructure layer.

Values come from environment variables; a ``.env`` file next to the
backend (or in the working directory) is loaded first if present.

Example .env:
    PORT=3000
    LOG_LEVEL=DEBUG
    RATE_LIMIT_MAX_REQUESTS=100
    RATE_LIMIT_WINDOW_S=900
"""

import os
from dataclasses import dataclass
from typing import Tuple

from dotenv import load_dotenv

DEFAULT_APP_VERSION = "2.0.0"
DEFAULT_PORT = 3000
DEFAULT_RATE_LIMIT_WINDOW_S = 15 * 60
DEFAULT_RATE_LIMIT_MAX_REQUESTS = 100


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the calculator service."""

    app_version: str = DEFAULT_APP_VERSION
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    cors_allow_origins: Tuple[str, ...] = ("*",)
    rate_limit_enabled: bool = True
    rate_limit_window_s: int = DEFAULT_RATE_LIMIT_WINDOW_S
    rate_limit_max_requests: int = DEFAULT_RATE_LIMIT_MAX_REQUESTS


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def get_cors_allow_origins() -> Tuple[str, ...]:
    """
    Get allowed CORS origins.

    Reads a comma separated list from CORS_ALLOW_ORIGINS; defaults to "*"
    (every origin allowed).
    """
    raw = os.getenv("CORS_ALLOW_ORIGINS", "*")
    origins = tuple(o.strip() for o in raw.split(",") if o.strip())
    return origins or ("*",)


def load_settings(load_env_file: bool = True) -> Settings:
    """
    Build Settings from the environment.

    Args:
        load_env_file: Load ``.env`` before reading variables (existing
            environment variables are not overridden)

    Returns:
        Settings instance

    Raises:
        ValueError: If a numeric variable cannot be parsed
    """
    if load_env_file:
        load_dotenv()

    return Settings(
        app_version=os.getenv("APP_VERSION", DEFAULT_APP_VERSION),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_get_int("PORT", DEFAULT_PORT),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_allow_origins=get_cors_allow_origins(),
        rate_limit_enabled=_get_bool("RATE_LIMIT_ENABLED", True),
        rate_limit_window_s=_get_int(
            "RATE_LIMIT_WINDOW_S", DEFAULT_RATE_LIMIT_WINDOW_S
        ),
        rate_limit_max_requests=_get_int(
            "RATE_LIMIT_MAX_REQUESTS", DEFAULT_RATE_LIMIT_MAX_REQUESTS
        ),
    )
