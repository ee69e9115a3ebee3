"""Environment-driven settings for the Sudoku solver service."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import TypeVar

_T = TypeVar("_T", int, float, str)

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def _env(name: str, default: _T) -> _T:
    """Read an environment variable, converting to the same type as *default*."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return type(default)(raw)
    except (TypeError, ValueError):
        return default


@dataclass
class Settings:
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


def load_settings() -> Settings:
    origins = _env("SUDOKU_CORS_ORIGINS", "*")
    return Settings(
        host=_env("SUDOKU_HOST", "0.0.0.0"),
        port=_env("SUDOKU_PORT", 8000),
        log_level=_env("SUDOKU_LOG_LEVEL", "INFO").strip().upper(),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
    )


def configure_logging(level: str | int) -> None:
    """Configure root logging once for an entry point.

    Raises ``ValueError`` for an unknown level name.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
