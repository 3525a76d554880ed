"""Runtime configuration read from the environment.

Values come from process environment variables, optionally seeded from a
``.env`` file in the working directory or the project root.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

_PROJECT_ROOT = Path(__file__).resolve().parent.parent

DEFAULT_CORS_ORIGINS = ("http://localhost:3000",)
DEFAULT_CURRENCY = "TL"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    cors_origins: tuple[str, ...] = field(default=DEFAULT_CORS_ORIGINS)
    currency: str = DEFAULT_CURRENCY
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(*, load_env_file: bool = True) -> Settings:
    """Build Settings from ``MALIYET_*`` environment variables.

    - ``MALIYET_CORS_ORIGINS``: comma-separated allowed origins
    - ``MALIYET_CURRENCY``: currency label appended to formatted amounts
    - ``MALIYET_LOG_LEVEL``: level name for the ``maliyet`` logger
    """
    if load_env_file:
        load_dotenv(_PROJECT_ROOT / ".env")
        load_dotenv()

    raw_origins = os.environ.get("MALIYET_CORS_ORIGINS", "")
    origins = tuple(o.strip() for o in raw_origins.split(",") if o.strip())

    return Settings(
        cors_origins=origins or DEFAULT_CORS_ORIGINS,
        currency=os.environ.get("MALIYET_CURRENCY", "").strip() or DEFAULT_CURRENCY,
        log_level=(
            os.environ.get("MALIYET_LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL
        ),
    )


def configure_logging(settings: Settings) -> None:
    """Apply the configured level to the package logger."""
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO
    logging.getLogger("maliyet").setLevel(level)
