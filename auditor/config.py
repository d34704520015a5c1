"""Centralised settings for the anchor audit.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from the package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("ANCHOR_AUDIT_LOG_LEVEL", "WARNING")
    )

    # ------------------------------------------------------------------
    # Input limits
    # ------------------------------------------------------------------
    max_anchors: int = field(
        default_factory=lambda: int(os.environ.get("ANCHOR_AUDIT_MAX_ANCHORS", "10000"))
    )

    # ------------------------------------------------------------------
    # HTTP API
    # ------------------------------------------------------------------
    cors_origins: list[str] = field(
        default_factory=lambda: _split_origins(
            os.environ.get("ANCHOR_AUDIT_CORS_ORIGINS", "*")
        )
    )


def resolve_log_level(level: str | None = None) -> int:
    """Return the numeric logging level for *level* (or ``settings.log_level``).

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    name = (level or settings.log_level).strip().upper()
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ValueError(
            f"Unknown log level {name!r}; use DEBUG, INFO, WARNING, ERROR or CRITICAL."
        )
    return value


def configure_logging(level: str | None = None) -> None:
    """Apply *level* (or ``settings.log_level``) to the root logger.

    The level is set on the root logger even when a handler is already
    installed.
    """
    numeric = resolve_log_level(level)
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(numeric)


# Module-level singleton, import this everywhere:
#   from auditor.config import settings
settings = Settings()
