"""Process configuration from environment variables.

TALLY_DB_PATH          SQLite file (default data/tally.db)
TALLY_ALLOWED_ORIGINS  comma-separated CORS origins (default http://localhost:3000)
TALLY_LOG_LEVEL        logging level name (default INFO)
HOST, PORT             listen address (default 0.0.0.0:5051)
RELOAD                 "true" to run uvicorn with autoreload
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_DB_PATH = Path("data/tally.db")
DEFAULT_ALLOWED_ORIGINS = ("http://localhost:3000",)
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5051


@dataclass(frozen=True)
class Settings:
    """Resolved process settings."""

    db_path: Path = DEFAULT_DB_PATH
    allowed_origins: tuple[str, ...] = field(default=DEFAULT_ALLOWED_ORIGINS)
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    reload: bool = False


def _split_origins(raw: str) -> tuple[str, ...]:
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


def load_settings() -> Settings:
    """Build Settings from the current environment.

    Returns:
        Settings with environment overrides applied.

    Raises:
        ValueError: If PORT is not an integer.
    """
    origins = os.environ.get("TALLY_ALLOWED_ORIGINS")

    return Settings(
        db_path=Path(os.environ.get("TALLY_DB_PATH", str(DEFAULT_DB_PATH))),
        allowed_origins=_split_origins(origins) if origins else DEFAULT_ALLOWED_ORIGINS,
        host=os.environ.get("HOST", DEFAULT_HOST),
        port=int(os.environ.get("PORT", str(DEFAULT_PORT))),
        log_level=os.environ.get("TALLY_LOG_LEVEL", "INFO").upper(),
        reload=os.environ.get("RELOAD", "false").lower() == "true",
    )
