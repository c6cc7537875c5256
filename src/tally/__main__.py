"""Entry point for running the Tally server."""

from __future__ import annotations

import logging

import uvicorn

from tally.config import load_settings


def main() -> None:
    """Run the Tally API server."""
    settings = load_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger(__name__).info(
        "Server starting on %s:%d", settings.host, settings.port
    )

    uvicorn.run(
        "tally.api.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
