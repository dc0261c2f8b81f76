"""Run the API with uvicorn: ``python -m todo_api``."""

from __future__ import annotations

import sys

import uvicorn

from todo_api.config import get_settings
from todo_api.observability import configure_uvicorn_logging, get_logger, set_level


def main() -> int:
    settings = get_settings()
    set_level(settings.log_level)
    configure_uvicorn_logging(settings.log_level)
    logger = get_logger("todo_api.server")

    logger.info("Starting server on port %d...", settings.port)
    try:
        uvicorn.run(
            "todo_api.main:app",
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
            log_config=None,
        )
    except Exception:
        logger.exception("Error starting server")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
