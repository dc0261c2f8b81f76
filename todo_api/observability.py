from __future__ import annotations

import logging
import os
import sys

CONSOLE_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    name = (value or "").strip().upper()
    if not name:
        return default
    level = getattr(logging, name, None)
    return level if isinstance(level, int) else default


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def get_logger(name: str = "todo_api") -> logging.Logger:
    """Return a logger under the ``todo_api`` hierarchy.

    Only the package root logger gets a handler; child loggers propagate to it.
    """
    if name != "todo_api" and not name.startswith("todo_api."):
        name = f"todo_api.{name}"
    root = logging.getLogger("todo_api")
    if not root.handlers:
        root.addHandler(_console_handler())
        root.setLevel(_parse_level(os.getenv("TODO_API_LOG_LEVEL")))
        root.propagate = False
    return logging.getLogger(name)


def set_level(level: str | int) -> None:
    """Apply a level to the package root logger."""
    if isinstance(level, str):
        level = _parse_level(level)
    get_logger().setLevel(level)


def configure_uvicorn_logging(level: str | int = logging.INFO) -> None:
    """Bind uvicorn loggers to our console format and level.

    Replaces the handlers on "uvicorn", "uvicorn.error" and "uvicorn.access"
    with a single stdout handler.
    """
    if isinstance(level, str):
        level = _parse_level(level)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        lg = logging.getLogger(name)
        for h in list(lg.handlers):
            lg.removeHandler(h)
            h.close()
        lg.addHandler(_console_handler())
        lg.setLevel(level)
        lg.propagate = False


__all__ = ["configure_uvicorn_logging", "get_logger", "set_level"]
