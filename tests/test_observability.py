"""Tests for logger setup."""

import logging

from todo_api.observability import configure_uvicorn_logging, get_logger, set_level


def test_child_loggers_share_package_handler() -> None:
    logger = get_logger("store")
    assert logger.name == "todo_api.store"
    root = logging.getLogger("todo_api")
    assert len(root.handlers) == 1
    assert root.propagate is False
    get_logger("todo_api.other")
    assert len(root.handlers) == 1


def test_set_level_accepts_names() -> None:
    original = get_logger().level
    try:
        set_level("debug")
        assert get_logger().level == logging.DEBUG
        set_level("bogus")
        assert get_logger().level == logging.INFO
    finally:
        set_level(original)


def test_configure_uvicorn_logging_replaces_handlers() -> None:
    access = logging.getLogger("uvicorn.access")
    access.addHandler(logging.NullHandler())
    configure_uvicorn_logging("warning")
    configure_uvicorn_logging("warning")
    assert len(access.handlers) == 1
    assert access.level == logging.WARNING
    assert access.propagate is False
