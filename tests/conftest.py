"""Shared test configuration for refcal_lite."""

import logging
from collections.abc import Generator
from typing import Any

import pytest


@pytest.fixture(autouse=True)
def restore_logging_levels() -> Generator[None, Any, None]:
    """Restore logger levels touched by logging tests.

    configure_lite_logging() and _init_logging() change process-wide logger
    state; tests must not leak that into each other.
    """
    names = ("", "refcal_lite", "refcal_lite.calendar", "refcal_lite.domain", "refcal_lite.core", "icalendar")
    saved = {name: logging.getLogger(name).level for name in names}
    root_handlers = list(logging.getLogger().handlers)
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)
    root = logging.getLogger()
    for handler in list(root.handlers):
        if handler not in root_handlers:
            root.removeHandler(handler)


def pytest_configure(config: Any) -> None:
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: Whole-pipeline tests over complete feeds")
    config.addinivalue_line("markers", "fast: Tests that finish in milliseconds")
    config.addinivalue_line("markers", "critical_path: Core functionality tests")
