"""Pytest configuration and shared fixtures for klaw-bounded tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

import pytest
import structlog
from hypothesis import HealthCheck, settings
from klaw_bounded import _config, _logging
from klaw_bounded._logging import add_log_hook, clear_log_hooks, configure_logging

# reset_state is autouse; property tests never depend on it between examples
settings.register_profile('klaw', suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile('klaw')


@pytest.fixture(autouse=True)
def reset_state() -> Iterator[None]:
    """Reset global config and log hooks around each test."""
    _config.reset_config()
    clear_log_hooks()
    yield
    _config.reset_config()
    clear_log_hooks()
    _logging._configured = False
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)


@pytest.fixture
def log_events() -> list[dict[str, Any]]:
    """Enable DEBUG logging and collect every emitted event dict."""
    events: list[dict[str, Any]] = []
    configure_logging(level='DEBUG')
    add_log_hook(events.append)
    return events


@pytest.fixture
def sample_list() -> list[int]:
    """Three-element list for construction tests."""
    return [1, 2, 3]
