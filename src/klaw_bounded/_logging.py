"""Structured logging for klaw-bounded.

The library emits DEBUG events for rejected constructions, fit normalizations
and refused push/pop, and a WARNING when an `inner_mut` block leaves a
collection out of range. Events are dropped until `configure_logging` runs;
importing the package configures nothing.

Output is JSON on stderr, rendered through structlog's ProcessorFormatter so
stdlib records from other libraries share the same format.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'is_logging_enabled',
    'remove_log_hook',
]

type LogHook = Callable[[dict[str, Any]], None]

_configured = False
_log_hooks: list[LogHook] = []


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Processor passing a copy of each event to the registered hooks."""
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: S110
            pass  # a failing hook must not drop the event
    return event_dict


def _enrichers() -> list[Any]:
    """Processors applied to both structlog events and foreign stdlib records."""
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        _run_hooks,
    ]


def configure_logging(level: str = 'INFO') -> None:
    """Route structlog and stdlib logging to stderr as JSON at `level`.

    Replaces the root logger's handlers.
    """
    global _configured  # noqa: PLW0603

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_enrichers(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_enrichers(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _configured = True


def is_logging_enabled() -> bool:
    """Return True once `configure_logging` has run."""
    return _configured


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger bound to the stdlib logger `name`."""
    return structlog.get_logger(name)


# --- Hooks ---


def add_log_hook(hook: LogHook) -> None:
    """Call `hook` with a copy of every event dict, e.g. to count fit normalizations."""
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Unregister `hook`; unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Unregister every hook."""
    _log_hooks.clear()
