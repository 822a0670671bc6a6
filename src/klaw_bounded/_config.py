"""Library configuration: BoundedConfig, init() and environment detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_bounded._logging import configure_logging

__all__ = [
    'BoundedConfig',
    'get_config',
    'init',
    'reset_config',
]

_TRUE_VALUES = frozenset({'1', 'true', 'yes', 'on'})
_FALSE_VALUES = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class BoundedConfig:
    """Configuration for klaw-bounded.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        strict_inner_mut: Raise `LengthRangeError` when an `inner_mut()` block
            leaves the collection out of range, instead of only logging it.
    """

    log_level: str | None = None
    strict_inner_mut: bool = False


# Global configuration (set by init())
_config: BoundedConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from KLAW_BOUNDED_LOG_LEVEL, if set."""
    level = os.environ.get('KLAW_BOUNDED_LOG_LEVEL', '').strip()
    return level.upper() or None


def _detect_strict() -> bool:
    """Read strict inner_mut checking from KLAW_BOUNDED_STRICT.

    Accepts 1/true/yes/on and 0/false/no/off (case-insensitive).
    Unknown values fall back to False.
    """
    value = os.environ.get('KLAW_BOUNDED_STRICT', '').strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value and value not in _FALSE_VALUES:
        logging.warning("Unknown KLAW_BOUNDED_STRICT value '%s', defaulting to off", value)
    return False


def init(
    log_level: str | None = None,
    *,
    strict_inner_mut: bool | None = None,
) -> BoundedConfig:
    """Initialize klaw-bounded with the specified configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from the
            environment if None; None there too means silent.
        strict_inner_mut: Raise on out-of-range `inner_mut()` blocks.
            Read from the environment if None.

    Returns:
        The BoundedConfig that was set.

    Example:
        ```python
        from klaw_bounded import init

        init(log_level='DEBUG', strict_inner_mut=True)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level if log_level is not None else _detect_log_level()
    resolved_strict = strict_inner_mut if strict_inner_mut is not None else _detect_strict()

    _config = BoundedConfig(
        log_level=resolved_level,
        strict_inner_mut=resolved_strict,
    )

    if resolved_level is not None:
        configure_logging(resolved_level)

    return _config


def get_config() -> BoundedConfig:
    """Get the current configuration.

    Returns the defaults when init() has not been called.
    """
    if _config is None:
        return BoundedConfig()
    return _config


def reset_config() -> None:
    """Forget the configuration set by init()."""
    global _config  # noqa: PLW0603
    _config = None
