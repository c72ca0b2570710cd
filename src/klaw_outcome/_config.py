"""Library configuration: ErrorFormat, OutcomeConfig, and initialization."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

from klaw_outcome._logging import configure_logging, get_logger

__all__ = [
    'ErrorFormat',
    'OutcomeConfig',
    'get_config',
    'init',
    'reset',
]

logger = get_logger(__name__)

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})


class ErrorFormat(Enum):
    """How captured exceptions are turned into error strings."""

    MESSAGE = 'message'
    QUALIFIED = 'qualified'


@dataclass(frozen=True)
class OutcomeConfig:
    """Configuration for klaw-outcome.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Render logs as JSON (True) or console text (False).
        error_format: Format used by @safe for captured exceptions.
    """

    log_level: str | None = None
    json_output: bool = True
    error_format: ErrorFormat = ErrorFormat.MESSAGE


_config: OutcomeConfig | None = None


def _env_log_level() -> str | None:
    value = os.environ.get('KLAW_OUTCOME_LOG_LEVEL', '').strip()
    return value.upper() or None


def _env_json_output() -> bool:
    value = os.environ.get('KLAW_OUTCOME_LOG_JSON', '').strip().lower()
    if not value or value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    logger.warning('Unknown KLAW_OUTCOME_LOG_JSON value, using JSON output', value=value)
    return True


def _env_error_format() -> ErrorFormat:
    value = os.environ.get('KLAW_OUTCOME_ERROR_FORMAT', '').strip().lower()
    if not value:
        return ErrorFormat.MESSAGE
    try:
        return ErrorFormat(value)
    except ValueError:
        logger.warning('Unknown KLAW_OUTCOME_ERROR_FORMAT value, using message', value=value)
        return ErrorFormat.MESSAGE


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
    error_format: ErrorFormat | str | None = None,
) -> OutcomeConfig:
    """Initialize klaw-outcome with the given configuration.

    Arguments left as None are read from the environment:
    KLAW_OUTCOME_LOG_LEVEL, KLAW_OUTCOME_LOG_JSON, KLAW_OUTCOME_ERROR_FORMAT.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_output: JSON (True) or console (False) log rendering.
        error_format: ErrorFormat enum or its string value.

    Returns:
        The OutcomeConfig that was set.

    Example:
        ```python
        from klaw_outcome import init, ErrorFormat

        init(log_level='DEBUG', error_format=ErrorFormat.QUALIFIED)
        ```
    """
    global _config  # noqa: PLW0603

    if log_level is None:
        log_level = _env_log_level()
    if json_output is None:
        json_output = _env_json_output()
    if error_format is None:
        resolved_format = _env_error_format()
    elif isinstance(error_format, str):
        resolved_format = ErrorFormat(error_format.lower())
    else:
        resolved_format = error_format

    _config = OutcomeConfig(
        log_level=log_level,
        json_output=json_output,
        error_format=resolved_format,
    )

    if log_level is not None:
        configure_logging(log_level, json_output=json_output)

    return _config


def get_config() -> OutcomeConfig:
    """Get the current configuration.

    Returns the defaults when init() has not been called, so the library
    works without any setup.
    """
    if _config is None:
        return OutcomeConfig()
    return _config


def reset() -> None:
    """Forget the configuration set by init()."""
    global _config  # noqa: PLW0603
    _config = None
