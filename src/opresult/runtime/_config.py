"""Library configuration: OutcomeConfig, init, and default resolution."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

from opresult.errors import ConfigurationError
from opresult.runtime._logging import configure_logging

__all__ = [
    'UNSET',
    'OutcomeConfig',
    'get_config',
    'init',
    'reset',
    'resolve_catch',
    'resolve_system_failure_code',
]

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class _Unset(Enum):
    UNSET = 'UNSET'

    def __repr__(self) -> str:
        return 'UNSET'


UNSET = _Unset.UNSET
"""Marker for "argument not passed", distinct from an explicit None."""


@dataclass(frozen=True)
class OutcomeConfig:
    """Configuration for opresult.

    Attributes:
        system_failure_code: Code handed to error handlers when a Failure is
            recovered through bind_error/use_error and the caller passed no
            code of its own. None means "no code".
        catch: Exception types that try_/try_async convert into Failure.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Emit JSON logs when logging is configured, else console output.
    """

    system_failure_code: int | None = None
    catch: tuple[type[BaseException], ...] = (BaseException,)
    log_level: str | None = None
    json_logs: bool = True


_DEFAULT = OutcomeConfig()

# Global configuration (set by init())
_config: OutcomeConfig | None = None


def _detect_system_failure_code() -> int | None:
    """Read OPRESULT_SYSTEM_FAILURE_CODE, if set."""
    raw = os.environ.get('OPRESULT_SYSTEM_FAILURE_CODE', '').strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        msg = f"OPRESULT_SYSTEM_FAILURE_CODE must be an integer, got '{raw}'"
        raise ConfigurationError(msg) from None


def _detect_log_level() -> str | None:
    """Read OPRESULT_LOG_LEVEL, if set."""
    raw = os.environ.get('OPRESULT_LOG_LEVEL', '').strip()
    return raw or None


def _validate_log_level(level: str | None) -> str | None:
    if level is None:
        return None
    if level.upper() not in _LOG_LEVELS:
        msg = f"Unknown log level '{level}', expected one of {', '.join(_LOG_LEVELS)}"
        raise ConfigurationError(msg)
    return level.upper()


def _validate_catch(catch: tuple[type[BaseException], ...]) -> tuple[type[BaseException], ...]:
    catch = tuple(catch)
    if not catch:
        msg = 'catch must name at least one exception type'
        raise ConfigurationError(msg)
    for exc_type in catch:
        if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
            msg = f'catch entries must be exception types, got {exc_type!r}'
            raise ConfigurationError(msg)
    return catch


def init(
    system_failure_code: int | None | _Unset = UNSET,
    catch: tuple[type[BaseException], ...] | None = None,
    log_level: str | None = None,
    *,
    json_logs: bool = True,
) -> OutcomeConfig:
    """Initialize opresult with the given configuration.

    Values not passed are read from the environment:
    ``OPRESULT_SYSTEM_FAILURE_CODE`` and ``OPRESULT_LOG_LEVEL``.

    Args:
        system_failure_code: Default code for recovered Failures.
        catch: Exception types converted into Failure by try_/try_async.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_logs: JSON output if True, console output otherwise.

    Returns:
        The OutcomeConfig that was set.

    Raises:
        ConfigurationError: If an argument or environment variable is invalid.

    Example:
        ```python
        from opresult.runtime import init

        init(system_failure_code=500, log_level='INFO')
        ```
    """
    global _config  # noqa: PLW0603

    if system_failure_code is UNSET:
        resolved_code = _detect_system_failure_code()
    elif system_failure_code is None or (
        isinstance(system_failure_code, int) and not isinstance(system_failure_code, bool)
    ):
        resolved_code = system_failure_code
    else:
        msg = f'system_failure_code must be an int or None, got {type(system_failure_code).__name__}'
        raise ConfigurationError(msg)

    resolved_catch = _validate_catch(catch) if catch is not None else _DEFAULT.catch
    resolved_level = _validate_log_level(log_level if log_level is not None else _detect_log_level())

    _config = OutcomeConfig(
        system_failure_code=resolved_code,
        catch=resolved_catch,
        log_level=resolved_level,
        json_logs=json_logs,
    )

    # Configure logging if level specified
    if resolved_level is not None:
        configure_logging(resolved_level, json_output=json_logs)

    return _config


def get_config() -> OutcomeConfig:
    """Get the current configuration, or the defaults if init() was never called."""
    return _config if _config is not None else _DEFAULT


def reset() -> None:
    """Drop the configuration set by init() and go back to the defaults."""
    global _config  # noqa: PLW0603
    _config = None


def resolve_system_failure_code(code: int | None | _Unset) -> int | None:
    """Return ``code``, or the configured default when it was not passed."""
    if code is UNSET:
        return get_config().system_failure_code
    return code


def resolve_catch(exceptions: tuple[type[BaseException], ...] | None) -> tuple[type[BaseException], ...]:
    """Return ``exceptions``, or the configured default when None."""
    if exceptions is None:
        return get_config().catch
    return _validate_catch(exceptions)
