"""Structured logging for pipelines built on opresult.

The combinators never log on their own. Logging enters a pipeline through
``use`` and ``use_error``, and the helpers here build side effects shaped
for those two hooks::

    log = get_logger(__name__)
    outcome = use(outcome, log_success(log, 'order.created'))
    outcome = use_error(outcome, log_error(log, 'order.rejected'), failure_message)

Uses structlog's ProcessorFormatter to unify structlog and stdlib logging output,
ensuring third-party libraries also emit structured logs.
"""

from __future__ import annotations

import contextlib
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
    'log_error',
    'log_success',
    'remove_log_hook',
]


def _get_shared_processors() -> list[Any]:
    """Get processors shared between structlog and stdlib foreign logs."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _create_hook_processor(),
    ]


def _get_structlog_processors() -> list[Any]:
    """Get the full processor chain for structlog loggers."""
    return [
        *_get_shared_processors(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_renderer(json_output: bool = True) -> Any:
    """Get the appropriate renderer based on output format."""
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Configure structlog with ProcessorFormatter for unified output.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use colored console output.
    """
    structlog.configure(
        processors=_get_structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger.

    Args:
        name: Logger name. If None, uses the caller's module name.

    Returns:
        A structlog BoundLogger.
    """
    return structlog.get_logger(name)


# --- Pipeline side effects ---


def log_success(
    logger: Any,
    event: str,
    *,
    level: str = 'info',
    include_value: bool = True,
    **fields: Any,
) -> Callable[[Any], None]:
    """Build a ``use`` side effect that logs the success value.

    Args:
        logger: A structlog (or stdlib-compatible) logger.
        event: Event name to log.
        level: Logger method to call.
        include_value: Add the success value under the ``value`` key.
        **fields: Extra key/value pairs bound to every entry.
    """
    emit = getattr(logger, level)

    def _log(value: Any) -> None:
        if include_value:
            emit(event, value=value, **fields)
        else:
            emit(event, **fields)

    return _log


def log_error(
    logger: Any,
    event: str,
    *,
    level: str = 'warning',
    **fields: Any,
) -> Callable[[int | None, str], None]:
    """Build a ``use_error`` side effect that logs the error code and message."""
    emit = getattr(logger, level)

    def _log(code: int | None, message: str) -> None:
        emit(event, code=code, message=message, **fields)

    return _log


# --- Logging Hooks ---

_log_hooks: list[Callable[[dict[str, Any]], None]] = []


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Register a hook to be called for each log entry.

    Hooks receive a copy of the event dict and can be used for
    custom processing, metrics, alerting, etc.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Remove a previously registered log hook."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()


def _create_hook_processor() -> Callable[[Any, str, dict[str, Any]], dict[str, Any]]:
    """Create a processor that invokes log hooks."""

    def hook_processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for hook in _log_hooks:
            # A failing hook must not break the log call itself.
            with contextlib.suppress(Exception):
                hook(event_dict.copy())
        return event_dict

    return hook_processor
