"""Tests for runtime logging configuration, hooks, and pipeline side effects."""

from __future__ import annotations

from typing import Any

import pytest

from opresult import Error, Failure, Success, failure_message, use, use_error
from opresult.runtime import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    log_error,
    log_success,
    remove_log_hook,
)


@pytest.fixture(autouse=True)
def cleanup_hooks() -> None:
    """Clear log hooks before and after each test."""
    clear_log_hooks()
    yield
    clear_log_hooks()


@pytest.fixture
def captured() -> list[dict[str, Any]]:
    """Configure logging and collect every event dict through a hook."""
    received: list[dict[str, Any]] = []
    configure_logging(level='DEBUG', json_output=True)
    add_log_hook(received.append)
    return received


def _events(received: list[dict[str, Any]], name: str) -> list[dict[str, Any]]:
    return [e for e in received if e.get('event') == name]


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self, captured: list[dict[str, Any]]) -> None:
        """Registered hooks receive log entry dicts."""
        get_logger('test').info('Test message', extra_field='extra_value')

        entries = _events(captured, 'Test message')
        assert len(entries) == 1
        assert entries[0]['extra_field'] == 'extra_value'
        assert entries[0]['level'] == 'info'

    def test_remove_hook(self) -> None:
        """remove_log_hook() stops the hook from being called."""
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append('called')

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(hook)

        logger = get_logger('test')
        logger.info('First')
        assert len(calls) == 1

        remove_log_hook(hook)
        logger.info('Second')
        assert len(calls) == 1

    def test_remove_unknown_hook_is_noop(self) -> None:
        remove_log_hook(lambda event_dict: None)

    def test_hook_exception_does_not_break_logging(self) -> None:
        """Exceptions in hooks don't prevent logging or other hooks."""
        calls: list[str] = []

        def bad_hook(event_dict: dict[str, Any]) -> None:
            raise RuntimeError('Hook failed')

        def good_hook(event_dict: dict[str, Any]) -> None:
            calls.append('good')

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(bad_hook)
        add_log_hook(good_hook)

        get_logger('test').info('Test')

        assert calls == ['good']

    def test_hook_receives_copy_of_event_dict(self) -> None:
        """Hooks receive a copy, not the original event dict."""
        seen: list[dict[str, Any]] = []

        def mutating_hook(event_dict: dict[str, Any]) -> None:
            event_dict['mutated'] = True

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(mutating_hook)
        add_log_hook(seen.append)

        get_logger('test').info('Test')

        assert 'mutated' not in seen[0]


class TestPipelineSideEffects:
    """Tests for log_success and log_error used through use/use_error."""

    def test_log_success_logs_value(self, captured: list[dict[str, Any]]) -> None:
        logger = get_logger('orders')
        outcome = Success(42)

        assert use(outcome, log_success(logger, 'order.created', order_id='A1')) is outcome

        (entry,) = _events(captured, 'order.created')
        assert entry['value'] == 42
        assert entry['order_id'] == 'A1'
        assert entry['level'] == 'info'

    def test_log_success_without_value(self, captured: list[dict[str, Any]]) -> None:
        use(Success('secret'), log_success(get_logger('auth'), 'token.issued', include_value=False))

        (entry,) = _events(captured, 'token.issued')
        assert 'value' not in entry

    def test_log_success_skips_non_success(self, captured: list[dict[str, Any]]) -> None:
        use(Error('bad'), log_success(get_logger('orders'), 'order.created'))
        assert _events(captured, 'order.created') == []

    def test_log_error_logs_code_and_message(self, captured: list[dict[str, Any]]) -> None:
        logger = get_logger('orders')
        outcome = Error('out of stock', 409)

        assert use_error(outcome, log_error(logger, 'order.rejected'), failure_message) is outcome

        (entry,) = _events(captured, 'order.rejected')
        assert entry['code'] == 409
        assert entry['message'] == 'out of stock'
        assert entry['level'] == 'warning'

    def test_log_error_on_failure_uses_projection(self, captured: list[dict[str, Any]]) -> None:
        logger = get_logger('orders')
        use_error(
            Failure(ConnectionError('db unreachable')),
            log_error(logger, 'order.failed', level='error', attempt=2),
            failure_message,
            500,
        )

        (entry,) = _events(captured, 'order.failed')
        assert entry['code'] == 500
        assert entry['message'] == 'db unreachable'
        assert entry['attempt'] == 2
        assert entry['level'] == 'error'

    def test_log_error_skips_success(self, captured: list[dict[str, Any]]) -> None:
        use_error(Success(1), log_error(get_logger('orders'), 'order.rejected'), failure_message)
        assert _events(captured, 'order.rejected') == []
