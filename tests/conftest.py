"""Pytest configuration and shared fixtures for opresult tests."""

import pytest


@pytest.fixture(autouse=True)
def default_config():
    """Run every test against the default configuration."""
    from opresult.runtime import reset

    reset()
    yield
    reset()


@pytest.fixture
def sample_success():
    """Sample Success value for testing."""
    from opresult import Success

    return Success(42)


@pytest.fixture
def sample_error():
    """Sample Error value for testing."""
    from opresult import Error

    return Error('invalid input', 400)


@pytest.fixture
def sample_failure():
    """Sample Failure value for testing."""
    from opresult import Failure

    return Failure(RuntimeError('disk on fire'))


class Recorder:
    """Callable that records every call it receives."""

    def __init__(self, returns=None):
        self.calls = []
        self.returns = returns

    def __call__(self, *args):
        self.calls.append(args)
        return self.returns


@pytest.fixture
def recorder():
    """Factory for call-recording callables."""
    return Recorder
