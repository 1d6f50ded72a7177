"""Tests for runtime configuration and initialization."""

from __future__ import annotations

import dataclasses
import logging
import os
from unittest.mock import patch

import pytest

from opresult import ConfigurationError, OutcomeError
from opresult.runtime import (
    UNSET,
    OutcomeConfig,
    get_config,
    init,
    reset,
    resolve_catch,
    resolve_system_failure_code,
)
from opresult.runtime._config import _detect_log_level, _detect_system_failure_code


@pytest.fixture
def clean_env():
    """Run with no OPRESULT_* variables set."""
    env = {k: v for k, v in os.environ.items() if not k.startswith('OPRESULT_')}
    with patch.dict(os.environ, env, clear=True):
        yield


class TestOutcomeConfig:
    """Tests for the OutcomeConfig dataclass."""

    def test_default_values(self) -> None:
        config = OutcomeConfig()
        assert config.system_failure_code is None
        assert config.catch == (BaseException,)
        assert config.log_level is None
        assert config.json_logs is True

    def test_config_is_frozen(self) -> None:
        config = OutcomeConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.system_failure_code = 1  # type: ignore[misc]


class TestEnvironmentDetection:
    """Tests for reading OPRESULT_* variables."""

    def test_system_failure_code_from_env(self) -> None:
        with patch.dict(os.environ, {'OPRESULT_SYSTEM_FAILURE_CODE': ' 500 '}):
            assert _detect_system_failure_code() == 500

    def test_system_failure_code_unset(self, clean_env) -> None:
        assert _detect_system_failure_code() is None

    def test_system_failure_code_invalid_raises(self) -> None:
        with patch.dict(os.environ, {'OPRESULT_SYSTEM_FAILURE_CODE': 'five hundred'}):
            with pytest.raises(ConfigurationError, match='OPRESULT_SYSTEM_FAILURE_CODE'):
                _detect_system_failure_code()

    def test_log_level_from_env(self) -> None:
        with patch.dict(os.environ, {'OPRESULT_LOG_LEVEL': 'debug'}):
            assert _detect_log_level() == 'debug'

    def test_log_level_blank_is_none(self) -> None:
        with patch.dict(os.environ, {'OPRESULT_LOG_LEVEL': '  '}):
            assert _detect_log_level() is None


class TestInit:
    """Tests for init(), get_config() and reset()."""

    def test_get_config_before_init_returns_defaults(self) -> None:
        assert get_config() == OutcomeConfig()

    def test_init_with_defaults(self, clean_env) -> None:
        config = init()
        assert config == OutcomeConfig()
        assert get_config() is config

    def test_init_with_system_failure_code(self) -> None:
        assert init(system_failure_code=503).system_failure_code == 503

    def test_explicit_none_beats_environment(self) -> None:
        with patch.dict(os.environ, {'OPRESULT_SYSTEM_FAILURE_CODE': '500'}):
            assert init(system_failure_code=None).system_failure_code is None

    def test_environment_used_when_not_passed(self) -> None:
        with patch.dict(os.environ, {'OPRESULT_SYSTEM_FAILURE_CODE': '500'}):
            assert init().system_failure_code == 500

    @pytest.mark.parametrize('bad', ['500', 5.0, True])
    def test_init_rejects_non_int_code(self, bad) -> None:
        with pytest.raises(ConfigurationError):
            init(system_failure_code=bad)

    def test_init_with_catch(self) -> None:
        assert init(catch=(ValueError, KeyError)).catch == (ValueError, KeyError)

    @pytest.mark.parametrize('bad', [(), (ValueError, 'KeyError'), (int,)])
    def test_init_rejects_bad_catch(self, bad) -> None:
        with pytest.raises(ConfigurationError):
            init(catch=bad)

    def test_init_with_log_level(self, clean_env) -> None:
        config = init(log_level='debug', json_logs=False)
        assert config.log_level == 'DEBUG'
        assert config.json_logs is False
        assert logging.getLogger().level == logging.DEBUG

    def test_init_log_level_from_env(self) -> None:
        with patch.dict(os.environ, {'OPRESULT_LOG_LEVEL': 'warning'}):
            assert init().log_level == 'WARNING'
        assert logging.getLogger().level == logging.WARNING

    def test_init_rejects_unknown_log_level(self) -> None:
        with pytest.raises(ConfigurationError, match='Unknown log level'):
            init(log_level='LOUD')

    def test_init_failure_keeps_previous_config(self) -> None:
        first = init(system_failure_code=1)
        with pytest.raises(ConfigurationError):
            init(log_level='LOUD')
        assert get_config() is first

    def test_reset_restores_defaults(self) -> None:
        init(system_failure_code=1, catch=(KeyError,))
        reset()
        assert get_config() == OutcomeConfig()

    def test_configuration_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            init(log_level='LOUD')
        assert issubclass(ConfigurationError, OutcomeError)


class TestResolution:
    """Tests for resolving per-call arguments against the configuration."""

    def test_unset_code_uses_config(self) -> None:
        assert resolve_system_failure_code(UNSET) is None
        init(system_failure_code=418)
        assert resolve_system_failure_code(UNSET) == 418

    def test_explicit_code_wins(self) -> None:
        init(system_failure_code=418)
        assert resolve_system_failure_code(7) == 7
        assert resolve_system_failure_code(None) is None

    def test_none_catch_uses_config(self) -> None:
        assert resolve_catch(None) == (BaseException,)
        init(catch=(OSError,))
        assert resolve_catch(None) == (OSError,)

    def test_explicit_catch_is_validated(self) -> None:
        assert resolve_catch((KeyError,)) == (KeyError,)
        with pytest.raises(ConfigurationError):
            resolve_catch(())

    def test_unset_repr(self) -> None:
        assert repr(UNSET) == 'UNSET'
