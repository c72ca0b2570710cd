"""Tests for configuration and initialization."""

from __future__ import annotations

import dataclasses
from unittest.mock import patch

import pytest

from klaw_outcome import ErrorFormat, OutcomeConfig, get_config, init

pytestmark = pytest.mark.usefixtures('reset_config')


class TestOutcomeConfig:
    """Tests for the OutcomeConfig dataclass."""

    def test_default_values(self) -> None:
        config = OutcomeConfig()
        assert config.log_level is None
        assert config.json_output is True
        assert config.error_format is ErrorFormat.MESSAGE

    def test_config_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            OutcomeConfig().log_level = 'DEBUG'  # type: ignore[misc]

    def test_error_format_from_string(self) -> None:
        assert ErrorFormat('qualified') is ErrorFormat.QUALIFIED
        with pytest.raises(ValueError):
            ErrorFormat('invalid')


class TestInit:
    """Tests for init() and get_config()."""

    def test_get_config_without_init(self) -> None:
        assert get_config() == OutcomeConfig()

    def test_init_sets_config(self) -> None:
        config = init(error_format=ErrorFormat.QUALIFIED, json_output=False)
        assert get_config() is config
        assert config.error_format is ErrorFormat.QUALIFIED
        assert config.json_output is False

    def test_init_accepts_string_format(self) -> None:
        assert init(error_format='QUALIFIED').error_format is ErrorFormat.QUALIFIED

    def test_init_configures_logging_when_level_given(self) -> None:
        with patch('klaw_outcome._config.configure_logging') as configure:
            init(log_level='DEBUG', json_output=False)
        configure.assert_called_once_with('DEBUG', json_output=False)

    def test_init_stays_silent_without_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('KLAW_OUTCOME_LOG_LEVEL', raising=False)
        with patch('klaw_outcome._config.configure_logging') as configure:
            init()
        configure.assert_not_called()


class TestEnvironment:
    """Tests for environment variable resolution."""

    def test_env_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('KLAW_OUTCOME_LOG_LEVEL', 'warning')
        monkeypatch.setenv('KLAW_OUTCOME_LOG_JSON', 'no')
        monkeypatch.setenv('KLAW_OUTCOME_ERROR_FORMAT', 'qualified')
        with patch('klaw_outcome._config.configure_logging') as configure:
            config = init()
        assert config == OutcomeConfig(
            log_level='WARNING',
            json_output=False,
            error_format=ErrorFormat.QUALIFIED,
        )
        configure.assert_called_once_with('WARNING', json_output=False)

    def test_arguments_override_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('KLAW_OUTCOME_ERROR_FORMAT', 'qualified')
        assert init(error_format=ErrorFormat.MESSAGE).error_format is ErrorFormat.MESSAGE

    def test_unknown_env_values_use_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('KLAW_OUTCOME_LOG_LEVEL', raising=False)
        monkeypatch.setenv('KLAW_OUTCOME_LOG_JSON', 'maybe')
        monkeypatch.setenv('KLAW_OUTCOME_ERROR_FORMAT', 'verbose')
        config = init()
        assert config.json_output is True
        assert config.error_format is ErrorFormat.MESSAGE
