"""Pytest configuration and shared fixtures for klaw-outcome tests."""

import logging

import pytest
import structlog


@pytest.fixture
def sample_success():
    """Sample Success value for testing."""
    from klaw_outcome import Success

    return Success(5)


@pytest.fixture
def sample_failure():
    """Sample Failure value for testing."""
    from klaw_outcome import Failure

    return Failure(('error1', 'error2'))


@pytest.fixture
def reset_config():
    """Start and finish a test with the unconfigured defaults."""
    from klaw_outcome._config import reset

    root = logging.getLogger()
    level = root.level
    reset()
    structlog.reset_defaults()
    yield
    reset()
    structlog.reset_defaults()
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
