"""Shared test fixtures for the diffy test suite."""

from __future__ import annotations

import pytest

from diffy.config import DiffyConfig
from diffy.core.applier import ScriptApplier


@pytest.fixture
def config() -> DiffyConfig:
    """Default test configuration."""
    return DiffyConfig()


@pytest.fixture
def applier(config: DiffyConfig) -> ScriptApplier:
    """Script applier using the default test config."""
    return ScriptApplier(config)
