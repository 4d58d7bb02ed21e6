"""Pytest configuration and fixtures for cronbuilder tests."""

import pytest
from cronbuilder import CronExprBuilder, Config


@pytest.fixture
def builder():
    """Create a builder with default directives."""
    return CronExprBuilder()


@pytest.fixture
def bounded_builder():
    """Create a builder whose year field is limited to 2020-2030."""
    return CronExprBuilder(config=Config(year_min=2020, year_max=2030))


@pytest.fixture
def clean_env(monkeypatch):
    """Remove cronbuilder environment variables for the test."""
    for key in ("CRONBUILDER_YEAR_MIN", "CRONBUILDER_YEAR_MAX"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
