"""Shared pytest configuration and fixtures."""

import pytest

SETTINGS_ENV_VARS = (
    "APP_NAME",
    "APP_VERSION",
    "HOST",
    "PORT",
    "APP_PROFILES_ACTIVE",
    "SPRING_PROFILES_ACTIVE",
    "LOG_LEVEL",
)


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests requiring a container runtime")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every settings variable so defaults apply."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
