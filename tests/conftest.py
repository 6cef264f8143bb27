"""Shared fixtures for the test suite."""

import pytest

SCHEMA_VARS = (
    "NEXT_PUBLIC_API_BASE_URL",
    "NEXT_PUBLIC_SENTRY_DSN",
    "SENTRY_AUTH_TOKEN",
    "SENTRY_ORG",
    "SENTRY_PROJECT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the host environment from leaking into configuration tests."""
    for name in SCHEMA_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def full_env(monkeypatch) -> dict[str, str]:
    """Set every schema variable to a valid value."""
    values = {
        "NEXT_PUBLIC_API_BASE_URL": "https://api.example.com",
        "NEXT_PUBLIC_SENTRY_DSN": "https://dsn.example.com/1",
        "SENTRY_AUTH_TOKEN": "tok",
        "SENTRY_ORG": "org",
        "SENTRY_PROJECT": "proj",
    }
    for name, value in values.items():
        monkeypatch.setenv(name, value)
    return values
