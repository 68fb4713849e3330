"""Pytest configuration.

Pins the runtime environment to "testing" and resets cached settings and
logger between tests so environment patches never leak.
"""

import pytest

from emailvo.core.config import get_email_format_settings, get_settings
from emailvo.core.container import get_logger

_CONFIG_ENV_VARS = (
    "LOG_LEVEL",
    "EMAIL_ALLOW_QUOTED_LOCAL",
    "EMAIL_ALLOW_DOMAIN_LITERAL",
    "EMAIL_ALLOW_SMTPUTF8",
    "EMAIL_GLOBALLY_DELIVERABLE",
    "EMAIL_STRICT",
)


@pytest.fixture(autouse=True)
def testing_environment(monkeypatch):
    """Run every test with ENVIRONMENT=testing and default email settings."""
    monkeypatch.setenv("ENVIRONMENT", "testing")
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    get_settings.cache_clear()
    get_email_format_settings.cache_clear()
    get_logger.cache_clear()
    yield
    get_settings.cache_clear()
    get_email_format_settings.cache_clear()
    get_logger.cache_clear()
