"""
Shared fixtures for connector tests.
"""

import pytest

from config.settings import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        nylas_client_id="nylas-id",
        nylas_client_secret="nylas-secret",
        encryption_key="0123456789abcdef0123456789abcdef",
        google_client_id="google-id",
        google_client_secret="google-secret",
        microsoft_client_id="ms-id",
        microsoft_client_secret="ms-secret",
        domain="https://mail.example.com",
    )


@pytest.fixture
def unconfigured_settings() -> Settings:
    return Settings(_env_file=None, nylas_client_id="", nylas_client_secret="")


@pytest.fixture
def key(settings) -> str:
    return settings.encryption_key
