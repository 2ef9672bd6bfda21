"""
Provider configuration: client credentials and OAuth endpoints per
provider kind (Gmail, Office365).

All lookups are pure: an unrecognised kind returns ``None``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple, Union

from config.settings import Settings
from connectors.constants import (
    FORM_URLENCODED,
    GOOGLE_OAUTH_ACCESS_TOKEN_URL,
    GOOGLE_OAUTH_AUTH_URL,
    GOOGLE_SCOPES,
    MICROSOFT_OAUTH_ACCESS_TOKEN_URL,
    MICROSOFT_OAUTH_AUTH_URL,
    MICROSOFT_SCOPES,
    OAUTH_CALLBACK_PATH,
)
from connectors.models import (
    ProviderConfigs,
    ProviderKind,
    ProviderOtherParams,
    ProviderParams,
    ProviderUrls,
)

logger = logging.getLogger(__name__)

KindLike = Union[ProviderKind, str]


def get_client_config(kind: KindLike, settings: Settings) -> Optional[Tuple[str, str]]:
    """Return ``(client_id, client_secret)`` for the provider."""
    provider = ProviderKind.parse(kind)
    if provider is ProviderKind.GMAIL:
        return settings.google_client_id, settings.google_client_secret
    if provider is ProviderKind.OFFICE365:
        return settings.microsoft_client_id, settings.microsoft_client_secret

    logger.debug("No client config for provider kind %r", kind)
    return None


def get_provider_settings(
    kind: KindLike,
    refresh_token: str,
    settings: Settings,
) -> Optional[Dict[str, Any]]:
    """
    Build the ``settings`` block Nylas expects when connecting an account
    with an existing provider refresh token.

    Field names differ per provider (``google_*`` vs ``microsoft_*``);
    Office365 additionally needs the callback ``redirect_uri``.
    """
    provider = ProviderKind.parse(kind)
    client_config = get_client_config(provider, settings) if provider else None
    if client_config is None:
        return None

    client_id, client_secret = client_config

    if provider is ProviderKind.GMAIL:
        return {
            "google_client_id": client_id,
            "google_client_secret": client_secret,
            "google_refresh_token": refresh_token,
        }

    return {
        "microsoft_client_id": client_id,
        "microsoft_client_secret": client_secret,
        "microsoft_refresh_token": refresh_token,
        "redirect_uri": f"{settings.domain}{OAUTH_CALLBACK_PATH}",
    }


def get_provider_configs(kind: KindLike) -> Optional[ProviderConfigs]:
    """Return the OAuth URLs, scopes and request hints for the provider."""
    provider = ProviderKind.parse(kind)

    if provider is ProviderKind.GMAIL:
        return ProviderConfigs(
            params=ProviderParams(access_type="offline", scope=GOOGLE_SCOPES),
            urls=ProviderUrls(
                auth_url=GOOGLE_OAUTH_AUTH_URL,
                token_url=GOOGLE_OAUTH_ACCESS_TOKEN_URL,
            ),
        )

    if provider is ProviderKind.OFFICE365:
        return ProviderConfigs(
            params=ProviderParams(scope=MICROSOFT_SCOPES),
            urls=ProviderUrls(
                auth_url=MICROSOFT_OAUTH_AUTH_URL,
                token_url=MICROSOFT_OAUTH_ACCESS_TOKEN_URL,
            ),
            other_params=ProviderOtherParams(header_type=FORM_URLENCODED),
        )

    return None
