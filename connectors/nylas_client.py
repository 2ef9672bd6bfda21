"""
Nylas SDK access: credential check, per-token session setup, request
forwarding and message sending.

Architecture:
  • Every call builds a short-lived ``nylas.Client`` bound to the user's
    access token via ``set_nylas_token()``; nothing is cached between calls.
  • Forwarded requests are an explicit ``NylasOperation`` mapped through
    ``_HANDLERS`` to a typed function calling the SDK.
  • The SDK is synchronous, so every call is offloaded to a thread via
    ``asyncio.to_thread()`` to keep the event loop free.
  • Failures never raise: they are logged at debug level and returned as
    an error ``NylasResult``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Dict, Optional

from nylas import Client

from config.settings import Settings
from connectors.constants import NYLAS_CURRENT_GRANT
from connectors.models import MessageDraft, NylasOperation, NylasResult

logger = logging.getLogger(__name__)


# ── Credentials / session ────────────────────────────────────────────────


def check_credentials(settings: Settings) -> bool:
    """Return True if the Nylas application credentials are configured."""
    return bool(settings.nylas_client_id and settings.nylas_client_secret)


def set_nylas_token(access_token: Optional[str], settings: Settings) -> Optional[Client]:
    """
    Build a Nylas client bound to ``access_token``.

    Returns None (and logs) when Nylas is not configured or the token is
    missing.
    """
    if not check_credentials(settings):
        logger.debug("Nylas is not configured")
        return None

    if not access_token:
        logger.debug("Access token not found")
        return None

    return Client(api_key=access_token, api_uri=settings.nylas_api_uri)


# ── Operation handlers ───────────────────────────────────────────────────
# List handlers take ``filter`` as query params, find handlers take the id.


def _messages_list(client: Client, filter: Any) -> Any:
    return client.messages.list(NYLAS_CURRENT_GRANT, query_params=filter).data


def _messages_find(client: Client, filter: Any) -> Any:
    return client.messages.find(NYLAS_CURRENT_GRANT, filter).data


def _threads_list(client: Client, filter: Any) -> Any:
    return client.threads.list(NYLAS_CURRENT_GRANT, query_params=filter).data


def _threads_find(client: Client, filter: Any) -> Any:
    return client.threads.find(NYLAS_CURRENT_GRANT, filter).data


def _drafts_list(client: Client, filter: Any) -> Any:
    return client.drafts.list(NYLAS_CURRENT_GRANT, query_params=filter).data


def _drafts_find(client: Client, filter: Any) -> Any:
    return client.drafts.find(NYLAS_CURRENT_GRANT, filter).data


def _folders_list(client: Client, filter: Any) -> Any:
    return client.folders.list(NYLAS_CURRENT_GRANT, query_params=filter).data


def _contacts_list(client: Client, filter: Any) -> Any:
    return client.contacts.list(NYLAS_CURRENT_GRANT, query_params=filter).data


def _attachments_download(client: Client, filter: Any) -> Any:
    return client.attachments.download_bytes(
        NYLAS_CURRENT_GRANT,
        filter["id"],
        {"message_id": filter["message_id"]},
    )


_HANDLERS: Dict[NylasOperation, Callable[[Client, Any], Any]] = {
    NylasOperation.MESSAGES_LIST: _messages_list,
    NylasOperation.MESSAGES_FIND: _messages_find,
    NylasOperation.THREADS_LIST: _threads_list,
    NylasOperation.THREADS_FIND: _threads_find,
    NylasOperation.DRAFTS_LIST: _drafts_list,
    NylasOperation.DRAFTS_FIND: _drafts_find,
    NylasOperation.FOLDERS_LIST: _folders_list,
    NylasOperation.CONTACTS_LIST: _contacts_list,
    NylasOperation.ATTACHMENTS_DOWNLOAD: _attachments_download,
}


# ── Public calls ─────────────────────────────────────────────────────────


async def nylas_request(
    settings: Settings,
    access_token: Optional[str],
    operation: NylasOperation,
    filter: Any = None,
) -> NylasResult:
    """
    Forward ``operation`` to the Nylas SDK with ``filter``.

    Use ``NylasOperation.from_path(parent, child)`` to map a
    ``(parent, child)`` selector such as ``("threads", "list")``.
    """
    client = set_nylas_token(access_token, settings)
    if client is None:
        return NylasResult.failure("Nylas session unavailable")

    handler = _HANDLERS[operation]
    try:
        data = await asyncio.to_thread(handler, client, filter)
    except Exception as exc:
        logger.debug("Nylas %s failed: %s", operation.value, exc)
        return NylasResult.failure(str(exc))

    return NylasResult.success(data)


async def nylas_send_message(
    settings: Settings,
    access_token: Optional[str],
    draft: MessageDraft,
) -> NylasResult:
    """Create a draft from ``draft`` and send it.  No retry on failure."""
    client = set_nylas_token(access_token, settings)
    if client is None:
        return NylasResult.failure("Nylas session unavailable")

    def _create_and_send() -> Any:
        created = client.drafts.create(
            NYLAS_CURRENT_GRANT, request_body=draft.to_request_body()
        ).data
        return client.drafts.send(NYLAS_CURRENT_GRANT, created.id).data

    try:
        message = await asyncio.to_thread(_create_and_send)
    except Exception as exc:
        logger.debug("Nylas send failed: %s", exc)
        return NylasResult.failure(str(exc))

    logger.debug("%s message was sent", message.id)
    return NylasResult.success(message)
