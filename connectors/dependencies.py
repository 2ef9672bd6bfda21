"""
FastAPI dependencies for inbound Nylas webhooks.

Provides ``verified_webhook_body`` which handlers declare to receive the
raw body of a request whose ``x-nylas-signature`` header checks out.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, Request, status

from config.settings import Settings, get_settings
from connectors.signature import verify_nylas_signature

logger = logging.getLogger(__name__)


async def verified_webhook_body(
    request: Request,
    x_nylas_signature: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> bytes:
    """
    Return the raw request body once its signature is verified.

    Raises ``HTTPException(503)`` when the client secret is not configured
    and ``HTTPException(401)`` on a missing or invalid signature.
    """
    if not settings.nylas_client_secret:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Nylas webhook is not configured (NYLAS_CLIENT_SECRET is not set).",
        )

    body = await request.body()
    if not verify_nylas_signature(body, x_nylas_signature, settings.nylas_client_secret):
        logger.warning("Rejected Nylas webhook with invalid signature")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing webhook signature",
        )
    return body
