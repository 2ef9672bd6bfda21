"""
Webhook signature verification.

Nylas signs each webhook delivery with HMAC-SHA256 over the raw request
body, keyed with the application's client secret, and sends the hex digest
in the ``x-nylas-signature`` header.
"""

from __future__ import annotations

import hashlib
import hmac
from typing import Optional


def compute_nylas_signature(body: bytes, secret: str) -> str:
    return hmac.new(secret.encode(), body, hashlib.sha256).hexdigest()


def verify_nylas_signature(body: bytes, signature: Optional[str], secret: str) -> bool:
    """Constant-time check of the signature header against the body digest."""
    if not signature or not secret:
        return False
    expected = compute_nylas_signature(body, secret)
    return hmac.compare_digest(expected.encode(), signature.encode())
