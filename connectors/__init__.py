"""
connectors: Nylas integration helpers.

Provides the thin layer between the application and Nylas:
  • Provider (Gmail / Office365) OAuth configuration lookup
  • Per-token session setup and request forwarding to the Nylas SDK
  • Sending mail through drafts
  • Webhook signature verification
  • AES-256-CBC encryption of stored mailbox passwords
"""

from connectors.addresses import build_email_address
from connectors.encryption import PasswordCryptoError, decrypt_password, encrypt_password
from connectors.models import MessageDraft, NylasOperation, NylasResult, ProviderKind
from connectors.nylas_client import (
    check_credentials,
    nylas_request,
    nylas_send_message,
    set_nylas_token,
)
from connectors.providers import get_client_config, get_provider_configs, get_provider_settings
from connectors.signature import compute_nylas_signature, verify_nylas_signature

__all__ = [
    "MessageDraft",
    "NylasOperation",
    "NylasResult",
    "PasswordCryptoError",
    "ProviderKind",
    "build_email_address",
    "check_credentials",
    "compute_nylas_signature",
    "decrypt_password",
    "encrypt_password",
    "get_client_config",
    "get_provider_configs",
    "get_provider_settings",
    "nylas_request",
    "nylas_send_message",
    "set_nylas_token",
    "verify_nylas_signature",
]
