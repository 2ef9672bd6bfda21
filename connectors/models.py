"""
Pydantic models and enums shared by the Nylas connector helpers.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from connectors.addresses import build_email_address


class ProviderKind(str, Enum):
    GMAIL = "gmail"
    OFFICE365 = "office365"

    @classmethod
    def parse(cls, kind: Any) -> Optional["ProviderKind"]:
        """Return the matching kind, or None for anything unrecognised."""
        try:
            return cls(kind)
        except ValueError:
            return None


class NylasOperation(str, Enum):
    """SDK calls that may be forwarded, keyed by ``<parent>.<child>``."""

    MESSAGES_LIST = "messages.list"
    MESSAGES_FIND = "messages.find"
    THREADS_LIST = "threads.list"
    THREADS_FIND = "threads.find"
    DRAFTS_LIST = "drafts.list"
    DRAFTS_FIND = "drafts.find"
    FOLDERS_LIST = "folders.list"
    CONTACTS_LIST = "contacts.list"
    ATTACHMENTS_DOWNLOAD = "attachments.download"

    @classmethod
    def from_path(cls, parent: str, child: str) -> "NylasOperation":
        try:
            return cls(f"{parent}.{child}")
        except ValueError:
            raise ValueError(f"Unsupported Nylas operation: {parent}.{child}") from None

    @property
    def path(self) -> Tuple[str, str]:
        parent, child = self.value.split(".", 1)
        return parent, child


# ── Provider configuration ──────────────────────────────────────────────


class ProviderUrls(BaseModel):
    auth_url: str
    token_url: str


class ProviderParams(BaseModel):
    scope: str
    access_type: Optional[str] = None


class ProviderOtherParams(BaseModel):
    header_type: str


class ProviderConfigs(BaseModel):
    params: ProviderParams
    urls: ProviderUrls
    other_params: Optional[ProviderOtherParams] = None


# ── Messages ────────────────────────────────────────────────────────────


class EmailAddress(BaseModel):
    email: str
    name: Optional[str] = None


class MessageDraft(BaseModel):
    """
    Unsent message handed to the SDK.

    Recipient fields accept either a list of addresses or a
    comma-separated string (``"a@x.com,b@y.com"``).
    """

    to: List[EmailAddress] = Field(default_factory=list)
    cc: Optional[List[EmailAddress]] = None
    bcc: Optional[List[EmailAddress]] = None
    subject: str = ""
    body: str = ""
    reply_to_message_id: Optional[str] = None
    attachments: Optional[List[Dict[str, Any]]] = None

    @field_validator("to", "cc", "bcc", mode="before")
    @classmethod
    def _split_recipients(cls, value: Any) -> Any:
        if isinstance(value, str):
            return build_email_address(value) or []
        return value

    def to_request_body(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


# ── Results ─────────────────────────────────────────────────────────────


class NylasResult(BaseModel):
    """
    Outcome of a call to Nylas.  Failures are reported here instead of
    being raised, so callers can tell "no data" apart from "call failed".
    """

    status: str = "success"  # "success" | "error"
    data: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "success"

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, data: Any = None) -> "NylasResult":
        return cls(status="success", data=data)

    @classmethod
    def failure(cls, error: str) -> "NylasResult":
        return cls(status="error", error=error)
