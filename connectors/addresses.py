"""
Email-list parsing for draft recipients.
"""

from __future__ import annotations

from typing import Dict, List, Optional


def build_email_address(value: Optional[str]) -> Optional[List[Dict[str, str]]]:
    """
    Convert ``"user1@mail.com, user2@mail.com"`` into
    ``[{"email": "user1@mail.com"}, {"email": "user2@mail.com"}]``.

    Each segment is whitespace-stripped, and segments that are blank after
    stripping are dropped, so ``"a@x.com, ,b@y.com"`` yields two entries
    with no leading spaces.  Falsy input returns ``None`` rather than an
    empty list.
    """
    if not value:
        return None

    return [
        {"email": segment}
        for segment in (part.strip() for part in value.split(","))
        if segment
    ]
