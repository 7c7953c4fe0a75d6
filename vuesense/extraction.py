"""Pull the caller's portfolio data block out of their system message."""

from __future__ import annotations

import re
from typing import Sequence

from .schemas import ChatMessage

PORTFOLIO_DATA_MARKER = "CURRENT PORTFOLIO DATA:"

# Everything after the first marker, to the end of the content
_PORTFOLIO_DATA_RE = re.compile(re.escape(PORTFOLIO_DATA_MARKER) + r"(.*)\Z", re.DOTALL)


def find_system_message(messages: Sequence[ChatMessage]) -> ChatMessage | None:
    return next((m for m in messages if m.role == "system"), None)


def extract_portfolio_data(messages: Sequence[ChatMessage]) -> str:
    """Return the trimmed text following the marker in the first system message.

    Only the first system message is consulted. The block is opaque: it is
    not parsed or validated, and any later copies of the marker stay in it.
    Returns an empty string when there is no system message or no marker.
    """
    system_message = find_system_message(messages)
    if system_message is None:
        return ""

    match = _PORTFOLIO_DATA_RE.search(system_message.content)
    if not match:
        return ""
    return match.group(1).strip()
