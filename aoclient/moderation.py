"""Wording and validation for calling a moderator."""

from __future__ import annotations

MAX_REASON_LENGTH = 255


def moderator_call_title(title: str = "") -> str:
    """Return the dialog title for a moderator call, optionally about ``title``."""
    if not title:
        return "Call moderator"
    return f"Call moderator: {title}"


def validate_reason(text: str) -> str:
    """Return ``text`` if it is an acceptable reason; raise ValueError otherwise."""
    if not text:
        raise ValueError("Please, enter a reason.")
    if len(text) > MAX_REASON_LENGTH:
        raise ValueError("Reason is too long.")
    return text