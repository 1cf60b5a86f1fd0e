"""Idempotency key derivation for feedback submissions.

A retried submission (same session, same text after trimming) must map to
the same key so the coordinator can return the stored record instead of
writing a duplicate and counting it twice.
"""

from __future__ import annotations

import hashlib


def normalize_text(text: str) -> str:
    """Return *text* with leading and trailing whitespace removed."""
    return text.strip()


def compute_idempotency_key(session_id: str, normalized_text: str) -> str:
    """Return the hex SHA-256 digest of ``"<session_id>:<normalized_text>"``."""
    payload = f"{session_id}:{normalized_text}".encode("utf-8")
    return hashlib.sha256(payload).hexdigest()
