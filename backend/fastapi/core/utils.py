"""
Utility functions shared by the API layers.

This module provides timestamp helpers, email normalization and client
address resolution for the login audit trail.
"""

from datetime import datetime, timezone
from typing import Optional

from fastapi import Request


UNKNOWN_IP = "Unknown"


def utc_now() -> datetime:
    """
    Current UTC time as an offset-aware datetime.

    Backends without time zone support (SQLite) keep the UTC wall time and
    hand it back naive; the response schemas re-attach UTC on read.
    """
    return datetime.now(timezone.utc)


def normalize_email(email: str) -> str:
    """
    Strip surrounding whitespace from an email address.

    Case is preserved: admin lookups are exact matches on the stored value.
    """
    if not email:
        return ""
    return email.strip()


def get_client_ip(request: Request) -> str:
    """
    Resolve the client address recorded in the login audit trail.

    Prefers the ``X-Forwarded-For`` header, then the direct peer address,
    then the literal ``"Unknown"``. The header is client-controlled when the
    service is exposed directly, so the value is informational only and
    must never be used for access decisions.

    Args:
        request: Incoming request

    Returns:
        Address string as seen by this service
    """
    forwarded_for: Optional[str] = request.headers.get("x-forwarded-for")
    if forwarded_for:
        return forwarded_for

    if request.client and request.client.host:
        return request.client.host

    return UNKNOWN_IP
