"""
Trust check for payment QR-code URLs.

A QR code URL is accepted only when it parses as an absolute URL, uses
https, and its hostname contains one of the trusted domain strings.
"""

import logging

from pydantic import AnyUrl, TypeAdapter, ValidationError

from backend.fastapi.core.exceptions import InsecureUrl, InvalidUrl, UntrustedDomain

logger = logging.getLogger(__name__)

TRUSTED_QR_DOMAINS = (
    "imagekit.io",
    "cloudinary.com",
    "amazonaws.com",
    "techshethra.com",
    "techshethra-api.com",
    "via.placeholder.com",
)

_url_adapter = TypeAdapter(AnyUrl)


def is_trusted_host(hostname: str) -> bool:
    # Containment, not suffix matching: "imagekit.io.example.net" passes too
    return any(domain in hostname for domain in TRUSTED_QR_DOMAINS)


def validate_qr_code_url(url: str) -> str:
    """
    Validate a QR code URL.

    Args:
        url: Candidate URL

    Returns:
        The URL unchanged

    Raises:
        InvalidUrl: If the value is not an absolute URL
        InsecureUrl: If the scheme is not https
        UntrustedDomain: If the hostname matches no trusted domain
    """
    try:
        parsed = _url_adapter.validate_python(url)
    except ValidationError:
        raise InvalidUrl()

    if parsed.scheme != "https":
        raise InsecureUrl()

    if not is_trusted_host(parsed.host or ""):
        logger.warning("Rejected QR code URL from untrusted host: %s", parsed.host)
        raise UntrustedDomain()

    return url
