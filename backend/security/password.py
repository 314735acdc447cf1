"""
Password hashing and verification utilities using bcrypt.

This module provides secure password hashing and verification functionality
for the authentication system. Verification is delegated to passlib, whose
hash comparison runs in constant time.
"""

import logging
from passlib.context import CryptContext

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# bcrypt only looks at the first 72 bytes of a secret
BCRYPT_MAX_BYTES = 72


def _truncate(password: str) -> str:
    password_bytes = password.encode('utf-8')
    if len(password_bytes) <= BCRYPT_MAX_BYTES:
        return password
    # Cut on a byte boundary and drop any partial trailing character
    return password_bytes[:BCRYPT_MAX_BYTES].decode('utf-8', errors='ignore')


def hash_password(password: str) -> str:
    """
    Hash a plaintext password using bcrypt.

    Args:
        password: The plaintext password to hash

    Returns:
        The hashed password as a string

    Example:
        >>> hashed = hash_password("mysecretpassword")
        >>> len(hashed) > 20  # Hashes are long strings
        True
    """
    return pwd_context.hash(_truncate(password))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plaintext password against a hashed password.

    Args:
        plain_password: The plaintext password to verify
        hashed_password: The stored hash to verify against

    Returns:
        True if the password matches, False otherwise. A stored value that
        is not a recognised hash counts as a mismatch.

    Example:
        >>> hashed = hash_password("mysecretpassword")
        >>> verify_password("mysecretpassword", hashed)
        True
        >>> verify_password("wrongpassword", hashed)
        False
    """
    try:
        return pwd_context.verify(_truncate(plain_password), hashed_password)
    except (ValueError, TypeError) as e:
        logger.warning("Stored password hash could not be verified: %s", e)
        return False
