"""
Business-rule errors raised by the CRUD and security layers.

Each error is an ``HTTPException`` carrying its status code and message,
so FastAPI renders it as ``{"detail": ...}`` without extra handlers.
"""

from fastapi import HTTPException, status


class InvalidCredentials(HTTPException):
    """Unknown email or wrong password. Both cases share one message."""

    def __init__(self):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )


class Unauthorized(HTTPException):
    """Missing, malformed, expired or wrongly signed bearer token."""

    def __init__(self):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )


class Forbidden(HTTPException):
    def __init__(self, detail: str = "Not authorized as an admin"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class NotFound(HTTPException):
    def __init__(self, resource: str = "Resource"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource} not found",
        )


class AlreadyExists(HTTPException):
    def __init__(self, detail: str = "Admin already exists"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class SetupAlreadyComplete(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Admin setup has already been completed",
        )


class InvalidUrl(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid URL format",
        )


class InsecureUrl(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="QR code URL must use HTTPS",
        )


class UntrustedDomain(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="QR code URL must be from a trusted domain",
        )


class QrCodeImmutable(HTTPException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=(
                "Payment QR codes cannot be modified once set for security reasons. "
                "Please contact the system administrator for assistance."
            ),
        )
