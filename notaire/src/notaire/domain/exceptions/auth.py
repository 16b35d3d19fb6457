"""
Authentication domain exceptions.
"""

from notaire.domain.exceptions.base import NotaireException


class AuthenticationError(NotaireException):
    """Raised when authentication fails."""

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, code="AUTHENTICATION_ERROR")


class InvalidSignatureError(AuthenticationError):
    """Raised when wallet signature fails under every message encoding."""

    def __init__(self):
        super().__init__(
            "Invalid signature. Please ensure you signed the correct message."
        )


class InvalidSignatureEncodingError(AuthenticationError):
    """Raised when a signature does not decode to 64 bytes."""

    def __init__(self, length: int):
        super().__init__(f"Invalid signature size: {length} bytes (expected 64)")
        self.length = length


class ExpiredTokenError(AuthenticationError):
    """Raised when JWT token has expired."""

    def __init__(self):
        super().__init__("Authentication token has expired")


class InvalidTokenError(AuthenticationError):
    """Raised when JWT token is malformed or invalid."""

    def __init__(self):
        super().__init__("Invalid authentication token")
