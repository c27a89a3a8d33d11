"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API route handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, ConflictError


class InvalidTokenError(AuthenticationError):
    """Raised when a token is invalid, malformed or signed with another key."""

    def __init__(self, message: str = "Invalid authentication token", code: str = "INVALID_TOKEN"):
        super().__init__(message, code=code)


class TokenSignatureError(InvalidTokenError):
    """Raised when a token was not signed with this process's secret."""

    def __init__(self, message: str = "Token signature does not match"):
        super().__init__(message, code="BAD_SIGNATURE")


class ExpiredTokenError(InvalidTokenError):
    """Raised when a token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidCredentialsError(AuthenticationError):
    """
    Raised when login fails.

    Covers both an unknown email and a wrong password; the message does
    not say which.
    """

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class EmailAlreadyExistsError(ConflictError):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            "Email already exists",
            code="EMAIL_EXISTS",
            details={"email": email},
        )
