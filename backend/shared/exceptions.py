"""
Base exception classes for the CRM backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class CrmError(Exception):
    """
    Base exception for all CRM errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(CrmError):
    """Input validation failed."""

    pass


class ConflictError(CrmError):
    """Resource already exists."""

    pass


class AuthenticationError(CrmError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class ConfigurationError(CrmError):
    """Required configuration is missing or invalid; the process must not start."""

    def __init__(self, setting: str, message: Optional[str] = None):
        super().__init__(
            message or f"Missing required setting: {setting}",
            code="CONFIGURATION_ERROR",
            details={"setting": setting},
        )
        self.setting = setting


class ExternalServiceError(CrmError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
