"""
Authentication module.

Handles password hashing, token issuance/verification and the per-request
authorization gate.

Public API:
- IAuthService / IUserRepository / IPasswordHasher: Interfaces
- AuthService: Login and registration flows
- TokenService: Token issuance and verification
- AuthorizationGate: Header → allow/deny decision
- BcryptPasswordHasher: Password hashing
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService, IUserRepository, IPasswordHasher
from .models import (
    UserRecord,
    normalize_email,
    TokenClaims,
    TokenCheck,
    TokenFailure,
    GateDecision,
    GateFailure,
    CredentialCheck,
    CredentialFailure,
    LoginResult,
)
from .exceptions import (
    InvalidTokenError,
    TokenSignatureError,
    ExpiredTokenError,
    MissingTokenError,
    InvalidCredentialsError,
    EmailAlreadyExistsError,
)
from .passwords import BcryptPasswordHasher
from .tokens import TokenService, TOKEN_TTL_SECONDS
from .gate import AuthorizationGate
from .service import AuthService

__all__ = [
    # Interfaces
    "IAuthService",
    "IUserRepository",
    "IPasswordHasher",
    # Implementations
    "AuthService",
    "TokenService",
    "AuthorizationGate",
    "BcryptPasswordHasher",
    "TOKEN_TTL_SECONDS",
    # Models
    "UserRecord",
    "normalize_email",
    "TokenClaims",
    "TokenCheck",
    "TokenFailure",
    "GateDecision",
    "GateFailure",
    "CredentialCheck",
    "CredentialFailure",
    "LoginResult",
    # Exceptions
    "InvalidTokenError",
    "TokenSignatureError",
    "ExpiredTokenError",
    "MissingTokenError",
    "InvalidCredentialsError",
    "EmailAlreadyExistsError",
]
