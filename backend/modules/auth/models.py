"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel, Field, EmailStr


UserId = Union[int, str]


def normalize_email(email: str) -> str:
    """
    Canonical form of an email used as the credential store key.

    Surrounding whitespace is dropped and the domain is lowercased, the same
    way `EmailStr` normalizes an address. The local part is kept as typed.
    """
    local, sep, domain = email.strip().rpartition("@")
    if not sep:
        return email.strip()
    return f"{local}@{domain.lower()}"


class UserRecord(BaseModel):
    """
    A stored user credential record.

    Owned by the persistence layer. `password_hash` is the only secret
    compared during authentication and must be scrubbed before the record
    is serialized to a client.
    """

    user_id: Optional[UserId] = Field(None, description="Unique user identifier")
    username: str = Field(..., description="Display name")
    email: str = Field(..., description="Unique email, used as lookup key")
    password_hash: str = Field(..., description="Salted password hash")
    created_at: Optional[datetime] = Field(None, description="Account creation time")

    model_config = {"extra": "ignore"}

    def scrubbed(self) -> "UserRecord":
        """Return a copy safe to send to a client (password hash cleared)."""
        return self.model_copy(update={"password_hash": ""})


class TokenClaims(BaseModel):
    """Decoded claims of a signed token."""

    id: UserId = Field(..., description="User ID the token asserts")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")
    jti: Optional[str] = Field(None, description="Per-issuance identifier")

    model_config = {"frozen": True}

    @property
    def issued_at(self) -> datetime:
        return datetime.fromtimestamp(self.iat, tz=timezone.utc)

    @property
    def expires_at(self) -> datetime:
        return datetime.fromtimestamp(self.exp, tz=timezone.utc)


# -----------------------------------------------------------------------------
# Outcome types
# -----------------------------------------------------------------------------


class TokenFailure(str, Enum):
    """Why a token was rejected."""

    MISSING = "missing"
    MALFORMED = "malformed"
    BAD_SIGNATURE = "bad_signature"
    EXPIRED = "expired"


class TokenCheck(BaseModel):
    """Outcome of checking a token without raising."""

    valid: bool
    claims: Optional[TokenClaims] = None
    reason: Optional[TokenFailure] = None

    model_config = {"frozen": True}


class GateFailure(str, Enum):
    """Why the authorization gate denied a request."""

    MISSING_HEADER = "missing_header"
    MALFORMED_HEADER = "malformed_header"
    WRONG_SCHEME = "wrong_scheme"
    INVALID_TOKEN = "invalid_token"


class GateDecision(BaseModel):
    """Allow/deny decision for one request, with the reason on deny."""

    allowed: bool
    claims: Optional[TokenClaims] = None
    reason: Optional[GateFailure] = None
    token_failure: Optional[TokenFailure] = None

    model_config = {"frozen": True}

    def __bool__(self) -> bool:
        return self.allowed


class CredentialFailure(str, Enum):
    """Why a credential check failed. Never exposed to clients."""

    UNKNOWN_EMAIL = "unknown_email"
    PASSWORD_MISMATCH = "password_mismatch"


class CredentialCheck(BaseModel):
    """Outcome of checking an email/password pair."""

    user: Optional[UserRecord] = None
    reason: Optional[CredentialFailure] = None

    @property
    def ok(self) -> bool:
        return self.user is not None


class LoginResult(BaseModel):
    """Token and scrubbed user returned by a successful login."""

    token: str
    user: UserRecord


# -----------------------------------------------------------------------------
# API request/response models
# -----------------------------------------------------------------------------


class LoginRequest(BaseModel):
    """Credentials submitted to the login endpoint."""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseModel):
    """New account submitted to the register endpoint."""

    username: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    message: str = "Login successful"
    token: str
    user: UserRecord


class RegisterResponse(BaseModel):
    message: str = "User registered successfully"
    user: UserRecord


class TokenStatusResponse(BaseModel):
    """Whether the presented token is currently valid."""

    validToken: bool
