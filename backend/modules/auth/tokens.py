"""
Signed token issuance and verification.

Tokens are HS256 JWTs carrying `{id, iat, exp, jti}` and are valid for one
hour from issuance. There is no revocation list: a token stays valid until
its expiry regardless of logout.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Callable, Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.exceptions import ConfigurationError

from .exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
    TokenSignatureError,
)
from .models import TokenCheck, TokenClaims, TokenFailure, UserId

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
TOKEN_TTL_SECONDS = 60 * 60

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """
    Issues and verifies signed tokens.

    Holds no per-request state: verification is a pure function of the
    token, the process secret and the clock.

    Args:
        secret_key: Process-wide signing secret. Must not be empty.
        clock: Source of the current time (UTC).

    Raises:
        ConfigurationError: If the secret is empty.
    """

    def __init__(self, secret_key: str, clock: Clock = utc_now) -> None:
        if not secret_key:
            raise ConfigurationError(
                "secret_key",
                "SECRET_KEY is not set; refusing to issue or verify tokens",
            )
        self._secret_key = secret_key
        self._clock = clock

    def issue(self, user_id: UserId) -> str:
        """
        Mint a token asserting `user_id`, valid for one hour.

        Every call gets a fresh `jti`, so repeated calls for the same user
        never return the same token.
        """
        issued_at = int(self._clock().timestamp())
        payload = {
            "id": user_id,
            "iat": issued_at,
            "exp": issued_at + TOKEN_TTL_SECONDS,
            "jti": uuid.uuid4().hex,
        }
        return jwt.encode(payload, self._secret_key, algorithm=ALGORITHM)

    def verify(self, token: Optional[str]) -> TokenClaims:
        """
        Validate a token and return its claims.

        Raises:
            MissingTokenError: If no token is given
            ExpiredTokenError: If the current time is at or past `exp`
            InvalidTokenError: If the signature does not match or the token
                cannot be parsed
        """
        if not token:
            raise MissingTokenError()

        try:
            # Time-based claims are checked below against the injected clock
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[ALGORITHM],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_nbf": False,
                    "require": ["id", "iat", "exp"],
                },
            )
            claims = TokenClaims(**payload)
        except jwt.InvalidSignatureError:
            raise TokenSignatureError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Malformed token: {e}")
        except PydanticValidationError:
            raise InvalidTokenError("Malformed token claims")

        if self._clock().timestamp() >= claims.exp:
            raise ExpiredTokenError()

        return claims

    def check(self, token: Optional[str]) -> TokenCheck:
        """Verify without raising; the failure reason is kept on the result."""
        try:
            return TokenCheck(valid=True, claims=self.verify(token))
        except MissingTokenError:
            reason = TokenFailure.MISSING
        except ExpiredTokenError:
            reason = TokenFailure.EXPIRED
        except TokenSignatureError:
            reason = TokenFailure.BAD_SIGNATURE
        except InvalidTokenError:
            reason = TokenFailure.MALFORMED
        logger.debug("Token rejected: %s", reason.value)
        return TokenCheck(valid=False, reason=reason)

    def is_authenticated(self, token: Optional[str]) -> bool:
        """Whether the token verifies. Never raises."""
        return self.check(token).valid
