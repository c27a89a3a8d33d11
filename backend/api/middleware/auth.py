"""
Authorization dependencies for protected routes.

Every protected route runs the authorization gate against the request
headers. Denials become a 401 without revealing why.
"""

import logging

from fastapi import Depends, HTTPException, Request, status

from modules.auth.gate import AuthorizationGate
from shared.models import AuthenticatedUser
from ..dependencies import get_gate

logger = logging.getLogger(__name__)


class AuthError(HTTPException):
    """Authentication error with consistent format."""
    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_current_user(
    request: Request,
    gate: AuthorizationGate = Depends(get_gate),
) -> AuthenticatedUser:
    """
    Dependency that requires a valid token.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    decision = gate.inspect(request.headers)
    if not decision.allowed:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, decision.reason.value)
        raise AuthError()

    claims = decision.claims
    return AuthenticatedUser(
        id=claims.id,
        issued_at=claims.issued_at,
        expires_at=claims.expires_at,
    )


# Type aliases for cleaner route definitions
RequireAuth = Depends(get_current_user)
