"""
User-related endpoints.

Provides endpoints for the authenticated caller.
"""

from datetime import datetime
from typing import Union

from fastapi import APIRouter
from pydantic import BaseModel

from shared.models import AuthenticatedUser
from ..middleware.auth import RequireAuth

router = APIRouter()


class CurrentUserResponse(BaseModel):
    """Identity asserted by the caller's token."""

    id: Union[int, str]
    issued_at: datetime
    expires_at: datetime


@router.get("/me", response_model=CurrentUserResponse)
async def get_current_user_identity(
    user: AuthenticatedUser = RequireAuth,
) -> CurrentUserResponse:
    """
    Get the current user's identity.

    Requires authentication.
    """
    return CurrentUserResponse(
        id=user.id,
        issued_at=user.issued_at,
        expires_at=user.expires_at,
    )
