"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from typing import Union
from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents the caller of a protected request.

    This model is populated from verified token claims and made available
    to route handlers via dependency injection. No database lookup is
    involved, so it only carries what the token asserts.
    """

    id: Union[int, str] = Field(..., description="User ID asserted by the token")
    issued_at: datetime = Field(..., description="When the token was issued")
    expires_at: datetime = Field(..., description="When the token stops being valid")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }
