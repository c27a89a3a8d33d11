"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access behind the injected database handle.
"""

from typing import TypeVar, Generic
from supabase import Client

from .database import Database


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class UserRepository(BaseRepository[UserRecord]):
            def _find(self, email: str) -> Optional[UserRecord]:
                result = self._db.table("users").select("*").eq("email", email).execute()
                if not result.data:
                    return None
                return UserRecord(**result.data[0])
    """

    def __init__(self, database: Database) -> None:
        """
        Initialize the repository with a database handle.

        Args:
            database: Database handle; its client is resolved on each access
                so the repository follows the handle's open/close lifecycle.
        """
        self._database = database

    @property
    def _db(self) -> Client:
        return self._database.client
