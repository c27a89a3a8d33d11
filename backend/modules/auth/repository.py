"""
User repository for database access.

Encapsulates the Supabase queries and data mapping for the users table.
The Supabase client is synchronous, so each query runs in a worker thread.
"""

import asyncio
import logging
from typing import Any, Optional

import httpx
from postgrest.exceptions import APIError

from shared.database import Database
from shared.exceptions import ExternalServiceError
from shared.repository import BaseRepository

from .models import UserRecord

logger = logging.getLogger(__name__)

# Raised by the Supabase client for query errors and transport failures
SUPABASE_ERRORS = (APIError, httpx.HTTPError)


class SupabaseUserRepository(BaseRepository[UserRecord]):
    """
    Credential store backed by a Supabase table.

    Note: This repository does NOT verify passwords. The auth service is
    responsible for comparing hashes.
    """

    def __init__(self, database: Database, table: str = "users") -> None:
        super().__init__(database)
        self._table = table

    async def find_user_by_email(self, email: str) -> Optional[UserRecord]:
        return await asyncio.to_thread(self._find_user_by_email, email)

    async def create_user(self, record: UserRecord) -> UserRecord:
        return await asyncio.to_thread(self._create_user, record)

    # -------------------------------------------------------------------------
    # Synchronous queries
    # -------------------------------------------------------------------------

    def _find_user_by_email(self, email: str) -> Optional[UserRecord]:
        client = self._db
        try:
            result = (
                client.table(self._table)
                .select("*")
                .eq("email", email)
                .limit(1)
                .execute()
            )
        except SUPABASE_ERRORS as e:
            raise ExternalServiceError(
                "Failed to look up user", service="supabase"
            ) from e

        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def _create_user(self, record: UserRecord) -> UserRecord:
        data = record.model_dump(exclude_none=True, mode="json")
        client = self._db
        try:
            result = client.table(self._table).insert(data).execute()
        except SUPABASE_ERRORS as e:
            raise ExternalServiceError(
                "Failed to create user", service="supabase"
            ) from e

        if not result.data:
            raise ExternalServiceError(
                "Insert returned no user", service="supabase"
            )

        created = self._map_to_user(result.data[0])
        logger.info("Created user %s", created.user_id)
        return created

    @staticmethod
    def _map_to_user(row: dict[str, Any]) -> UserRecord:
        return UserRecord(
            user_id=row.get("user_id", row.get("id")),
            username=row["username"],
            email=row["email"],
            password_hash=row["password_hash"],
            created_at=row.get("created_at"),
        )
