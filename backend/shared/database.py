"""
Database handle for Supabase.

The handle is constructed explicitly from settings, opened once at process
start and closed at shutdown. Repositories receive it through the service
container instead of reaching for a module-level client.
"""

import logging
from typing import Optional
from supabase import create_client, Client

from .config import Settings
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Database:
    """
    Owns the Supabase service-role client for the lifetime of the process.

    Usage:
        database = Database.from_settings(settings)
        database.open()
        ...
        database.close()
    """

    def __init__(self, url: str, service_role_key: str) -> None:
        if not url:
            raise ConfigurationError("supabase_url", "Set SUPABASE_URL to connect to the database.")
        if not service_role_key:
            raise ConfigurationError(
                "supabase_service_role_key",
                "Set SUPABASE_SERVICE_ROLE_KEY to connect to the database.",
            )
        self._url = url
        self._service_role_key = service_role_key
        self._client: Optional[Client] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.supabase_url, settings.supabase_service_role_key)

    @property
    def is_open(self) -> bool:
        return self._client is not None

    @property
    def client(self) -> Client:
        """
        Get the open Supabase client.

        Raises:
            RuntimeError: If the handle has not been opened or was closed.
        """
        if self._client is None:
            raise RuntimeError("Database is not open")
        return self._client

    def open(self) -> Client:
        """Create the Supabase client. Opening an already open handle is a no-op."""
        if self._client is None:
            self._client = create_client(self._url, self._service_role_key)
            logger.info("Opened database connection to %s", self._url)
        return self._client

    def close(self) -> None:
        """Release the client. Further use of `client` raises until reopened."""
        if self._client is not None:
            self._client = None
            logger.info("Closed database connection")
