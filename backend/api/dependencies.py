"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. The container is built once in the application lifespan
from explicit settings and a database handle, stored on `app.state`, and
handed to route handlers through the dependency functions below.
"""

from typing import TYPE_CHECKING, Optional

from fastapi import Request

from shared.config import Settings
from shared.database import Database

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.gate import AuthorizationGate
    from modules.auth.interfaces import IAuthService, IPasswordHasher, IUserRepository
    from modules.auth.tokens import TokenService


class ServiceContainer:
    """
    Container for all service instances.

    The token service is built eagerly so a missing signing secret fails
    at construction. Everything else is created lazily on first access
    and cached for the container's lifetime.

    Args:
        settings: Application settings
        database: Database handle; may be omitted when `users` is given
        users: Credential store override (e.g. an in-memory double)
    """

    def __init__(
        self,
        settings: Settings,
        database: Optional[Database] = None,
        users: "IUserRepository | None" = None,
    ) -> None:
        from modules.auth.tokens import TokenService

        self.settings = settings
        self.database = database
        self._tokens: "TokenService" = TokenService(settings.secret_key)
        self._users = users
        self._passwords: "IPasswordHasher | None" = None
        self._gate: "AuthorizationGate | None" = None
        self._auth_service: "IAuthService | None" = None

    @property
    def tokens(self) -> "TokenService":
        """Get the token service instance."""
        return self._tokens

    @property
    def users(self) -> "IUserRepository":
        """Get the user repository instance."""
        if self._users is None:
            if self.database is None:
                raise RuntimeError("No database configured for the user repository")
            from modules.auth.repository import SupabaseUserRepository
            self._users = SupabaseUserRepository(self.database, self.settings.users_table)
        return self._users

    @property
    def passwords(self) -> "IPasswordHasher":
        """Get the password hasher instance."""
        if self._passwords is None:
            from modules.auth.passwords import BcryptPasswordHasher
            self._passwords = BcryptPasswordHasher(self.settings.password_hash_rounds)
        return self._passwords

    @property
    def gate(self) -> "AuthorizationGate":
        """Get the authorization gate instance."""
        if self._gate is None:
            from modules.auth.gate import AuthorizationGate
            self._gate = AuthorizationGate(
                self.tokens,
                header_name=self.settings.token_header,
                scheme=self.settings.token_scheme,
            )
        return self._gate

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                users=self.users,
                passwords=self.passwords,
                tokens=self.tokens,
            )
        return self._auth_service


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency for the application's service container."""
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise RuntimeError("Service container is not initialized; is the app running?")
    return container


def get_auth_service(request: Request) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container(request).auth


def get_gate(request: Request) -> "AuthorizationGate":
    """FastAPI dependency for the authorization gate."""
    return get_container(request).gate
