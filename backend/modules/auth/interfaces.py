"""
Authentication module interfaces.

Other modules should depend on these protocols, not the concrete
implementations. This enables testing with in-memory doubles and swapping
the storage backend without touching the auth flows.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import LoginResult, UserRecord


@runtime_checkable
class IUserRepository(Protocol):
    """
    Credential store used by the auth module.

    Implementations own the storage technology; the auth module only needs
    lookup by email and creation.
    """

    async def find_user_by_email(self, email: str) -> Optional[UserRecord]:
        """
        Look up a user record by email.

        Returns:
            The stored record (including its password hash), or None
        """
        ...

    async def create_user(self, record: UserRecord) -> UserRecord:
        """
        Persist a new user record.

        Returns:
            The stored record with its generated identifier
        """
        ...


@runtime_checkable
class IPasswordHasher(Protocol):
    """One-way salted password hashing."""

    def hash(self, plaintext: str, rounds: Optional[int] = None) -> str:
        ...

    def verify(self, plaintext: str, stored_hash: str) -> bool:
        ...

    async def hash_async(self, plaintext: str, rounds: Optional[int] = None) -> str:
        ...

    async def verify_async(self, plaintext: str, stored_hash: str) -> bool:
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to route handlers. Implementations must provide all these methods.
    """

    async def authenticate(self, email: str, password: str) -> Optional[UserRecord]:
        """
        Check an email/password pair.

        Returns:
            The matching record (hash included), or None when the email is
            unknown or the password is wrong. The two cases look the same.
        """
        ...

    async def login(self, email: str, password: str) -> LoginResult:
        """
        Authenticate and issue a token.

        Returns:
            LoginResult with a signed token and the scrubbed user

        Raises:
            InvalidCredentialsError: If the email/password pair is rejected
        """
        ...

    async def register(self, username: str, email: str, password: str) -> UserRecord:
        """
        Create an account.

        Returns:
            The created record, scrubbed

        Raises:
            EmailAlreadyExistsError: If the email is taken
        """
        ...
