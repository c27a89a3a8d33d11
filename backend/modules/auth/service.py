"""
Authentication service implementation.

Checks email/password pairs against the credential store, issues tokens
on login and creates accounts.
"""

import logging
from typing import Optional

from .exceptions import EmailAlreadyExistsError, InvalidCredentialsError
from .interfaces import IAuthService, IPasswordHasher, IUserRepository
from .models import (
    CredentialCheck,
    CredentialFailure,
    LoginResult,
    UserRecord,
    normalize_email,
)
from .tokens import TokenService

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    All collaborators are injected; the service holds no per-request state.
    """

    def __init__(
        self,
        users: IUserRepository,
        passwords: IPasswordHasher,
        tokens: TokenService,
    ):
        self._users = users
        self._passwords = passwords
        self._tokens = tokens

    async def check_credentials(self, email: str, password: str) -> CredentialCheck:
        """
        Check an email/password pair and keep the failure reason.

        The reason is for logs and tests only; callers facing a client must
        not branch on it.
        """
        user = await self._users.find_user_by_email(normalize_email(email))
        if user is None:
            return CredentialCheck(reason=CredentialFailure.UNKNOWN_EMAIL)

        if not await self._passwords.verify_async(password, user.password_hash):
            return CredentialCheck(reason=CredentialFailure.PASSWORD_MISMATCH)

        return CredentialCheck(user=user)

    async def authenticate(self, email: str, password: str) -> Optional[UserRecord]:
        check = await self.check_credentials(email, password)
        if not check.ok:
            logger.debug("Authentication failed: %s", check.reason.value)
        return check.user

    async def login(self, email: str, password: str) -> LoginResult:
        user = await self.authenticate(email, password)
        if user is None:
            raise InvalidCredentialsError()

        token = self._tokens.issue(user.user_id)
        logger.info("User %s logged in", user.user_id)
        return LoginResult(token=token, user=user.scrubbed())

    async def register(self, username: str, email: str, password: str) -> UserRecord:
        email = normalize_email(email)
        if await self._users.find_user_by_email(email) is not None:
            raise EmailAlreadyExistsError(email)

        password_hash = await self._passwords.hash_async(password)
        created = await self._users.create_user(
            UserRecord(username=username, email=email, password_hash=password_hash)
        )
        return created.scrubbed()
