import pytest
from unittest.mock import AsyncMock, MagicMock

from modules.auth.exceptions import EmailAlreadyExistsError, InvalidCredentialsError
from modules.auth.models import CredentialFailure, UserRecord
from modules.auth.service import AuthService


class TestAuthenticate:
    @pytest.mark.asyncio
    async def test_correct_password_returns_record(self, auth_service):
        user = await auth_service.authenticate("a@b.com", "correct")
        assert user is not None
        assert user.user_id == 42
        assert user.email == "a@b.com"
        # authenticate itself does not scrub
        assert user.password_hash

    @pytest.mark.asyncio
    async def test_wrong_password_returns_none(self, auth_service):
        assert await auth_service.authenticate("a@b.com", "wrong") is None

    @pytest.mark.asyncio
    async def test_unknown_email_returns_none(self, auth_service):
        assert await auth_service.authenticate("nouser@b.com", "anything") is None

    @pytest.mark.asyncio
    async def test_failures_are_indistinguishable(self, auth_service):
        """Unknown email and wrong password give the same answer."""
        wrong = await auth_service.authenticate("a@b.com", "wrong")
        unknown = await auth_service.authenticate("nouser@b.com", "anything")
        assert wrong == unknown

    @pytest.mark.asyncio
    async def test_check_credentials_keeps_reason(self, auth_service):
        ok = await auth_service.check_credentials("a@b.com", "correct")
        assert ok.ok and ok.reason is None

        mismatch = await auth_service.check_credentials("a@b.com", "wrong")
        assert mismatch.user is None
        assert mismatch.reason == CredentialFailure.PASSWORD_MISMATCH

        unknown = await auth_service.check_credentials("nouser@b.com", "x")
        assert unknown.user is None
        assert unknown.reason == CredentialFailure.UNKNOWN_EMAIL


class TestLogin:
    @pytest.mark.asyncio
    async def test_login_issues_token_for_user(self, auth_service, tokens):
        result = await auth_service.login("a@b.com", "correct")
        assert tokens.verify(result.token).id == 42

    @pytest.mark.asyncio
    async def test_login_scrubs_password_hash(self, auth_service):
        result = await auth_service.login("a@b.com", "correct")
        assert result.user.password_hash == ""
        assert result.user.email == "a@b.com"

    @pytest.mark.asyncio
    async def test_login_does_not_mutate_stored_record(self, auth_service, users):
        await auth_service.login("a@b.com", "correct")
        stored = await users.find_user_by_email("a@b.com")
        assert stored.password_hash

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email,password",
        [("a@b.com", "wrong"), ("nouser@b.com", "anything")],
    )
    async def test_login_failure_is_generic(self, auth_service, email, password):
        with pytest.raises(InvalidCredentialsError) as exc_info:
            await auth_service.login(email, password)
        assert exc_info.value.message == "Invalid email or password"

    @pytest.mark.asyncio
    async def test_login_verifies_password_once(self, users, tokens):
        passwords = MagicMock()
        passwords.verify_async = AsyncMock(return_value=True)
        service = AuthService(users=users, passwords=passwords, tokens=tokens)

        await service.login("a@b.com", "correct")

        passwords.verify_async.assert_awaited_once()


class TestRegister:
    @pytest.mark.asyncio
    async def test_register_creates_scrubbed_user(self, auth_service, users, hasher):
        created = await auth_service.register("bob", "bob@b.com", "s3cret")
        assert created.user_id is not None
        assert created.username == "bob"
        assert created.password_hash == ""

        stored = await users.find_user_by_email("bob@b.com")
        assert hasher.verify("s3cret", stored.password_hash)

    @pytest.mark.asyncio
    async def test_registered_user_can_log_in(self, auth_service, tokens):
        created = await auth_service.register("bob", "bob@b.com", "s3cret")
        result = await auth_service.login("bob@b.com", "s3cret")
        assert tokens.verify(result.token).id == created.user_id

    @pytest.mark.asyncio
    async def test_mixed_case_domain_registers_and_logs_in(self, auth_service, users, tokens):
        created = await auth_service.register("bob", "Bob@Example.COM", "s3cret")
        assert created.email == "Bob@example.com"
        assert await users.find_user_by_email("Bob@example.com") is not None

        result = await auth_service.login("Bob@Example.COM", "s3cret")
        assert tokens.verify(result.token).id == created.user_id

    @pytest.mark.asyncio
    async def test_existing_email_matched_regardless_of_domain_case(self, auth_service):
        with pytest.raises(EmailAlreadyExistsError):
            await auth_service.register("alice2", "a@B.COM", "pw")

    @pytest.mark.asyncio
    async def test_register_existing_email(self, auth_service):
        with pytest.raises(EmailAlreadyExistsError) as exc_info:
            await auth_service.register("alice2", "a@b.com", "pw")
        assert exc_info.value.details == {"email": "a@b.com"}

    @pytest.mark.asyncio
    async def test_register_uses_repository(self, hasher, tokens):
        users = MagicMock()
        users.find_user_by_email = AsyncMock(return_value=None)
        users.create_user = AsyncMock(
            side_effect=lambda record: record.model_copy(update={"user_id": 7})
        )
        service = AuthService(users=users, passwords=hasher, tokens=tokens)

        created = await service.register("carol", "carol@b.com", "pw")

        record: UserRecord = users.create_user.call_args.args[0]
        assert record.email == "carol@b.com"
        assert hasher.verify("pw", record.password_hash)
        assert created.user_id == 7
