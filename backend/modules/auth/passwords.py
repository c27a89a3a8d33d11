"""Password hashing and verification backed by bcrypt."""

import asyncio
import logging
from typing import Optional

import bcrypt

from shared.exceptions import ValidationError

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of input
MAX_PASSWORD_BYTES = 72
MIN_ROUNDS = 4
MAX_ROUNDS = 31


class BcryptPasswordHasher:
    """
    Salted one-way password hashing.

    The cost factor is applied at hash-creation time; existing hashes carry
    their own cost, so raising `rounds` only affects new accounts.

    Args:
        rounds: Default bcrypt work factor (log2 iterations).
    """

    def __init__(self, rounds: int = 8) -> None:
        self._rounds = self._check_rounds(rounds)

    @property
    def rounds(self) -> int:
        return self._rounds

    @staticmethod
    def _check_rounds(rounds: int) -> int:
        if not MIN_ROUNDS <= rounds <= MAX_ROUNDS:
            raise ValidationError(
                f"Hash cost must be between {MIN_ROUNDS} and {MAX_ROUNDS}",
                details={"rounds": rounds},
            )
        return rounds

    def hash(self, plaintext: str, rounds: Optional[int] = None) -> str:
        """
        Hash a password for storage.

        Args:
            plaintext: The password to hash
            rounds: Work factor override; defaults to the configured cost

        Returns:
            The bcrypt hash as text

        Raises:
            ValidationError: If the password is empty or too long
        """
        encoded = plaintext.encode("utf-8")
        if not encoded:
            raise ValidationError("Password is required")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")

        cost = self._rounds if rounds is None else self._check_rounds(rounds)
        return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=cost)).decode("utf-8")

    def verify(self, plaintext: str, stored_hash: str) -> bool:
        """
        Check a password against a stored hash.

        The comparison is bcrypt's own. A malformed stored hash is treated
        as a mismatch.
        """
        encoded = plaintext.encode("utf-8")
        if not stored_hash or len(encoded) > MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(encoded, stored_hash.encode("utf-8"))
        except ValueError:
            logger.warning("Stored password hash is not a valid bcrypt hash")
            return False

    async def hash_async(self, plaintext: str, rounds: Optional[int] = None) -> str:
        """Hash in a worker thread so other requests are not blocked."""
        return await asyncio.to_thread(self.hash, plaintext, rounds)

    async def verify_async(self, plaintext: str, stored_hash: str) -> bool:
        """Verify in a worker thread so other requests are not blocked."""
        return await asyncio.to_thread(self.verify, plaintext, stored_hash)
