"""
bcrypt adapters - Implement PasswordHasher and CredentialVerifier protocols.

Security Design - Timing Oracle Prevention:
------------------------------------------
BcryptCredentialVerifier always runs bcrypt.checkpw(), even when the email
is unknown. In that case the password is compared against a dummy hash
built with the same cost factor as real hashes, so response time does not
reveal whether an account exists. Unknown email and wrong password both
raise BadCredentials.

bcrypt only reads the first 72 bytes of a password and rejects longer
input. The hasher refuses such passwords with PasswordTooLong; the
verifier treats them as a mismatch.
"""

from functools import lru_cache

import bcrypt

from src.domain.exceptions import BadCredentials, PasswordTooLong
from src.domain.ports import AccountStore

MAX_PASSWORD_BYTES = 72


@lru_cache
def dummy_hash(rounds: int) -> str:
    """bcrypt hash of a throwaway password at cost ``rounds``, computed once per cost."""
    return bcrypt.hashpw(b"dummy_password_for_timing_safety", bcrypt.gensalt(rounds)).decode()


class BcryptPasswordHasher:
    """Implements PasswordHasher protocol with bcrypt."""

    def __init__(self, rounds: int = 10) -> None:
        """
        Args:
            rounds: bcrypt cost factor (log2 of the work factor)
        """
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """
        Raises:
            PasswordTooLong: If the UTF-8 password exceeds 72 bytes
        """
        encoded = password.encode()
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise PasswordTooLong(f"Password exceeds {MAX_PASSWORD_BYTES} bytes")
        return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self.rounds)).decode()


class BcryptCredentialVerifier:
    """
    Implements CredentialVerifier protocol against an AccountStore.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, store: AccountStore, rounds: int = 10) -> None:
        """
        Args:
            store: Account store holding password hashes
            rounds: Cost factor of the dummy hash used for unknown emails
        """
        self._store = store
        self.rounds = rounds

    def verify(self, email: str, password: str) -> None:
        """
        Check ``password`` against the stored hash for ``email``.

        Raises:
            BadCredentials: Unknown email, password mismatch, or a password
                bcrypt cannot check (over 72 bytes)
        """
        account = self._store.find_by_email(email)
        stored_hash = account.password_hash if account is not None else dummy_hash(self.rounds)

        # Always run bcrypt, even for unknown emails
        try:
            password_valid = bcrypt.checkpw(password.encode(), stored_hash.encode())
        except ValueError:
            password_valid = False

        if account is None or not password_valid:
            raise BadCredentials(email)
