"""
Account entity - The sole aggregate of the verification domain.

An account starts unverified with an outstanding verification code and
moves to verified exactly once. Verified is terminal.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Account:
    """
    User account record.

    Invariants:
    - enabled implies verification_code and verification_code_expires_at are None
    - verification_code is set only together with verification_code_expires_at
    """

    username: str
    email: str
    password_hash: str
    enabled: bool = False
    verification_code: str | None = None
    verification_code_expires_at: datetime | None = None
    id: int | None = None
    created_at: datetime | None = None

    def issue_verification_code(self, code: str, expires_at: datetime) -> None:
        """Replace the outstanding code and its expiry together."""
        self.verification_code = code
        self.verification_code_expires_at = expires_at

    def mark_verified(self) -> None:
        """Enable the account and clear the code fields."""
        self.enabled = True
        self.verification_code = None
        self.verification_code_expires_at = None

    def is_verification_code_expired(self, now: datetime) -> bool:
        """True if the code expired strictly before ``now``."""
        if self.verification_code_expires_at is None:
            return False
        return self.verification_code_expires_at < now
