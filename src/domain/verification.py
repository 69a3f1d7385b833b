"""
Account verification domain service - Verification State Machine.

This module contains the core business logic for signup, login, email
verification, and verification-code resend.

Verification State Machine (Forward-Only)
=========================================

States:
- UNVERIFIED: Account created, verification code outstanding
- VERIFIED: Terminal state after successful verification (account enabled)

Valid Transitions:
    UNVERIFIED -> VERIFIED    (correct, unexpired code)
    UNVERIFIED -> UNVERIFIED  (resend: new code and expiry replace the old ones)
    UNVERIFIED -> UNVERIFIED  (failed verify: state unchanged, error raised)

Invalid Transitions (never allowed):
    VERIFIED -> any           (VERIFIED is terminal)

Code lifetimes are asymmetric: a signup code lives 15 minutes, a resent
code lives 1 hour. Expiry is evaluated lazily when a code is submitted.

Email delivery is best-effort. A NotificationError is logged and never
propagated, so signup and resend succeed even if the email never arrives.
"""

import logging
import random
import secrets
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from .account import Account
from .exceptions import (
    AccountAlreadyVerified,
    AccountNotFound,
    AccountNotVerified,
    InvalidVerificationCode,
    NotificationError,
    VerificationCodeExpired,
)
from .messages import VERIFICATION_SUBJECT, render_verification_email
from .ports import AccountStore, CredentialVerifier, Notifier, PasswordHasher

logger = logging.getLogger(__name__)

SIGNUP_CODE_TTL = timedelta(minutes=15)
RESEND_CODE_TTL = timedelta(hours=1)

CODE_MIN = 100000
CODE_MAX = 999999


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass
class AccountVerificationService:
    """
    Domain service for account signup, login, and verification.

    Collaborators are injected as ports. ``rng`` and ``clock`` are injected
    too so that codes and expiry timestamps are deterministic under test.
    """

    store: AccountStore
    notifier: Notifier
    password_hasher: PasswordHasher
    credential_verifier: CredentialVerifier
    rng: random.Random = field(default_factory=random.SystemRandom)
    clock: Callable[[], datetime] = utc_now
    signup_code_ttl: timedelta = SIGNUP_CODE_TTL
    resend_code_ttl: timedelta = RESEND_CODE_TTL

    def signup(self, username: str, email: str, password: str) -> Account:
        """
        Register a new, unverified account and email it a verification code.

        Args:
            username: Display name
            email: Email address (unique key, stored as given)
            password: Plaintext password (hashed before storage)

        Returns:
            The persisted account

        Raises:
            EmailAlreadyRegistered: If the store already holds this email
            PasswordTooLong: If the hasher cannot encode the password
        """
        account = Account(
            username=username,
            email=email,
            password_hash=self.password_hasher.hash(password),
            enabled=False,
        )
        account.issue_verification_code(
            self._generate_verification_code(),
            self.clock() + self.signup_code_ttl,
        )

        account = self.store.save(account)
        logger.info("Account created for %s, verification pending", account.email)

        self._send_verification_email(account)
        return account

    def authenticate(self, email: str, password: str) -> Account:
        """
        Authenticate a verified account by email and password.

        The verified check runs before credentials are examined, so an
        unverified account fails with AccountNotVerified whatever the password.

        Raises:
            AccountNotFound: No account uses this email
            AccountNotVerified: Account has not been verified yet
            BadCredentials: Password does not match
        """
        account = self._get_account(email)

        if not account.enabled:
            raise AccountNotVerified(email)

        self.credential_verifier.verify(email, password)
        return account

    def verify_user(self, email: str, code: str) -> None:
        """
        Verify an account with the code sent by email.

        Expiry is checked before the code comparison: an expired code fails
        as expired even when it matches. The comparison is exact string
        equality with no normalization.

        Raises:
            AccountNotFound: No account uses this email
            AccountAlreadyVerified: Account is verified, no code outstanding
            VerificationCodeExpired: Code expired before now
            InvalidVerificationCode: Code does not match
        """
        account = self._get_account(email)

        if account.enabled or account.verification_code is None:
            raise AccountAlreadyVerified(email)

        if account.is_verification_code_expired(self.clock()):
            raise VerificationCodeExpired(email)

        if not secrets.compare_digest(account.verification_code.encode(), code.encode()):
            raise InvalidVerificationCode(email)

        account.mark_verified()
        self.store.save(account)
        logger.info("Account verified: %s", email)

    def resend_verification_code(self, email: str) -> None:
        """
        Issue a fresh verification code for an unverified account.

        Replaces both code and expiry even if the previous code is still
        valid. The new code lives for ``resend_code_ttl`` (1 hour).

        Raises:
            AccountNotFound: No account uses this email
            AccountAlreadyVerified: Account is verified; nothing is changed
        """
        account = self._get_account(email)

        if account.enabled:
            raise AccountAlreadyVerified(email)

        account.issue_verification_code(
            self._generate_verification_code(),
            self.clock() + self.resend_code_ttl,
        )
        account = self.store.save(account)
        logger.info("Verification code reissued for %s", email)

        self._send_verification_email(account)

    def _get_account(self, email: str) -> Account:
        account = self.store.find_by_email(email)
        if account is None:
            raise AccountNotFound(email)
        return account

    def _generate_verification_code(self) -> str:
        """
        Generate a 6-digit verification code in [100000, 999999].

        The lower bound excludes codes with a leading zero.
        """
        return str(self.rng.randint(CODE_MIN, CODE_MAX))

    def _send_verification_email(self, account: Account) -> None:
        """Best-effort delivery: failures are logged, never raised."""
        body = render_verification_email(account.verification_code or "")
        try:
            self.notifier.send(account.email, VERIFICATION_SUBJECT, body)
        except NotificationError:
            logger.warning(
                "Failed to send verification email to %s", account.email, exc_info=True
            )
