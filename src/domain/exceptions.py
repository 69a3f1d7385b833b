"""
Domain exceptions - Semantic error types for account verification.

This module defines the closed set of failures the verification service
can report. Every authentication failure carries an ErrorKind so callers
can handle each case explicitly without matching on message text.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed enumeration of authentication failure kinds."""

    NOT_FOUND = "not_found"
    NOT_VERIFIED = "not_verified"
    BAD_CREDENTIALS = "bad_credentials"
    CODE_EXPIRED = "code_expired"
    INVALID_CODE = "invalid_code"
    ALREADY_VERIFIED = "already_verified"


class AccountError(Exception):
    """Base class for account domain errors."""

    pass


class AuthenticationError(AccountError):
    """
    Base class for per-request authentication failures.

    Subclasses pin ``kind`` and a user-facing ``message``. The offending
    email is kept on the instance for logging, never in the message.
    """

    kind: ErrorKind
    message: str = "Authentication failed"

    def __init__(self, email: str) -> None:
        super().__init__(email)
        self.email = email


class AccountNotFound(AuthenticationError):
    """No account is registered under the email."""

    kind = ErrorKind.NOT_FOUND
    message = "User not found"


class AccountNotVerified(AuthenticationError):
    """Login attempted before the account was verified."""

    kind = ErrorKind.NOT_VERIFIED
    message = "Account not verified. Please verify your account."


class BadCredentials(AuthenticationError):
    """Email/password pair did not match."""

    kind = ErrorKind.BAD_CREDENTIALS
    message = "Invalid email or password"


class VerificationCodeExpired(AuthenticationError):
    """Verification code is past its expiry timestamp."""

    kind = ErrorKind.CODE_EXPIRED
    message = "Verification code has expired"


class InvalidVerificationCode(AuthenticationError):
    """Submitted code does not match the stored code."""

    kind = ErrorKind.INVALID_CODE
    message = "Invalid verification code"


class AccountAlreadyVerified(AuthenticationError):
    """Account is already enabled; no verification code is outstanding."""

    kind = ErrorKind.ALREADY_VERIFIED
    message = "Account is already verified"


class EmailAlreadyRegistered(AccountError):
    """Store rejected a new account because the email is taken."""

    pass


class NotificationError(AccountError):
    """Notifier failed to deliver a message."""

    pass


class PasswordTooLong(AccountError):
    """Password exceeds what the hasher can encode without truncation."""

    pass


class AccountNotPersisted(AccountError):
    """Update targeted an account id the store does not hold."""

    pass
