"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for the account
verification state machine. It defines its own port interfaces for
infrastructure abstraction, ensuring true hexagonal architecture decoupling.
"""

from .account import Account
from .exceptions import (
    AccountAlreadyVerified,
    AccountError,
    AccountNotFound,
    AccountNotPersisted,
    AccountNotVerified,
    AuthenticationError,
    BadCredentials,
    EmailAlreadyRegistered,
    ErrorKind,
    InvalidVerificationCode,
    NotificationError,
    PasswordTooLong,
    VerificationCodeExpired,
)
from .ports import AccountStore, CredentialVerifier, Notifier, PasswordHasher
from .verification import AccountVerificationService

__all__ = [
    "Account",
    "AccountAlreadyVerified",
    "AccountError",
    "AccountNotFound",
    "AccountNotPersisted",
    "AccountNotVerified",
    "AccountStore",
    "AccountVerificationService",
    "AuthenticationError",
    "BadCredentials",
    "CredentialVerifier",
    "EmailAlreadyRegistered",
    "ErrorKind",
    "InvalidVerificationCode",
    "NotificationError",
    "Notifier",
    "PasswordHasher",
    "PasswordTooLong",
    "VerificationCodeExpired",
]
