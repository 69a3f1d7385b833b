"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Protocol

from .account import Account


class AccountStore(Protocol):
    """Port interface for account persistence."""

    def find_by_email(self, email: str) -> Account | None:
        """
        Look up an account by its email address.

        Args:
            email: Email address exactly as stored (case-sensitive)

        Returns:
            The account, or None if no account uses this email
        """
        ...

    def save(self, account: Account) -> Account:
        """
        Persist a new or existing account.

        Accounts without an id are inserted; accounts with an id are updated.
        Email uniqueness is enforced here, not by the domain.

        Args:
            account: Account to persist

        Returns:
            The persisted account, with id and created_at populated

        Raises:
            EmailAlreadyRegistered: If a new account reuses a taken email
        """
        ...


class Notifier(Protocol):
    """Port interface for message delivery."""

    def send(self, to_email: str, subject: str, body: str) -> None:
        """
        Deliver a message to an email address.

        Args:
            to_email: Recipient email address
            subject: Subject line
            body: Opaque formatted body (HTML)

        Raises:
            NotificationError: If the message could not be delivered
        """
        ...


class CredentialVerifier(Protocol):
    """Port interface for credential checks."""

    def verify(self, email: str, password: str) -> None:
        """
        Check a plaintext password against the stored credentials.

        Raises:
            BadCredentials: If the email/password pair does not match
        """
        ...


class PasswordHasher(Protocol):
    """Port interface for one-way password encoding."""

    def hash(self, password: str) -> str:
        """Return an opaque one-way hash of the plaintext password."""
        ...
