"""
In-memory repository adapter - Implements AccountStore protocol.

Dict-backed store for development and tests. Accounts are copied on the
way in and out so callers never share state with the store.
"""

import itertools
import threading
from dataclasses import replace
from datetime import datetime, timezone

from src.domain.account import Account
from src.domain.exceptions import AccountNotPersisted, EmailAlreadyRegistered


class InMemoryAccountStore:
    """
    Implements AccountStore protocol with a process-local dict.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Each call is serialized by a lock; read-modify-write sequences across
    calls are not.
    """

    def __init__(self) -> None:
        self._accounts: dict[str, Account] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def find_by_email(self, email: str) -> Account | None:
        with self._lock:
            account = self._accounts.get(email)
            return replace(account) if account is not None else None

    def save(self, account: Account) -> Account:
        """
        Insert (id None) or update (id set) an account.

        Raises:
            EmailAlreadyRegistered: If a new account reuses a taken email
            AccountNotPersisted: If an update targets an id the store does not hold
        """
        with self._lock:
            if account.id is None:
                if account.email in self._accounts:
                    raise EmailAlreadyRegistered(account.email)
                stored = replace(
                    account,
                    id=next(self._ids),
                    created_at=datetime.now(timezone.utc),
                )
            else:
                existing = self._accounts.get(account.email)
                if existing is None or existing.id != account.id:
                    raise AccountNotPersisted(account.email)
                stored = replace(account, created_at=existing.created_at)

            self._accounts[stored.email] = stored
            return replace(stored)

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)
