"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A fixed clock and seeded randomness for deterministic codes/expiry
- A recording notifier
- An in-memory account store and low-cost bcrypt adapters
- A fully wired AccountVerificationService
"""

import random

import pytest

from src.adapters.repository.memory import InMemoryAccountStore
from src.adapters.security.passwords import BcryptCredentialVerifier, BcryptPasswordHasher
from src.domain.verification import AccountVerificationService
from tests.fakes import FakeClock, RecordingNotifier


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> InMemoryAccountStore:
    return InMemoryAccountStore()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def service(
    store: InMemoryAccountStore, notifier: RecordingNotifier, clock: FakeClock
) -> AccountVerificationService:
    """Service wired with in-memory store, seeded RNG, and cost-4 bcrypt."""
    return AccountVerificationService(
        store=store,
        notifier=notifier,
        password_hasher=BcryptPasswordHasher(rounds=4),
        credential_verifier=BcryptCredentialVerifier(store, rounds=4),
        rng=random.Random(1234),
        clock=clock,
    )
