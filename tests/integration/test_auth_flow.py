"""
Integration tests for the account verification flow.

Drives the full HTTP stack (routes, dependencies, domain service, bcrypt,
in-memory store) with only the notifier and clock replaced, so the emailed
code can be read back and expiry can be simulated.
"""

import re
from collections.abc import Generator
from datetime import timedelta

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.adapters.repository.memory import InMemoryAccountStore
from src.adapters.security.passwords import BcryptCredentialVerifier, BcryptPasswordHasher
from src.api.dependencies import get_notifier, get_verification_service
from src.api.v1.routes import router
from src.domain.verification import AccountVerificationService
from tests.fakes import FakeClock, FailingNotifier, RecordingNotifier


@pytest.fixture
def app_parts() -> tuple[FastAPI, InMemoryAccountStore, RecordingNotifier, FakeClock]:
    app = FastAPI()
    app.include_router(router, prefix="/v1")
    return app, InMemoryAccountStore(), RecordingNotifier(), FakeClock()


@pytest.fixture
def client(app_parts) -> Generator[TestClient, None, None]:
    app, store, notifier, clock = app_parts

    def build_service() -> AccountVerificationService:
        return AccountVerificationService(
            store=store,
            notifier=notifier,
            password_hasher=BcryptPasswordHasher(rounds=4),
            credential_verifier=BcryptCredentialVerifier(store, rounds=4),
            clock=clock,
        )

    app.dependency_overrides[get_verification_service] = build_service
    yield TestClient(app)
    app.dependency_overrides.clear()


def last_code(notifier: RecordingNotifier) -> str:
    """Extract the 6-digit code from the most recent email body."""
    match = re.search(r'<div class="code-box">(\d{6})</div>', notifier.sent[-1][2])
    assert match is not None
    return match.group(1)


def signup(client: TestClient, email: str = "alice@example.com", password: str = "secure123"):
    return client.post(
        "/v1/auth/signup",
        json={"username": "alice", "email": email, "password": password},
    )


class TestAuthFlow:
    def test_full_flow(self, client: TestClient, app_parts) -> None:
        """signup -> wrong code -> right code -> login."""
        _, _, notifier, _ = app_parts

        response = signup(client)
        assert response.status_code == 201
        assert response.json()["enabled"] is False

        code = last_code(notifier)
        wrong = "100000" if code != "100000" else "100001"

        response = client.post(
            "/v1/auth/verify", json={"email": "alice@example.com", "code": wrong}
        )
        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid verification code"}

        response = client.post(
            "/v1/auth/verify", json={"email": "alice@example.com", "code": code}
        )
        assert response.status_code == 200

        response = client.post(
            "/v1/auth/login", json={"email": "alice@example.com", "password": "secure123"}
        )
        assert response.status_code == 200
        assert response.json()["enabled"] is True

    def test_login_before_verification_returns_403(self, client: TestClient) -> None:
        signup(client)

        response = client.post(
            "/v1/auth/login", json={"email": "alice@example.com", "password": "secure123"}
        )

        assert response.status_code == 403

    def test_wrong_password_after_verification_returns_401(
        self, client: TestClient, app_parts
    ) -> None:
        _, _, notifier, _ = app_parts
        signup(client)
        client.post(
            "/v1/auth/verify",
            json={"email": "alice@example.com", "code": last_code(notifier)},
        )

        response = client.post(
            "/v1/auth/login", json={"email": "alice@example.com", "password": "wrong-password"}
        )

        assert response.status_code == 401

    def test_over_long_password_after_verification_returns_401(
        self, client: TestClient, app_parts
    ) -> None:
        _, _, notifier, _ = app_parts
        signup(client)
        client.post(
            "/v1/auth/verify",
            json={"email": "alice@example.com", "code": last_code(notifier)},
        )

        response = client.post(
            "/v1/auth/login", json={"email": "alice@example.com", "password": "p" * 80}
        )

        assert response.status_code == 401
        assert response.json() == {"detail": "Invalid email or password"}

    def test_over_long_signup_password_returns_422(self, client: TestClient) -> None:
        assert signup(client, password="p" * 80).status_code == 422

    def test_mixed_case_email_round_trips(self, client: TestClient, app_parts) -> None:
        _, store, notifier, _ = app_parts

        response = signup(client, email="Alice@Example.COM")

        assert response.json()["email"] == "Alice@Example.COM"
        assert store.find_by_email("Alice@Example.COM") is not None
        assert notifier.sent[-1][0] == "Alice@Example.COM"

    def test_duplicate_signup_returns_409(self, client: TestClient) -> None:
        assert signup(client).status_code == 201
        assert signup(client, password="different456").status_code == 409

    def test_expired_code_then_resend(self, client: TestClient, app_parts) -> None:
        _, _, notifier, clock = app_parts
        signup(client)
        old_code = last_code(notifier)
        clock.advance(timedelta(minutes=16))

        response = client.post(
            "/v1/auth/verify", json={"email": "alice@example.com", "code": old_code}
        )
        assert response.status_code == 400
        assert response.json() == {"detail": "Verification code has expired"}

        response = client.post("/v1/auth/resend", json={"email": "alice@example.com"})
        assert response.status_code == 200
        assert len(notifier.sent) == 2

        clock.advance(timedelta(minutes=45))
        response = client.post(
            "/v1/auth/verify",
            json={"email": "alice@example.com", "code": last_code(notifier)},
        )
        assert response.status_code == 200

    def test_resend_after_verification_returns_409(self, client: TestClient, app_parts) -> None:
        _, _, notifier, _ = app_parts
        signup(client)
        client.post(
            "/v1/auth/verify",
            json={"email": "alice@example.com", "code": last_code(notifier)},
        )

        response = client.post("/v1/auth/resend", json={"email": "alice@example.com"})

        assert response.status_code == 409
        assert len(notifier.sent) == 1

    def test_unknown_email_returns_404(self, client: TestClient) -> None:
        response = client.post("/v1/auth/resend", json={"email": "ghost@example.com"})
        assert response.status_code == 404


class TestDefaultWiring:
    """Flow through the real dependency factories with a failing notifier."""

    def test_signup_succeeds_when_email_delivery_fails(self) -> None:
        app = FastAPI()
        app.include_router(router, prefix="/v1")
        store = InMemoryAccountStore()
        app.state.account_store = store
        app.dependency_overrides[get_notifier] = FailingNotifier

        response = TestClient(app).post(
            "/v1/auth/signup",
            json={"username": "bob", "email": "bob@example.com", "password": "secure123"},
        )

        assert response.status_code == 201
        assert store.find_by_email("bob@example.com") is not None

    def test_unknown_email_through_default_wiring(self) -> None:
        app = FastAPI()
        app.include_router(router, prefix="/v1")
        app.state.account_store = InMemoryAccountStore()

        response = TestClient(app).post("/v1/auth/resend", json={"email": "x@example.com"})

        assert response.status_code == 404
