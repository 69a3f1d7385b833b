"""Unit tests for the Account entity."""

from datetime import timedelta

from src.domain.account import Account
from tests.fakes import FIXED_NOW


def make_account(**overrides) -> Account:
    fields = {"username": "alice", "email": "a@x.com", "password_hash": "$2b$04$hash"}
    fields.update(overrides)
    return Account(**fields)


class TestAccountDefaults:
    def test_new_account_is_unverified(self) -> None:
        account = make_account()

        assert account.enabled is False
        assert account.verification_code is None
        assert account.verification_code_expires_at is None
        assert account.id is None


class TestIssueVerificationCode:
    def test_sets_code_and_expiry_together(self) -> None:
        account = make_account()
        expires_at = FIXED_NOW + timedelta(minutes=15)

        account.issue_verification_code("123456", expires_at)

        assert account.verification_code == "123456"
        assert account.verification_code_expires_at == expires_at


class TestMarkVerified:
    def test_enables_and_clears_code_fields(self) -> None:
        account = make_account()
        account.issue_verification_code("123456", FIXED_NOW)

        account.mark_verified()

        assert account.enabled is True
        assert account.verification_code is None
        assert account.verification_code_expires_at is None


class TestIsVerificationCodeExpired:
    def test_not_expired_before_expiry(self) -> None:
        account = make_account()
        account.issue_verification_code("123456", FIXED_NOW + timedelta(seconds=1))

        assert account.is_verification_code_expired(FIXED_NOW) is False

    def test_not_expired_at_exact_expiry(self) -> None:
        account = make_account()
        account.issue_verification_code("123456", FIXED_NOW)

        assert account.is_verification_code_expired(FIXED_NOW) is False

    def test_expired_after_expiry(self) -> None:
        account = make_account()
        account.issue_verification_code("123456", FIXED_NOW)

        assert account.is_verification_code_expired(FIXED_NOW + timedelta(microseconds=1)) is True

    def test_no_expiry_is_not_expired(self) -> None:
        assert make_account().is_verification_code_expired(FIXED_NOW) is False
