"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from datetime import timedelta

from fastapi import Depends, Request

from src.adapters.security.passwords import BcryptCredentialVerifier, BcryptPasswordHasher
from src.adapters.smtp.console import ConsoleNotifier
from src.adapters.smtp.smtp import SmtpNotifier
from src.config.settings import Settings, get_settings
from src.domain.ports import AccountStore, Notifier
from src.domain.verification import AccountVerificationService

# Module-level singleton - ConsoleNotifier is stateless
_console_notifier = ConsoleNotifier()


def get_account_store(request: Request) -> AccountStore:
    """
    Get the account store from app state.

    The store is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.account_store


def get_notifier(settings: Settings = Depends(get_settings)) -> Notifier:
    """Select the notifier configured by ``email_backend``."""
    if settings.email_backend == "smtp":
        return SmtpNotifier(
            host=settings.smtp_host,
            port=settings.smtp_port,
            sender=settings.smtp_sender,
            username=settings.smtp_username,
            password=settings.smtp_password,
            use_tls=settings.smtp_use_tls,
            timeout=settings.smtp_timeout_seconds,
        )
    return _console_notifier


def get_verification_service(
    store: AccountStore = Depends(get_account_store),
    notifier: Notifier = Depends(get_notifier),
    settings: Settings = Depends(get_settings),
) -> AccountVerificationService:
    """
    Create the verification service with injected dependencies.

    Wires together the store, notifier, and bcrypt adapters.
    """
    return AccountVerificationService(
        store=store,
        notifier=notifier,
        password_hasher=BcryptPasswordHasher(rounds=settings.bcrypt_cost),
        credential_verifier=BcryptCredentialVerifier(store, rounds=settings.bcrypt_cost),
        signup_code_ttl=timedelta(minutes=settings.signup_code_ttl_minutes),
        resend_code_ttl=timedelta(minutes=settings.resend_code_ttl_minutes),
    )
