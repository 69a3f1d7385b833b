"""Security adapters - Password hashing and credential verification."""

from .passwords import BcryptCredentialVerifier, BcryptPasswordHasher

__all__ = ["BcryptCredentialVerifier", "BcryptPasswordHasher"]
