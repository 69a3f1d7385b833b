"""Notifier adapters - Email delivery implementations."""

from .console import ConsoleNotifier
from .smtp import SmtpNotifier

__all__ = ["ConsoleNotifier", "SmtpNotifier"]
