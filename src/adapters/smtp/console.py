"""
Console notifier adapter - Implements Notifier protocol.

This module provides a console-based implementation of the domain's
notifier port, logging outgoing messages for development purposes.
"""

import logging

logger = logging.getLogger(__name__)


class ConsoleNotifier:
    """
    Implements Notifier protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    For demo/development purposes - never fails.
    """

    def send(self, to_email: str, subject: str, body: str) -> None:
        """
        Log the message instead of delivering it.

        The summary line is logged at INFO, the full body at DEBUG.

        Args:
            to_email: Recipient email address
            subject: Subject line
            body: Formatted message body
        """
        logger.info("[NOTIFY] To: %s Subject: %s", to_email, subject)
        logger.debug("[NOTIFY] Body for %s:\n%s", to_email, body)
