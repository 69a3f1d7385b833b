"""
SMTP notifier adapter - Implements Notifier protocol.

Delivers HTML messages through an SMTP relay using the standard library
smtplib client. Transport failures are reported as NotificationError so
the domain can apply its best-effort policy.
"""

import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from src.domain.exceptions import NotificationError

logger = logging.getLogger(__name__)


class SmtpNotifier:
    """
    Implements Notifier protocol via SMTP.

    Opens one connection per message. STARTTLS and login are applied when
    configured.
    """

    def __init__(
        self,
        host: str,
        port: int,
        sender: str,
        username: str | None = None,
        password: str | None = None,
        use_tls: bool = True,
        timeout: float = 10.0,
    ) -> None:
        self.host = host
        self.port = port
        self.sender = sender
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout

    def build_message(self, to_email: str, subject: str, body: str) -> MIMEMultipart:
        """Build a multipart message carrying ``body`` as HTML."""
        msg = MIMEMultipart("alternative")
        msg["From"] = self.sender
        msg["To"] = to_email
        msg["Subject"] = subject
        msg.attach(MIMEText(body, "html", "utf-8"))
        return msg

    def send(self, to_email: str, subject: str, body: str) -> None:
        """
        Send an HTML message.

        Raises:
            NotificationError: On any SMTP or socket failure
        """
        msg = self.build_message(to_email, subject, body)

        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
                if self.use_tls:
                    server.starttls()
                if self.username and self.password:
                    server.login(self.username, self.password)
                server.sendmail(self.sender, [to_email], msg.as_string())
        except (smtplib.SMTPException, OSError) as e:
            raise NotificationError(f"SMTP delivery to {to_email} failed: {e}") from e

        logger.info("Email sent to %s via %s:%d", to_email, self.host, self.port)
