"""Best-effort delivery of failure reports to an operator."""

from __future__ import annotations

import getpass
import logging
import smtplib
import socket
from email.message import EmailMessage
from typing import Optional

logger = logging.getLogger("apotd")

DEFAULT_SUBJECT = "apotd failed"
DEFAULT_SMTP_HOST = "localhost"


class NullNotifier:
    """Used when no recipient is configured."""

    def notify(self, message: str, subject: str = DEFAULT_SUBJECT) -> Optional[str]:
        return None


class MailNotifier:
    """Mail failure reports through an SMTP relay.

    ``notify`` never raises: delivery problems are returned as text so the
    caller can append them to the original report.
    """

    def __init__(
        self,
        recipient: str,
        sender: Optional[str] = None,
        smtp_host: str = DEFAULT_SMTP_HOST,
        smtp_factory=smtplib.SMTP,
    ) -> None:
        self.recipient = recipient
        self.sender = sender or f"{getpass.getuser()}@{socket.gethostname()}"
        self.smtp_host = smtp_host
        self._smtp_factory = smtp_factory

    def build_message(self, message: str, subject: str) -> EmailMessage:
        mail = EmailMessage()
        mail["Subject"] = subject
        mail["From"] = self.sender
        mail["To"] = self.recipient
        mail.set_content(message)
        return mail

    def notify(self, message: str, subject: str = DEFAULT_SUBJECT) -> Optional[str]:
        mail = self.build_message(message, subject)
        try:
            with self._smtp_factory(self.smtp_host) as smtp:
                smtp.send_message(mail)
        except (OSError, smtplib.SMTPException) as exc:
            logger.debug("Mail to %s failed: %s", self.recipient, exc)
            return f"Could not mail {self.recipient} via {self.smtp_host}: {exc}"
        logger.info("Mailed failure report to %s", self.recipient)
        return None


def build_notifier(
    recipient: Optional[str],
    sender: Optional[str] = None,
    smtp_host: Optional[str] = None,
):
    if not recipient:
        return NullNotifier()
    return MailNotifier(recipient, sender=sender, smtp_host=smtp_host or DEFAULT_SMTP_HOST)
