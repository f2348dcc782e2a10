# infrastructure/email/smtp_client.py
from __future__ import annotations
import logging
import smtplib
from email.message import EmailMessage
from typing import Iterable

from domain.models import Attachment

logger = logging.getLogger(__name__)


class SmtpMailClient:
    """MailTransport sobre SMTP. Una conexión por envío."""

    def __init__(
        self,
        host: str,
        port: int = 25,
        username: str = "",
        password: str = "",
        starttls: bool = False,
        ssl: bool = False,
        timeout: int = 30,
    ) -> None:
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.starttls = starttls
        self.ssl = ssl
        self.timeout = timeout

    @staticmethod
    def build_message(
        sender: str,
        to: Iterable[str],
        subject: str,
        body: str,
        attachments: Iterable[Attachment] = (),
        use_html_body: bool = False,
    ) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = sender
        msg["To"] = ", ".join(to)
        msg["Subject"] = subject
        # un único cuerpo: text/plain o text/html según use_html_body
        msg.set_content(body, subtype="html" if use_html_body else "plain")

        for att in attachments:
            maintype, _, subtype = (att.content_type or "application/octet-stream").partition("/")
            msg.add_attachment(
                att.content,
                maintype=maintype,
                subtype=subtype or "octet-stream",
                filename=att.filename,
            )
        return msg

    def _connect(self) -> smtplib.SMTP:
        if self.ssl:
            return smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout)
        return smtplib.SMTP(self.host, self.port, timeout=self.timeout)

    def _deliver(self, msg: EmailMessage) -> None:
        with self._connect() as s:
            if self.starttls and not self.ssl:
                s.starttls()
            if self.username:
                s.login(self.username, self.password)
            s.send_message(msg)
        logger.info("SMTP %s:%s enviado a %s", self.host, self.port, msg["To"])

    # ───────── MailTransport ─────────
    def send(self, sender: str, to: str, subject: str, body: str) -> None:
        self._deliver(self.build_message(sender, [to], subject, body))

    def send_many(self, sender: str, to: Iterable[str], subject: str, body: str) -> None:
        self._deliver(self.build_message(sender, to, subject, body))

    def send_with_attachments(
        self,
        sender: str,
        to: Iterable[str],
        subject: str,
        body: str,
        attachments: Iterable[Attachment],
        use_html_body: bool,
    ) -> None:
        self._deliver(self.build_message(sender, to, subject, body, attachments, use_html_body))
