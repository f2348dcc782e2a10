# domain/ports.py
# Colaboradores externos que consumen los servicios (inyectados por constructor)
from __future__ import annotations
from typing import Iterable, Protocol

from domain.models import Attachment


class SystemEmailSource(Protocol):
    def system_email_address(self) -> str: ...


class MailTransport(Protocol):
    """Transporte de bajo nivel (SMTP, Graph...). Valida direcciones y adjuntos por su cuenta."""

    def send(self, sender: str, to: str, subject: str, body: str) -> None: ...

    def send_many(self, sender: str, to: Iterable[str], subject: str, body: str) -> None: ...

    def send_with_attachments(
        self,
        sender: str,
        to: Iterable[str],
        subject: str,
        body: str,
        attachments: Iterable[Attachment],
        use_html_body: bool,
    ) -> None: ...
