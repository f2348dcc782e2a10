# application/services/notifier.py
from __future__ import annotations
import logging
from typing import Iterable

from domain.models import Attachment
from domain.ports import MailTransport, SystemEmailSource

logger = logging.getLogger(__name__)


class Notifier:
    """
    Envía mensajes del sistema a través de un MailTransport inyectado.
    El remitente se lee UNA vez de la configuración al construir y no cambia.
    Sin validación ni reintentos: los errores del transporte llegan al llamador.
    """

    def __init__(self, transport: MailTransport, settings: SystemEmailSource) -> None:
        self._transport = transport
        self._message_from = settings.system_email_address()

    @property
    def message_from(self) -> str:
        return self._message_from

    def send(self, to: str, subject: str, body: str) -> None:
        logger.info("Notificación a %s: %s", to, subject)
        self._transport.send(self._message_from, to, subject, body)

    def send_many(self, to: Iterable[str], subject: str, body: str) -> None:
        logger.info("Notificación múltiple: %s", subject)
        self._transport.send_many(self._message_from, to, subject, body)

    def send_with_attachments(
        self,
        to: Iterable[str],
        subject: str,
        body: str,
        attachments: Iterable[Attachment],
    ) -> None:
        logger.info("Notificación con adjuntos: %s", subject)
        self._transport.send_with_attachments(
            self._message_from, to, subject, body, attachments, use_html_body=False
        )
