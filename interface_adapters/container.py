# interface_adapters/container.py
# Punto de composición: Settings -> transporte de correo, Notifier y FileAccessor
from __future__ import annotations
import logging

from config.settings import Settings
from domain.ports import MailTransport
from application.services.notifier import Notifier
from infrastructure.email.graph_client import GraphMailClient
from infrastructure.email.smtp_client import SmtpMailClient
from infrastructure.filesystem.file_accessor import FileAccessor

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def build_mail_transport(settings: Settings) -> MailTransport:
    provider = settings.email_provider()
    if provider == "graph":
        logger.info("Transporte de correo: Graph (%s)", settings.GRAPH_BASE)
        return GraphMailClient(
            tenant_id=settings.GRAPH_TENANT_ID,
            client_id=settings.GRAPH_CLIENT_ID,
            client_secret=settings.GRAPH_CLIENT_SECRET,
            base=settings.GRAPH_BASE,
        )
    if provider == "smtp":
        logger.info("Transporte de correo: SMTP host=%s port=%s", settings.SMTP_HOST, settings.SMTP_PORT)
        return SmtpMailClient(
            host=settings.SMTP_HOST,
            port=settings.SMTP_PORT,
            username=settings.SMTP_USERNAME,
            password=settings.SMTP_PASSWORD,
            starttls=settings.SMTP_STARTTLS,
            ssl=settings.SMTP_SSL,
            timeout=settings.SMTP_TIMEOUT,
        )
    raise ValueError(f"EMAIL_PROVIDER desconocido: {provider!r} (graph | smtp)")


def build_notifier(settings: Settings, transport: MailTransport | None = None) -> Notifier:
    return Notifier(transport or build_mail_transport(settings), settings)


def build_file_accessor() -> FileAccessor:
    return FileAccessor()
