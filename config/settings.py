# config/settings.py
from __future__ import annotations
from dataclasses import dataclass
import logging
import os
from dotenv import load_dotenv

load_dotenv()

@dataclass(frozen=True)
class Settings:
    # Remitente fijo de todas las notificaciones del sistema
    SYSTEM_EMAIL_ADDRESS: str = os.getenv("SYSTEM_EMAIL_ADDRESS", "")

    EMAIL_PROVIDER: str = os.getenv("EMAIL_PROVIDER", "smtp").lower()  # smtp | graph

    # SMTP
    SMTP_HOST: str = os.getenv("SMTP_HOST", "localhost")
    SMTP_PORT: int = int(os.getenv("SMTP_PORT", 25))
    SMTP_USERNAME: str = os.getenv("SMTP_USERNAME", "")
    SMTP_PASSWORD: str = os.getenv("SMTP_PASSWORD", "")
    SMTP_STARTTLS: bool = os.getenv("SMTP_STARTTLS", "false").lower() == "true"
    SMTP_SSL: bool = os.getenv("SMTP_SSL", "false").lower() == "true"
    SMTP_TIMEOUT: int = int(os.getenv("SMTP_TIMEOUT", "30"))

    # GRAPH
    GRAPH_TENANT_ID: str = os.getenv("GRAPH_TENANT_ID", "")
    GRAPH_CLIENT_ID: str = os.getenv("GRAPH_CLIENT_ID", "")
    GRAPH_CLIENT_SECRET: str = os.getenv("GRAPH_CLIENT_SECRET", "")
    GRAPH_BASE: str = os.getenv("GRAPH_BASE", "https://graph.microsoft.com/v1.0")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # ───────── helpers ─────────
    def system_email_address(self) -> str:
        return (self.SYSTEM_EMAIL_ADDRESS or "").strip()

    def email_provider(self) -> str:
        return (self.EMAIL_PROVIDER or "").strip().lower()

    def log_level(self) -> int:
        # nombres desconocidos → INFO
        level = logging.getLevelName((self.LOG_LEVEL or "").strip().upper())
        return level if isinstance(level, int) else logging.INFO
