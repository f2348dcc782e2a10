"""Tests for settings and the composition root."""

import logging
from unittest import mock

import pytest

from application.services.notifier import Notifier
from config.settings import Settings
from infrastructure.email.graph_client import GraphMailClient
from infrastructure.email.smtp_client import SmtpMailClient
from infrastructure.filesystem.file_accessor import FileAccessor
from interface_adapters import container


class TestSettings:
    """Settings helpers."""

    def test_system_email_address_is_stripped(self):
        assert Settings(SYSTEM_EMAIL_ADDRESS="  noreply@example.com ").system_email_address() == "noreply@example.com"

    def test_email_provider_is_normalized(self):
        assert Settings(EMAIL_PROVIDER=" Graph ").email_provider() == "graph"

    @pytest.mark.parametrize("name, level", [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("nope", logging.INFO)])
    def test_log_level(self, name, level):
        assert Settings(LOG_LEVEL=name).log_level() == level

    def test_settings_are_frozen(self):
        settings = Settings()
        with pytest.raises(AttributeError):
            settings.SYSTEM_EMAIL_ADDRESS = "x"


class TestContainer:
    """Builders wire components from Settings."""

    def test_smtp_transport(self):
        settings = Settings(EMAIL_PROVIDER="smtp", SMTP_HOST="mail.example.com", SMTP_PORT=587, SMTP_STARTTLS=True)
        transport = container.build_mail_transport(settings)

        assert isinstance(transport, SmtpMailClient)
        assert transport.host == "mail.example.com"
        assert transport.port == 587
        assert transport.starttls is True

    def test_graph_transport(self):
        settings = Settings(EMAIL_PROVIDER="graph", GRAPH_TENANT_ID="t", GRAPH_CLIENT_ID="c", GRAPH_CLIENT_SECRET="s")
        transport = container.build_mail_transport(settings)

        assert isinstance(transport, GraphMailClient)
        assert transport.tenant_id == "t"

    def test_unknown_provider(self):
        with pytest.raises(ValueError):
            container.build_mail_transport(Settings(EMAIL_PROVIDER="pigeon"))

    def test_build_notifier_with_injected_transport(self):
        transport = mock.Mock()
        notifier = container.build_notifier(Settings(SYSTEM_EMAIL_ADDRESS="noreply@example.com"), transport)

        assert isinstance(notifier, Notifier)
        notifier.send("a@example.com", "Hi", "Body")
        transport.send.assert_called_once_with("noreply@example.com", "a@example.com", "Hi", "Body")

    def test_build_notifier_builds_transport(self):
        notifier = container.build_notifier(Settings(EMAIL_PROVIDER="smtp", SYSTEM_EMAIL_ADDRESS="s@example.com"))
        assert notifier.message_from == "s@example.com"

    def test_build_file_accessor(self):
        assert isinstance(container.build_file_accessor(), FileAccessor)

    def test_configure_logging(self):
        with mock.patch("interface_adapters.container.logging.basicConfig") as basic_config:
            container.configure_logging(Settings(LOG_LEVEL="DEBUG"))
        assert basic_config.call_args[1]["level"] == logging.DEBUG
