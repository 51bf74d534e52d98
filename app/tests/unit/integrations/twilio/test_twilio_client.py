"""Unit tests for the Twilio WhatsApp client helpers."""

from unittest.mock import MagicMock, patch

import pytest

from integrations.twilio.client import (
    create_client,
    fetch_account,
    send_whatsapp_message,
    whatsapp_address,
)


@pytest.mark.unit
class TestWhatsappAddress:
    def test_adds_prefix(self):
        assert whatsapp_address("+6281234567890") == "whatsapp:+6281234567890"

    def test_keeps_existing_prefix(self):
        assert whatsapp_address(" whatsapp:+14155238886 ") == "whatsapp:+14155238886"


@pytest.mark.unit
class TestSendWhatsappMessage:
    def test_creates_message(self):
        client = MagicMock()
        client.messages.create.return_value = MagicMock(sid="SM1")

        message = send_whatsapp_message(
            client, sender="+14155238886", to="+6281234567890", body="Halo"
        )

        assert message.sid == "SM1"
        client.messages.create.assert_called_once_with(
            from_="whatsapp:+14155238886", to="whatsapp:+6281234567890", body="Halo"
        )

    def test_attaches_media(self):
        client = MagicMock()

        send_whatsapp_message(
            client,
            sender="whatsapp:+14155238886",
            to="+6281234567890",
            body="Halo",
            media_url="https://blast.example.co.id/objects/a.jpg",
        )

        assert client.messages.create.call_args.kwargs["media_url"] == [
            "https://blast.example.co.id/objects/a.jpg"
        ]

    def test_errors_propagate(self):
        client = MagicMock()
        client.messages.create.side_effect = RuntimeError("boom")

        with pytest.raises(RuntimeError):
            send_whatsapp_message(client, sender="+1", to="+62", body="x")


@pytest.mark.unit
class TestAccountAndClient:
    def test_fetch_account(self):
        client = MagicMock()
        client.api.accounts.return_value.fetch.return_value = MagicMock(status="active")

        account = fetch_account(client, "AC1")

        assert account.status == "active"
        client.api.accounts.assert_called_once_with("AC1")

    @patch("integrations.twilio.client.TwilioHttpClient")
    @patch("integrations.twilio.client.Client")
    def test_create_client_sets_timeout(self, mock_client, mock_http_client):
        create_client("AC1", "token", timeout=15)

        mock_http_client.assert_called_once_with(timeout=15)
        mock_client.assert_called_once_with(
            "AC1", "token", http_client=mock_http_client.return_value
        )
