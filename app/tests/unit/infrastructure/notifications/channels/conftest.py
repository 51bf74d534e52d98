"""Fixtures for WhatsApp gateway tests."""

from unittest.mock import MagicMock, Mock

import pytest


@pytest.fixture
def mock_twilio_client():
    """Mock Twilio REST client.

    Returns:
        MagicMock whose messages.create returns a message with sid "SM123" and
        whose account fetch returns an active account.
    """
    client = MagicMock()
    client.messages.create.return_value = MagicMock(sid="SM123")
    client.api.accounts.return_value.fetch.return_value = MagicMock(status="active")
    return client


@pytest.fixture
def http_response_factory():
    """Factory for requests.Response doubles.

    Example:
        response = http_response_factory(200, '{"status": "success"}')
    """

    def _factory(status_code: int = 200, text: str = '{"status": "success"}'):
        response = Mock()
        response.status_code = status_code
        response.text = text
        response.ok = 200 <= status_code < 400
        return response

    return _factory
