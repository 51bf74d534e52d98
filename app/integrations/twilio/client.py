"""Twilio WhatsApp client."""

from typing import Optional

from twilio.http.http_client import TwilioHttpClient
from twilio.rest import Client

from infrastructure.logging import get_module_logger

logger = get_module_logger()

WHATSAPP_PREFIX = "whatsapp:"


def whatsapp_address(number: str) -> str:
    """Prefix a number with the WhatsApp channel scheme expected by Twilio."""
    number = number.strip()
    if number.startswith(WHATSAPP_PREFIX):
        return number
    return f"{WHATSAPP_PREFIX}{number}"


def create_client(account_sid: str, auth_token: str, timeout: float) -> Client:
    """Create a Twilio REST client whose HTTP calls time out after ``timeout`` seconds."""
    return Client(
        account_sid,
        auth_token,
        http_client=TwilioHttpClient(timeout=timeout),
    )


def send_whatsapp_message(
    client: Client,
    sender: str,
    to: str,
    body: str,
    media_url: Optional[str] = None,
):
    """Create one WhatsApp message.

    Parameters:
    client: Twilio REST client
    sender: WhatsApp-enabled sender number (with or without "whatsapp:")
    to: Recipient number in +<country><number> form
    body: Message text
    media_url: Optional public https URL attached to the message

    Returns the created MessageInstance. Twilio errors propagate to the caller.
    """
    params = {
        "from_": whatsapp_address(sender),
        "to": whatsapp_address(to),
        "body": body,
    }
    if media_url:
        params["media_url"] = [media_url]

    message = client.messages.create(**params)
    logger.debug("twilio_message_created", sid=message.sid, to=to)
    return message


def fetch_account(client: Client, account_sid: str):
    """Fetch the account resource; used to verify credentials."""
    return client.api.accounts(account_sid).fetch()
