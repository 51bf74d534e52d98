"""Twilio module for sending WhatsApp messages through the Twilio API."""

from .client import (
    create_client,
    fetch_account,
    send_whatsapp_message,
    whatsapp_address,
)

__all__ = [
    "create_client",
    "fetch_account",
    "send_whatsapp_message",
    "whatsapp_address",
]
