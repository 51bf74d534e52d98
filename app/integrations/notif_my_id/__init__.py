"""notif.my.id module for sending WhatsApp messages through the form API."""

from .client import build_send_form, post_message

__all__ = [
    "build_send_form",
    "post_message",
]
