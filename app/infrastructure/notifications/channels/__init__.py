"""WhatsApp gateway implementations."""

from infrastructure.notifications.channels.base import WhatsAppGateway
from infrastructure.notifications.channels.notif_my_id import NotifMyIdGateway
from infrastructure.notifications.channels.twilio_whatsapp import (
    TwilioWhatsAppGateway,
)

__all__ = [
    "WhatsAppGateway",
    "NotifMyIdGateway",
    "TwilioWhatsAppGateway",
]
