"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.twilio import TwilioSettings
from infrastructure.configuration.integrations.notif_my_id import NotifMyIdSettings
from infrastructure.configuration.integrations.media import MediaSettings

__all__ = [
    "TwilioSettings",
    "NotifMyIdSettings",
    "MediaSettings",
]
