"""Incident message formatting.

Renders an Incident into the WhatsApp text sent to every recipient of a
blast. The only impure input is the clock, which callers may pin with
``now`` for reproducible output.
"""

from datetime import datetime
from typing import Optional

import arrow

from infrastructure.configuration.features.incident_blast import (
    DEFAULT_MESSAGE_FOOTER,
    DEFAULT_MESSAGE_TITLE,
)
from infrastructure.notifications.models import Incident

# Renders e.g. "19 Oktober 2026 pukul 14.05" with the "id" locale.
TIMESTAMP_FORMAT = "D MMMM YYYY [pukul] HH.mm"


def format_timestamp(
    now: Optional[datetime] = None,
    timezone: str = "Asia/Jakarta",
    locale: str = "id",
) -> str:
    """Render ``now`` (default: current time) in the given timezone and locale."""
    moment = arrow.get(now) if now is not None else arrow.utcnow()
    return moment.to(timezone).format(TIMESTAMP_FORMAT, locale=locale)


def format_incident_message(
    incident: Incident,
    now: Optional[datetime] = None,
    *,
    timezone: str = "Asia/Jakarta",
    locale: str = "id",
    title: str = DEFAULT_MESSAGE_TITLE,
    footer: str = DEFAULT_MESSAGE_FOOTER,
) -> str:
    """Build the notification text for an incident.

    Args:
        incident: Incident to describe
        now: Timestamp to render; naive datetimes are treated as UTC
        timezone: IANA timezone for the rendered timestamp
        locale: Locale for month names
        title: First line of the message
        footer: Closing text after the ``---`` separator

    Returns:
        The complete message. Empty optional fields leave their section empty.
    """
    timestamp = format_timestamp(now, timezone=timezone, locale=locale)

    lines = [
        title,
        "",
        f"Jenis: {incident.incident_type}",
        f"Waktu: {timestamp}",
        f"Lokasi: {incident.location}",
        "",
        "Deskripsi:",
        incident.description,
        "",
        "Status Terkini:",
        incident.current_status,
        "",
        "Instruksi untuk Karyawan:",
        incident.instructions,
        "",
        "---",
        footer,
    ]
    return "\n".join(lines)
