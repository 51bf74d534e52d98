"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the incident
blast service using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    TwilioSettings, NotifMyIdSettings, MediaSettings: Integration settings
    IncidentBlastSettings: Blast feature settings

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    api_key = settings.notif.NOTIF_API_KEY
    pause = settings.incident_blast.BLAST_BATCH_PAUSE_SECONDS
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.integrations import (
    TwilioSettings,
    NotifMyIdSettings,
    MediaSettings,
)
from infrastructure.configuration.features import IncidentBlastSettings

__all__ = [
    "Settings",
    "TwilioSettings",
    "NotifMyIdSettings",
    "MediaSettings",
    "IncidentBlastSettings",
]
