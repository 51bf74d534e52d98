"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.incident_blast import (
    IncidentBlastSettings,
)

__all__ = [
    "IncidentBlastSettings",
]
