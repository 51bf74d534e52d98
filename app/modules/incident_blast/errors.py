"""Domain errors raised by the incident blast service."""

from infrastructure.notifications.registry import UnknownGatewayError


class IncidentBlastError(Exception):
    """Base class for incident blast errors."""


class NoRecipientsError(IncidentBlastError):
    """Raised when the targeting matches no active employee."""


class BlastNotFoundError(IncidentBlastError):
    """Raised when a blast id is not in the repository."""

    def __init__(self, blast_id: str):
        super().__init__(f"Incident blast not found: {blast_id}")
        self.blast_id = blast_id


__all__ = [
    "IncidentBlastError",
    "NoRecipientsError",
    "BlastNotFoundError",
    "UnknownGatewayError",
]
