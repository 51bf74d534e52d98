"""Incident notification blast over WhatsApp.

Provides the gateway-agnostic blast pipeline:
- Message formatting (one message per blast)
- Per-gateway phone normalization
- Interchangeable WhatsApp gateways (Twilio, notif.my.id)
- Batched, paced fan-out with a per-recipient deadline
- Connectivity probes

Usage:
    from infrastructure.notifications import (
        BlastOrchestrator,
        BlastSummary,
        Incident,
        Recipient,
        NotifMyIdGateway,
    )

    # Feature-level: describe the incident and pick recipients
    incident = Incident(incident_type="Kebakaran", location="Workshop B")
    recipients = [Recipient(id="C-00001", name="Budi", phone="081234567890")]

    # Infrastructure-level: fan out via a gateway
    orchestrator = BlastOrchestrator.from_settings(NotifMyIdGateway(settings), settings)
    outcomes = await orchestrator.send_blast(recipients, incident)
    summary = BlastSummary.from_outcomes(outcomes)
"""

from infrastructure.notifications.channels import (
    NotifMyIdGateway,
    TwilioWhatsAppGateway,
    WhatsAppGateway,
)
from infrastructure.notifications.dispatcher import BlastOrchestrator, partition
from infrastructure.notifications.formatter import (
    format_incident_message,
    format_timestamp,
)
from infrastructure.notifications.media import MediaUrlBuilder
from infrastructure.notifications.models import (
    BlastSummary,
    ConnectionCheck,
    DeliveryOutcome,
    DeliveryStatus,
    Incident,
    Recipient,
)
from infrastructure.notifications.phone import (
    normalize_digits,
    to_digits_format,
    to_plus_format,
)
from infrastructure.notifications.registry import GatewayRegistry, UnknownGatewayError

__all__ = [
    # Models
    "BlastSummary",
    "ConnectionCheck",
    "DeliveryOutcome",
    "DeliveryStatus",
    "Incident",
    "Recipient",
    # Gateways
    "WhatsAppGateway",
    "NotifMyIdGateway",
    "TwilioWhatsAppGateway",
    "GatewayRegistry",
    "UnknownGatewayError",
    # Orchestration
    "BlastOrchestrator",
    "partition",
    # Helpers
    "MediaUrlBuilder",
    "format_incident_message",
    "format_timestamp",
    "normalize_digits",
    "to_digits_format",
    "to_plus_format",
]
