"""Incident blast core models.

Gateway-agnostic models for the incident notification blast. Features
describe the incident and pick recipients; infrastructure formats the
message once and fans it out through a WhatsApp gateway.

Uses Pydantic BaseModel for:
- Runtime input validation (a malformed incident fails before any send)
- Immutable value objects (frozen models for incidents and outcomes)
- JSON serialization for persistence and API responses
"""

from datetime import datetime
from enum import Enum
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class DeliveryStatus(Enum):
    """Per-recipient delivery status."""

    SENT = "sent"
    FAILED = "failed"


class Incident(BaseModel):
    """Incident description rendered into the blast message.

    Attributes:
        incident_type: Kind of incident (e.g. "Kebakaran", "Gas leak")
        location: Where it happened
        description: Free-text description (optional, renders empty)
        current_status: Current status text (optional, renders empty)
        instructions: Instructions for employees (optional, renders empty)
        media_path: Local media path (``/objects/...``) or public URL

    Example:
        incident = Incident(
            incident_type="Kebakaran",
            location="Workshop B",
            description="Asap terlihat dari gudang oli",
            current_status="Tim ERT di lokasi",
            instructions="Evakuasi ke titik kumpul 2",
        )
    """

    model_config = ConfigDict(frozen=True)

    incident_type: str
    location: str
    description: str = ""
    current_status: str = ""
    instructions: str = ""
    media_path: Optional[str] = None

    @field_validator("incident_type", "location")
    @classmethod
    def validate_required_text(cls, v: str) -> str:
        """Ensure identifying fields are not blank."""
        if not v or not v.strip():
            raise ValueError("Field cannot be blank")
        return v.strip()

    @field_validator("media_path")
    @classmethod
    def blank_media_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()


class Recipient(BaseModel):
    """Employee receiving the blast.

    The phone number is kept in whatever format it was entered; each gateway
    normalizes it to its own wire format.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    phone: str = ""
    department: Optional[str] = None
    status: str = "active"

    @property
    def is_active(self) -> bool:
        return self.status == "active"


class DeliveryOutcome(BaseModel):
    """Result of one send attempt to one recipient.

    Created once per recipient per blast and never mutated.

    Attributes:
        employee_id: Recipient identifier
        employee_name: Recipient display name
        phone_number: Number in the gateway's normalized format
        status: SENT or FAILED
        channel: Gateway name ("twilio", "notif")
        error_message: Diagnostic text for failures
        error_code: Machine error code for failures
        sent_at: UTC timestamp of a successful send
        external_id: Gateway message identifier when one is returned
    """

    model_config = ConfigDict(frozen=True)

    employee_id: str
    employee_name: str
    phone_number: str
    status: DeliveryStatus
    channel: str
    error_message: Optional[str] = None
    error_code: Optional[str] = None
    sent_at: Optional[datetime] = None
    external_id: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """Check if delivery was successful."""
        return self.status == DeliveryStatus.SENT

    @classmethod
    def sent(
        cls,
        recipient: Recipient,
        phone_number: str,
        channel: str,
        sent_at: datetime,
        external_id: Optional[str] = None,
    ) -> "DeliveryOutcome":
        return cls(
            employee_id=recipient.id,
            employee_name=recipient.name,
            phone_number=phone_number,
            status=DeliveryStatus.SENT,
            channel=channel,
            sent_at=sent_at,
            external_id=external_id,
        )

    @classmethod
    def failed(
        cls,
        recipient: Recipient,
        phone_number: str,
        channel: str,
        error_message: str,
        error_code: Optional[str] = None,
    ) -> "DeliveryOutcome":
        return cls(
            employee_id=recipient.id,
            employee_name=recipient.name,
            phone_number=phone_number,
            status=DeliveryStatus.FAILED,
            channel=channel,
            error_message=error_message or "Unknown error",
            error_code=error_code,
        )


class BlastSummary(BaseModel):
    """Aggregate counts of one blast."""

    total: int
    sent: int
    failed: int

    @classmethod
    def from_outcomes(cls, outcomes: Iterable[DeliveryOutcome]) -> "BlastSummary":
        outcomes = list(outcomes)
        sent = sum(1 for o in outcomes if o.is_success)
        return cls(total=len(outcomes), sent=sent, failed=len(outcomes) - sent)


class ConnectionCheck(BaseModel):
    """Result of a gateway connectivity probe."""

    success: bool
    message: str
    channel: str
