from datetime import datetime
from enum import Enum
from typing import Annotated, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from infrastructure.notifications.models import DeliveryOutcome, Incident


class ProviderType(str, Enum):
    """Schema for WhatsApp gateway names."""

    TWILIO = "twilio"
    NOTIF = "notif"


class TargetType(str, Enum):
    """Schema for recipient targeting modes."""

    ALL = "all"
    DEPARTMENT = "department"
    SPECIFIC = "specific"


class IncidentBlastRequest(BaseModel):
    """Schema for sending an incident blast."""

    incident_type: Annotated[
        str,
        Field(
            ...,
            min_length=1,
            description="Kind of incident",
            json_schema_extra={"example": "Kebakaran"},
        ),
    ]
    location: Annotated[
        str,
        Field(
            ...,
            min_length=1,
            description="Where the incident happened",
            json_schema_extra={"example": "Workshop B"},
        ),
    ]
    description: Annotated[
        str,
        Field(default="", description="What happened"),
    ] = ""
    current_status: Annotated[
        str,
        Field(default="", description="Current status of the incident"),
    ] = ""
    instructions: Annotated[
        str,
        Field(
            default="",
            description="Instructions for employees",
            json_schema_extra={"example": "Evakuasi ke titik kumpul 2"},
        ),
    ] = ""
    media_path: Annotated[
        Optional[str],
        Field(
            default=None,
            description="Uploaded media path (/objects/...) or public URL",
            json_schema_extra={"example": "/objects/uploads/incident-1.jpg"},
        ),
    ] = None
    provider: Annotated[
        Optional[ProviderType],
        Field(
            default=None,
            description="Gateway to use; the configured default when omitted",
        ),
    ] = None
    target_type: Annotated[
        TargetType,
        Field(default=TargetType.ALL, description="Recipient targeting mode"),
    ] = TargetType.ALL
    target_value: Annotated[
        Optional[str],
        Field(
            default=None,
            description="Department name when target_type is 'department'",
            json_schema_extra={"example": "Operation"},
        ),
    ] = None
    employee_ids: Annotated[
        Optional[List[str]],
        Field(
            default=None,
            description="Employee ids when target_type is 'specific'",
            json_schema_extra={"example": ["C-00001", "C-00002"]},
        ),
    ] = None

    @field_validator("incident_type", "location")
    @classmethod
    def validate_required_text(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Field cannot be blank")
        return v.strip()

    @model_validator(mode="after")
    def validate_target(self):
        if self.target_type == TargetType.DEPARTMENT and not (
            self.target_value and self.target_value.strip()
        ):
            raise ValueError("target_value is required when target_type is 'department'")
        if self.target_type == TargetType.SPECIFIC and not self.employee_ids:
            raise ValueError("employee_ids is required when target_type is 'specific'")
        return self

    def to_incident(self) -> Incident:
        return Incident(
            incident_type=self.incident_type,
            location=self.location,
            description=self.description,
            current_status=self.current_status,
            instructions=self.instructions,
            media_path=self.media_path,
        )


class BlastRecord(BaseModel):
    """Schema for a stored incident blast and its per-recipient results."""

    id: str
    incident_type: str
    location: str
    description: str = ""
    current_status: str = ""
    instructions: str = ""
    media_path: Optional[str] = None
    provider: str
    total_employees: int
    success_count: int
    failed_count: int
    results: List[DeliveryOutcome] = Field(default_factory=list)
    created_at: datetime


class ConnectionTestResponse(BaseModel):
    """Schema for a gateway connectivity probe."""

    success: bool
    message: str
    provider: str
