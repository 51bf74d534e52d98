"""Incident blast feature settings."""

from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings

DEFAULT_MESSAGE_TITLE = "⚠️ [Notifikasi Insiden]"
DEFAULT_MESSAGE_FOOTER = (
    "Harap segera mengikuti instruksi di atas dan laporkan status Anda "
    "kepada atasan langsung.\n\n"
    "PT. GECL Emergency Response Team"
)


class IncidentBlastSettings(FeatureSettings):
    """Incident WhatsApp blast configuration.

    Environment Variables:
        BLAST_DEFAULT_PROVIDER: Gateway used when a request names none ("twilio" or "notif")
        BLAST_FALLBACK_ENABLED: Switch to the other gateway when the chosen one is unconfigured
        BLAST_BATCH_SIZE: Recipients sent concurrently per batch
        BLAST_BATCH_PAUSE_SECONDS: Pause between consecutive batches
        BLAST_REQUEST_TIMEOUT_SECONDS: HTTP timeout handed to gateway clients
        BLAST_RECIPIENT_DEADLINE_SECONDS: Hard deadline for one recipient's send
        BLAST_COUNTRY_CODE: Country calling code used by phone normalization
        BLAST_TIMEZONE: Timezone of the timestamp rendered in messages
        BLAST_LOCALE: Locale of the timestamp rendered in messages
        BLAST_MESSAGE_TITLE: First line of every incident message
        BLAST_MESSAGE_FOOTER: Closing text after the separator
        BLAST_HISTORY_LIMIT: Maximum blasts returned by the history endpoint
        BLAST_EMPLOYEES_FILE: JSON array of employees loaded into the directory at startup

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        batch_size = settings.incident_blast.BLAST_BATCH_SIZE
        ```
    """

    BLAST_DEFAULT_PROVIDER: str = Field(default="twilio", alias="BLAST_DEFAULT_PROVIDER")
    BLAST_FALLBACK_ENABLED: bool = Field(default=True, alias="BLAST_FALLBACK_ENABLED")
    BLAST_BATCH_SIZE: int = Field(default=10, ge=1, alias="BLAST_BATCH_SIZE")
    BLAST_BATCH_PAUSE_SECONDS: float = Field(
        default=2.0, ge=0, alias="BLAST_BATCH_PAUSE_SECONDS"
    )
    BLAST_REQUEST_TIMEOUT_SECONDS: float = Field(
        default=30.0, gt=0, alias="BLAST_REQUEST_TIMEOUT_SECONDS"
    )
    BLAST_RECIPIENT_DEADLINE_SECONDS: float = Field(
        default=45.0, gt=0, alias="BLAST_RECIPIENT_DEADLINE_SECONDS"
    )
    BLAST_COUNTRY_CODE: str = Field(default="62", alias="BLAST_COUNTRY_CODE")
    BLAST_TIMEZONE: str = Field(default="Asia/Jakarta", alias="BLAST_TIMEZONE")
    BLAST_LOCALE: str = Field(default="id", alias="BLAST_LOCALE")
    BLAST_MESSAGE_TITLE: str = Field(
        default=DEFAULT_MESSAGE_TITLE, alias="BLAST_MESSAGE_TITLE"
    )
    BLAST_MESSAGE_FOOTER: str = Field(
        default=DEFAULT_MESSAGE_FOOTER, alias="BLAST_MESSAGE_FOOTER"
    )
    BLAST_HISTORY_LIMIT: int = Field(default=50, ge=1, alias="BLAST_HISTORY_LIMIT")
    BLAST_EMPLOYEES_FILE: Optional[str] = Field(
        default=None, alias="BLAST_EMPLOYEES_FILE"
    )

    @field_validator("BLAST_DEFAULT_PROVIDER")
    @classmethod
    def normalize_provider(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("BLAST_COUNTRY_CODE")
    @classmethod
    def validate_country_code(cls, v: str) -> str:
        digits = v.strip().lstrip("+")
        if not digits.isdigit():
            raise ValueError(f"Country code must be digits only: {v}")
        return digits
