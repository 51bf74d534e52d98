"""Twilio WhatsApp integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class TwilioSettings(IntegrationSettings):
    """Twilio API configuration.

    Environment Variables:
        TWILIO_ACCOUNT_SID: Twilio account identifier (AC...)
        TWILIO_AUTH_TOKEN: Twilio auth token for the account
        TWILIO_PHONE_NUMBER: WhatsApp-enabled sender number (E.164, e.g. +14155238886)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        sender = settings.twilio.TWILIO_PHONE_NUMBER
        if settings.twilio.is_configured:
            ...
        ```
    """

    TWILIO_ACCOUNT_SID: str | None = Field(default=None, alias="TWILIO_ACCOUNT_SID")
    TWILIO_AUTH_TOKEN: str | None = Field(default=None, alias="TWILIO_AUTH_TOKEN")
    TWILIO_PHONE_NUMBER: str | None = Field(default=None, alias="TWILIO_PHONE_NUMBER")

    @property
    def is_configured(self) -> bool:
        """True when every credential needed to send is present."""
        return bool(
            self.TWILIO_ACCOUNT_SID
            and self.TWILIO_AUTH_TOKEN
            and self.TWILIO_PHONE_NUMBER
        )
