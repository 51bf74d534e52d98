"""notif.my.id WhatsApp gateway settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class NotifMyIdSettings(IntegrationSettings):
    """notif.my.id gateway configuration.

    Environment Variables:
        NOTIF_API_KEY: API key issued by the notif.my.id dashboard
        NOTIF_API_URL: Form-encoded send endpoint
        NOTIF_PROBE_NUMBER: Number used by the connectivity probe
    """

    NOTIF_API_KEY: str | None = Field(default=None, alias="NOTIF_API_KEY")
    NOTIF_API_URL: str = Field(
        default="https://app7.notif.my.id/req.php", alias="NOTIF_API_URL"
    )
    NOTIF_PROBE_NUMBER: str = Field(default="6281234567890", alias="NOTIF_PROBE_NUMBER")

    @property
    def is_configured(self) -> bool:
        return bool(self.NOTIF_API_KEY and self.NOTIF_API_URL)
