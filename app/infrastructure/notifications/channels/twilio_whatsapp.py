"""WhatsApp gateway implementation using the Twilio SDK."""

from typing import Optional, TYPE_CHECKING

from infrastructure.logging import get_module_logger
from infrastructure.notifications.channels.base import WhatsAppGateway
from infrastructure.notifications.media import MediaUrlBuilder
from infrastructure.notifications.models import (
    ConnectionCheck,
    DeliveryOutcome,
    Recipient,
)
from infrastructure.notifications.phone import to_plus_format
from infrastructure.operations import (
    OperationResult,
    OperationStatus,
    classify_twilio_error,
)
from integrations.twilio.client import (
    create_client,
    fetch_account,
    send_whatsapp_message,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()


class TwilioWhatsAppGateway(WhatsAppGateway):
    """WhatsApp gateway using the Twilio Messages API.

    Recipients are addressed as ``whatsapp:+<country><number>``. Local media
    paths are rewritten into public https URLs and attached via ``media_url``.
    """

    def __init__(
        self,
        settings: "Settings",
        client=None,
        media: Optional[MediaUrlBuilder] = None,
    ):
        """Initialize the Twilio gateway.

        Args:
            settings: Settings instance with twilio, media and incident_blast sections.
            client: Optional pre-built Twilio client (tests inject a mock).
            media: Optional MediaUrlBuilder; built from settings.media otherwise.
        """
        self._account_sid = settings.twilio.TWILIO_ACCOUNT_SID
        self._sender = settings.twilio.TWILIO_PHONE_NUMBER
        self._configured = settings.twilio.is_configured
        self._country_code = settings.incident_blast.BLAST_COUNTRY_CODE
        self._media = media or MediaUrlBuilder(settings.media.domains)

        if client is None and self._configured:
            client = create_client(
                self._account_sid,
                settings.twilio.TWILIO_AUTH_TOKEN,
                timeout=settings.incident_blast.BLAST_REQUEST_TIMEOUT_SECONDS,
            )
        self._client = client

        logger.info(
            "initialized_whatsapp_gateway",
            backend="twilio",
            configured=self._configured,
        )

    @property
    def channel_name(self) -> str:
        return "twilio"

    @property
    def is_configured(self) -> bool:
        return self._configured

    def format_phone(self, raw_phone: str) -> str:
        return to_plus_format(raw_phone, self._country_code)

    def public_media_url(self, media_path: Optional[str]) -> Optional[str]:
        return self._media.public_url(media_path)

    def send(
        self, recipient: Recipient, message: str, media_path: Optional[str] = None
    ) -> DeliveryOutcome:
        """Send one WhatsApp message through Twilio.

        Any exception raised by the SDK becomes a FAILED outcome carrying the
        error's message verbatim.
        """
        failure = self.precheck(recipient)
        if failure is not None:
            return failure

        phone_number = self.format_phone(recipient.phone)
        media_url = self._media.public_url(media_path)

        try:
            created = send_whatsapp_message(
                self._client,
                sender=self._sender,
                to=phone_number,
                body=message,
                media_url=media_url,
            )
        except Exception as e:
            result = classify_twilio_error(e)
            logger.error(
                "whatsapp_send_failed",
                channel=self.channel_name,
                employee_id=recipient.id,
                phone_number=phone_number,
                error=result.message,
                error_code=result.error_code,
            )
            return self.outcome_from_result(recipient, phone_number, result)

        sid = getattr(created, "sid", None)
        logger.info(
            "whatsapp_sent",
            channel=self.channel_name,
            employee_id=recipient.id,
            phone_number=phone_number,
            sid=sid,
        )
        return self.outcome_from_result(
            recipient,
            phone_number,
            OperationResult.success(data={"sid": sid}, message="Sent via Twilio"),
            external_id=sid,
        )

    def test_connection(self) -> ConnectionCheck:
        """Fetch the Twilio account to verify credentials and account state."""
        if not self._configured:
            return ConnectionCheck(
                success=False,
                message=(
                    "Twilio is not configured: TWILIO_ACCOUNT_SID, "
                    "TWILIO_AUTH_TOKEN and TWILIO_PHONE_NUMBER are required"
                ),
                channel=self.channel_name,
            )

        try:
            account = fetch_account(self._client, self._account_sid)
        except Exception as e:
            result = classify_twilio_error(e)
            logger.error(
                "twilio_connection_test_failed",
                error=result.message,
                error_code=result.error_code,
            )
            if result.status == OperationStatus.UNAUTHORIZED:
                message = f"Twilio rejected the credentials: {result.message}"
            else:
                message = f"Twilio connection failed: {result.message}"
            return ConnectionCheck(
                success=False, message=message, channel=self.channel_name
            )

        account_status = str(getattr(account, "status", "") or "").lower()
        if account_status == "active":
            return ConnectionCheck(
                success=True,
                message="Connected to Twilio; account is active",
                channel=self.channel_name,
            )

        return ConnectionCheck(
            success=False,
            message=(
                "Credentials accepted but the Twilio account is "
                f"{account_status or 'not active'}"
            ),
            channel=self.channel_name,
        )
