"""WhatsApp gateway implementation using the notif.my.id form API."""

from typing import Optional, TYPE_CHECKING

from infrastructure.logging import get_module_logger
from infrastructure.notifications.channels.base import WhatsAppGateway
from infrastructure.notifications.media import MediaUrlBuilder
from infrastructure.notifications.models import (
    ConnectionCheck,
    DeliveryOutcome,
    Recipient,
)
from infrastructure.notifications.phone import to_digits_format
from infrastructure.notifications.responses import (
    classify_send_response,
    decode_response,
    is_restricted,
)
from infrastructure.operations import classify_requests_error
from integrations.notif_my_id.client import post_message

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()

PROBE_MESSAGE = "Test connection from incident blast system"


class NotifMyIdGateway(WhatsAppGateway):
    """WhatsApp gateway using notif.my.id.

    Sends ``apikey``, ``number`` (bare digits), ``text``, ``action=send`` and
    an optional ``media`` URL as a form-encoded POST. The response body may be
    JSON or free text; see infrastructure.notifications.responses.
    """

    def __init__(
        self,
        settings: "Settings",
        media: Optional[MediaUrlBuilder] = None,
    ):
        """Initialize the notif.my.id gateway.

        Args:
            settings: Settings instance with notif, media and incident_blast sections.
            media: Optional MediaUrlBuilder; built from settings.media otherwise.
        """
        self._api_key = settings.notif.NOTIF_API_KEY
        self._api_url = settings.notif.NOTIF_API_URL
        self._probe_number = settings.notif.NOTIF_PROBE_NUMBER
        self._configured = settings.notif.is_configured
        self._country_code = settings.incident_blast.BLAST_COUNTRY_CODE
        self._timeout = settings.incident_blast.BLAST_REQUEST_TIMEOUT_SECONDS
        self._media = media or MediaUrlBuilder(settings.media.domains)

        logger.info(
            "initialized_whatsapp_gateway",
            backend="notif.my.id",
            api_url=self._api_url,
            configured=self._configured,
        )

    @property
    def channel_name(self) -> str:
        return "notif"

    @property
    def is_configured(self) -> bool:
        return self._configured

    def format_phone(self, raw_phone: str) -> str:
        return to_digits_format(raw_phone, self._country_code)

    def public_media_url(self, media_path: Optional[str]) -> Optional[str]:
        return self._media.public_url(media_path)

    def send(
        self, recipient: Recipient, message: str, media_path: Optional[str] = None
    ) -> DeliveryOutcome:
        """Send one WhatsApp message through notif.my.id.

        Success requires a 2xx response whose body signals success; transport
        errors and rejections become FAILED outcomes.
        """
        failure = self.precheck(recipient)
        if failure is not None:
            return failure

        phone_number = self.format_phone(recipient.phone)
        media_url = self._media.public_url(media_path)

        try:
            response = post_message(
                self._api_url,
                api_key=self._api_key,
                number=phone_number,
                text=message,
                media_url=media_url,
                timeout=self._timeout,
            )
            result = classify_send_response(response.status_code, response.text)
        except Exception as e:
            result = classify_requests_error(e)

        if not result.is_success:
            logger.error(
                "whatsapp_send_failed",
                channel=self.channel_name,
                employee_id=recipient.id,
                phone_number=phone_number,
                error=result.message,
                error_code=result.error_code,
            )
            return self.outcome_from_result(recipient, phone_number, result)

        logger.info(
            "whatsapp_sent",
            channel=self.channel_name,
            employee_id=recipient.id,
            phone_number=phone_number,
        )
        return self.outcome_from_result(recipient, phone_number, result)

    def test_connection(self) -> ConnectionCheck:
        """Send a synthetic message to the probe number and judge the reply.

        A reply carrying the restricted-area marker means the API key was
        accepted but the account or its WhatsApp device is not usable.
        """
        if not self._configured:
            return ConnectionCheck(
                success=False,
                message="notif.my.id is not configured: NOTIF_API_KEY is required",
                channel=self.channel_name,
            )

        try:
            response = post_message(
                self._api_url,
                api_key=self._api_key,
                number=self._probe_number,
                text=PROBE_MESSAGE,
                timeout=self._timeout,
            )
        except Exception as e:
            result = classify_requests_error(e)
            logger.error(
                "notif_connection_test_failed",
                error=result.message,
                error_code=result.error_code,
            )
            return ConnectionCheck(
                success=False,
                message=f"Error: {result.message}",
                channel=self.channel_name,
            )

        text = response.text or ""
        if is_restricted(text):
            return ConnectionCheck(
                success=False,
                message=(
                    "API key accepted but access is restricted. Verify the account "
                    "and the linked WhatsApp device in the notif.my.id dashboard."
                ),
                channel=self.channel_name,
            )

        if response.ok:
            return ConnectionCheck(
                success=True,
                message="Connected to notif.my.id",
                channel=self.channel_name,
            )

        diagnostic = decode_response(text).diagnostic
        return ConnectionCheck(
            success=False,
            message=diagnostic
            or f"Failed to connect to notif.my.id (HTTP {response.status_code})",
            channel=self.channel_name,
        )
