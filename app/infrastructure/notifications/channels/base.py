"""WhatsApp gateway abstract base class.

All gateway implementations (Twilio, notif.my.id) must implement this
interface. The blast orchestrator only ever talks to it.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional

from infrastructure.notifications.models import (
    ConnectionCheck,
    DeliveryOutcome,
    Recipient,
)
from infrastructure.notifications.phone import has_dialable_digits
from infrastructure.operations import OperationResult


class WhatsAppGateway(ABC):
    """Abstract base class for WhatsApp gateways.

    Each gateway handles delivery through one external messaging API:
    - TwilioWhatsAppGateway: Twilio Messages API via the vendor SDK
    - NotifMyIdGateway: notif.my.id form-encoded HTTP API

    Gateways are interchangeable strategies selected by configuration.

    Contract:
    - send() blocks for one network call and NEVER raises; every failure
      is captured in a FAILED DeliveryOutcome.
    - An unconfigured gateway never performs network I/O.
    """

    @property
    @abstractmethod
    def channel_name(self) -> str:
        """Gateway identifier ("twilio", "notif")."""

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """True when the credentials required to send are present."""

    @abstractmethod
    def format_phone(self, raw_phone: str) -> str:
        """Normalize a raw phone number into this gateway's wire format."""

    @abstractmethod
    def send(
        self, recipient: Recipient, message: str, media_path: Optional[str] = None
    ) -> DeliveryOutcome:
        """Send one message to one recipient.

        Args:
            recipient: Employee receiving the message
            message: Formatted message text
            media_path: Optional local media path or public URL

        Returns:
            DeliveryOutcome (SENT or FAILED)
        """

    @abstractmethod
    def test_connection(self) -> ConnectionCheck:
        """Check gateway reachability and credentials.

        Diagnostic only; never called while sending a blast.
        """

    def public_media_url(self, media_path: Optional[str]) -> Optional[str]:
        """Resolve media once per blast into the URL passed to every send.

        Gateways that attach media through a public URL override this.
        """
        return media_path

    def configuration_failure(self, recipient: Recipient) -> DeliveryOutcome:
        """Outcome for a recipient when required settings are missing."""
        return self.outcome_from_result(
            recipient,
            self.format_phone(recipient.phone),
            OperationResult.configuration_error(
                f"{self.channel_name} gateway is not configured"
            ),
        )

    def precheck(self, recipient: Recipient) -> Optional[DeliveryOutcome]:
        """Return a FAILED outcome when the send cannot be attempted at all."""
        if not self.is_configured:
            return self.configuration_failure(recipient)

        if not has_dialable_digits(recipient.phone):
            return self.outcome_from_result(
                recipient,
                recipient.phone,
                OperationResult.permanent_error(
                    "Recipient has no phone number", error_code="INVALID_PHONE"
                ),
            )

        return None

    def outcome_from_result(
        self,
        recipient: Recipient,
        phone_number: str,
        result: OperationResult,
        external_id: Optional[str] = None,
    ) -> DeliveryOutcome:
        """Translate an OperationResult into the recipient's DeliveryOutcome."""
        if result.is_success:
            return DeliveryOutcome.sent(
                recipient,
                phone_number=phone_number,
                channel=self.channel_name,
                sent_at=datetime.now(timezone.utc),
                external_id=external_id,
            )

        return DeliveryOutcome.failed(
            recipient,
            phone_number=phone_number,
            channel=self.channel_name,
            error_message=result.message,
            error_code=result.error_code,
        )
