"""Incident blast orchestrator.

Fans one incident out to a list of recipients through a single WhatsApp
gateway:
- Formats the message once per blast
- Sends in fixed-size batches; sends within a batch run concurrently
- Pauses between batches to stay under gateway rate limits
- Bounds every send with a per-recipient deadline
- Returns exactly one DeliveryOutcome per recipient, in input order

Usage Example:
    from infrastructure.notifications import (
        BlastOrchestrator,
        Incident,
        Recipient,
        TwilioWhatsAppGateway,
    )

    orchestrator = BlastOrchestrator.from_settings(
        TwilioWhatsAppGateway(settings), settings
    )

    outcomes = await orchestrator.send_blast(
        recipients=[Recipient(id="C-00001", name="Budi", phone="0812...")],
        incident=Incident(incident_type="Kebakaran", location="Workshop B"),
    )
    summary = BlastSummary.from_outcomes(outcomes)
"""

import asyncio
import functools
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional, TYPE_CHECKING

from infrastructure.logging import get_module_logger
from infrastructure.notifications.channels.base import WhatsAppGateway
from infrastructure.notifications.formatter import format_incident_message
from infrastructure.notifications.models import (
    BlastSummary,
    DeliveryOutcome,
    Incident,
    Recipient,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()

DEFAULT_BATCH_SIZE = 10
DEFAULT_BATCH_PAUSE_SECONDS = 2.0
DEFAULT_RECIPIENT_DEADLINE_SECONDS = 45.0


def partition(recipients: List[Recipient], size: int) -> List[List[Recipient]]:
    """Split recipients into consecutive batches of at most ``size``."""
    if size < 1:
        raise ValueError("Batch size must be at least 1")
    return [recipients[i : i + size] for i in range(0, len(recipients), size)]


class BlastOrchestrator:
    """Batched, paced fan-out of one incident message.

    Attributes:
        gateway: WhatsAppGateway used for every recipient
        batch_size: Recipients sent concurrently per batch
        batch_pause_seconds: Pause between consecutive batches (not after the last)
        recipient_deadline_seconds: Upper bound on one recipient's send
        message_options: Keyword arguments for format_incident_message
            (timezone, locale, title, footer)
    """

    def __init__(
        self,
        gateway: WhatsAppGateway,
        batch_size: int = DEFAULT_BATCH_SIZE,
        batch_pause_seconds: float = DEFAULT_BATCH_PAUSE_SECONDS,
        recipient_deadline_seconds: float = DEFAULT_RECIPIENT_DEADLINE_SECONDS,
        message_options: Optional[Dict[str, Any]] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        if batch_size < 1:
            raise ValueError("Batch size must be at least 1")

        self.gateway = gateway
        self.batch_size = batch_size
        self.batch_pause_seconds = batch_pause_seconds
        self.recipient_deadline_seconds = recipient_deadline_seconds
        self.message_options = message_options or {}
        self._sleep = sleep

    @classmethod
    def from_settings(
        cls, gateway: WhatsAppGateway, settings: "Settings", **kwargs
    ) -> "BlastOrchestrator":
        """Build an orchestrator from the incident_blast settings section."""
        blast = settings.incident_blast
        options = {
            "batch_size": blast.BLAST_BATCH_SIZE,
            "batch_pause_seconds": blast.BLAST_BATCH_PAUSE_SECONDS,
            "recipient_deadline_seconds": blast.BLAST_RECIPIENT_DEADLINE_SECONDS,
            "message_options": {
                "timezone": blast.BLAST_TIMEZONE,
                "locale": blast.BLAST_LOCALE,
                "title": blast.BLAST_MESSAGE_TITLE,
                "footer": blast.BLAST_MESSAGE_FOOTER,
            },
        }
        options.update(kwargs)
        return cls(gateway, **options)

    def format_message(self, incident: Incident, now: Optional[datetime] = None) -> str:
        return format_incident_message(incident, now, **self.message_options)

    async def send_blast(
        self, recipients: Iterable[Recipient], incident: Incident
    ) -> List[DeliveryOutcome]:
        """Send the incident to every recipient.

        Individual failures never abort the blast. A malformed incident raises
        pydantic.ValidationError before any send is attempted.

        Args:
            recipients: Employees to notify
            incident: Incident (or a mapping of its fields)

        Returns:
            One DeliveryOutcome per recipient, in input order
        """
        if not isinstance(incident, Incident):
            incident = Incident.model_validate(incident)

        recipients = list(recipients)
        message = self.format_message(incident)
        channel = self.gateway.channel_name

        logger.info(
            "blast_started",
            channel=channel,
            recipient_count=len(recipients),
            batch_size=self.batch_size,
            has_media=incident.media_path is not None,
        )

        if not self.gateway.is_configured:
            logger.error(
                "blast_gateway_not_configured",
                channel=channel,
                recipient_count=len(recipients),
            )
            outcomes = [self.gateway.configuration_failure(r) for r in recipients]
        else:
            media_url = self.gateway.public_media_url(incident.media_path)
            outcomes = await self._send_in_batches(recipients, message, media_url)

        summary = BlastSummary.from_outcomes(outcomes)
        logger.info(
            "blast_completed",
            channel=channel,
            total=summary.total,
            sent=summary.sent,
            failed=summary.failed,
        )
        return outcomes

    async def _send_in_batches(
        self,
        recipients: List[Recipient],
        message: str,
        media_url: Optional[str],
    ) -> List[DeliveryOutcome]:
        batches = partition(recipients, self.batch_size)
        outcomes: List[DeliveryOutcome] = []

        for index, batch in enumerate(batches):
            # One worker per recipient: no send in a batch waits for a free thread.
            executor = ThreadPoolExecutor(
                max_workers=len(batch), thread_name_prefix="blast-send"
            )
            try:
                batch_outcomes = await asyncio.gather(
                    *(self._send_one(executor, r, message, media_url) for r in batch)
                )
            finally:
                executor.shutdown(wait=False)
            outcomes.extend(batch_outcomes)

            logger.debug(
                "blast_batch_completed",
                batch=index + 1,
                total_batches=len(batches),
                sent=sum(1 for o in batch_outcomes if o.is_success),
                size=len(batch),
            )

            if index < len(batches) - 1:
                await self._sleep(self.batch_pause_seconds)

        return outcomes

    async def _send_one(
        self,
        executor: ThreadPoolExecutor,
        recipient: Recipient,
        message: str,
        media_url: Optional[str],
    ) -> DeliveryOutcome:
        """Run one blocking gateway send in a worker thread, bounded by the deadline."""
        loop = asyncio.get_running_loop()
        send = functools.partial(self.gateway.send, recipient, message, media_url)
        try:
            return await asyncio.wait_for(
                loop.run_in_executor(executor, send),
                timeout=self.recipient_deadline_seconds,
            )
        except asyncio.TimeoutError:
            logger.error(
                "whatsapp_send_deadline_exceeded",
                channel=self.gateway.channel_name,
                employee_id=recipient.id,
                deadline_seconds=self.recipient_deadline_seconds,
            )
            return DeliveryOutcome.failed(
                recipient,
                phone_number=self.gateway.format_phone(recipient.phone),
                channel=self.gateway.channel_name,
                error_message=(
                    f"No response within {self.recipient_deadline_seconds:g} seconds"
                ),
                error_code="DEADLINE_EXCEEDED",
            )
        except Exception as e:
            logger.error(
                "gateway_exception",
                channel=self.gateway.channel_name,
                employee_id=recipient.id,
                error=str(e),
                exc_info=True,
            )
            return DeliveryOutcome.failed(
                recipient,
                phone_number=self.gateway.format_phone(recipient.phone),
                channel=self.gateway.channel_name,
                error_message=str(e) or type(e).__name__,
                error_code="GATEWAY_EXCEPTION",
            )
