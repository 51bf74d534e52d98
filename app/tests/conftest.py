"""Shared fixtures for incident blast tests."""

import threading
import time
from datetime import datetime, timezone
from typing import Dict, List, Optional

import pytest

from infrastructure.configuration import (
    IncidentBlastSettings,
    MediaSettings,
    NotifMyIdSettings,
    Settings,
    TwilioSettings,
)
from infrastructure.notifications.channels.base import WhatsAppGateway
from infrastructure.notifications.models import (
    ConnectionCheck,
    DeliveryOutcome,
    Incident,
    Recipient,
)
from infrastructure.notifications.phone import to_digits_format


class StubGateway(WhatsAppGateway):
    """In-process gateway with scripted per-recipient behavior.

    Args:
        name: Channel name reported in outcomes
        configured: Value of is_configured
        failures: recipient id -> error message returned as a FAILED outcome
        errors: recipient id -> exception raised from send()
        delays: recipient id -> seconds to block before answering
        events: Optional shared list; every send appends ("send", recipient id)
    """

    def __init__(
        self,
        name: str = "stub",
        configured: bool = True,
        failures: Optional[Dict[str, str]] = None,
        errors: Optional[Dict[str, Exception]] = None,
        delays: Optional[Dict[str, float]] = None,
        events: Optional[List] = None,
    ):
        self.name = name
        self.configured = configured
        self.failures = failures or {}
        self.errors = errors or {}
        self.delays = delays or {}
        self.events = events if events is not None else []
        self.calls: List[tuple] = []
        self.max_in_flight = 0
        self._in_flight = 0
        self._lock = threading.Lock()

    @property
    def channel_name(self) -> str:
        return self.name

    @property
    def is_configured(self) -> bool:
        return self.configured

    def format_phone(self, raw_phone: str) -> str:
        return to_digits_format(raw_phone)

    def send(self, recipient, message, media_path=None):
        with self._lock:
            self.calls.append((recipient.id, message, media_path))
            self.events.append(("send", recipient.id))
            self._in_flight += 1
            self.max_in_flight = max(self.max_in_flight, self._in_flight)
        try:
            if recipient.id in self.delays:
                time.sleep(self.delays[recipient.id])
            if recipient.id in self.errors:
                raise self.errors[recipient.id]
            phone = self.format_phone(recipient.phone)
            if recipient.id in self.failures:
                return DeliveryOutcome.failed(
                    recipient,
                    phone_number=phone,
                    channel=self.name,
                    error_message=self.failures[recipient.id],
                    error_code="GATEWAY_REJECTED",
                )
            return DeliveryOutcome.sent(
                recipient,
                phone_number=phone,
                channel=self.name,
                sent_at=datetime.now(timezone.utc),
                external_id=f"msg-{recipient.id}",
            )
        finally:
            with self._lock:
                self._in_flight -= 1

    def test_connection(self):
        return ConnectionCheck(
            success=self.configured,
            message="ok" if self.configured else "not configured",
            channel=self.name,
        )


@pytest.fixture
def settings_factory():
    """Factory for Settings built without reading the environment file.

    Returns:
        Factory function creating Settings with both gateways configured by
        default.

    Example:
        settings = settings_factory(twilio_configured=False)
        paced = settings_factory(BLAST_BATCH_SIZE=5, BLAST_BATCH_PAUSE_SECONDS=0)
    """

    def _factory(
        twilio_configured: bool = True,
        notif_configured: bool = True,
        public_domains: str = "",
        **blast_overrides,
    ) -> Settings:
        twilio = TwilioSettings(
            _env_file=None,
            TWILIO_ACCOUNT_SID="AC00000000000000000000000000000000" if twilio_configured else None,
            TWILIO_AUTH_TOKEN="test-auth-token" if twilio_configured else None,
            TWILIO_PHONE_NUMBER="+14155238886" if twilio_configured else None,
        )
        notif = NotifMyIdSettings(
            _env_file=None,
            NOTIF_API_KEY="test-api-key" if notif_configured else None,
            NOTIF_API_URL="https://notif.example.test/req.php",
        )
        media = MediaSettings(_env_file=None, PUBLIC_DOMAINS=public_domains)
        incident_blast = IncidentBlastSettings(_env_file=None, **blast_overrides)
        return Settings(
            _env_file=None,
            twilio=twilio,
            notif=notif,
            media=media,
            incident_blast=incident_blast,
        )

    return _factory


@pytest.fixture
def settings(settings_factory):
    return settings_factory()


@pytest.fixture
def recipient_factory():
    """Factory for creating Recipient instances.

    Example:
        recipient = recipient_factory(id="C-00002", phone="+62 812-0000-0002")
        inactive = recipient_factory(status="inactive")
    """

    def _factory(
        id: str = "C-00001",
        name: str = "Budi Santoso",
        phone: str = "081234567890",
        department: Optional[str] = "Operation",
        status: str = "active",
    ) -> Recipient:
        return Recipient(
            id=id, name=name, phone=phone, department=department, status=status
        )

    return _factory


@pytest.fixture
def recipients_factory(recipient_factory):
    """Factory for a numbered list of recipients (C-00001, C-00002, ...)."""

    def _factory(count: int, **kwargs) -> List[Recipient]:
        return [
            recipient_factory(
                id=f"C-{i:05d}",
                name=f"Karyawan {i}",
                phone=f"0812000{i:05d}",
                **kwargs,
            )
            for i in range(1, count + 1)
        ]

    return _factory


@pytest.fixture
def incident_factory():
    """Factory for creating Incident instances."""

    def _factory(
        incident_type: str = "Kebakaran",
        location: str = "Workshop B",
        description: str = "Asap terlihat dari gudang oli",
        current_status: str = "Tim ERT di lokasi",
        instructions: str = "Evakuasi ke titik kumpul 2",
        media_path: Optional[str] = None,
    ) -> Incident:
        return Incident(
            incident_type=incident_type,
            location=location,
            description=description,
            current_status=current_status,
            instructions=instructions,
            media_path=media_path,
        )

    return _factory


@pytest.fixture
def stub_gateway_factory():
    """Factory for StubGateway instances."""

    def _factory(**kwargs) -> StubGateway:
        return StubGateway(**kwargs)

    return _factory


@pytest.fixture
def recorded_sleep():
    """Async sleep replacement that records requested pauses.

    The returned coroutine function exposes ``pauses`` (list of seconds) and
    ``events`` (shared list, appended with ("pause", seconds)).
    """
    pauses: List[float] = []
    events: List = []

    async def _sleep(seconds: float) -> None:
        pauses.append(seconds)
        events.append(("pause", seconds))

    _sleep.pauses = pauses
    _sleep.events = events
    return _sleep
