"""Decoding of gateway response bodies.

notif.my.id answers with JSON on some paths and with plain text or HTML on
others. Bodies are decoded once into a tagged value, and classification works
on that value instead of probing dynamic attributes.

    StructuredResponse(fields={...})   # body parsed as a JSON object
    RawResponse(text="...")            # anything else
"""

import json
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from infrastructure.operations import OperationResult, classify_http_status

# The gateway spells its marker "Restrcited Area"; the corrected spelling is
# matched as well.
RESTRICTED_MARKERS = ("restrcited area", "restricted area")

MAX_DIAGNOSTIC_LENGTH = 500

# A plain-text body counts as success only when it is a single success token.
_RAW_SUCCESS = re.compile(
    r"^\s*(success(ful(ly)?)?|sent|ok|terkirim|berhasil)\s*[.!]?\s*$", re.I
)
_RAW_FAILURE = re.compile(
    r"\b(error|fail(ed|ure)?|gagal|invalid|denied|not|tidak|belum|0)\b", re.I
)
_DIAGNOSTIC_FIELDS = ("message", "msg", "error", "reason", "detail")


@dataclass(frozen=True)
class StructuredResponse:
    fields: Dict[str, Any] = field(default_factory=dict)

    @property
    def signals_success(self) -> bool:
        status = self.fields.get("status")
        if isinstance(status, str) and status.lower() == "success":
            return True
        if status is True:
            return True
        return self.fields.get("success") is True

    @property
    def diagnostic(self) -> str:
        for key in _DIAGNOSTIC_FIELDS:
            value = self.fields.get(key)
            if value:
                return str(value)[:MAX_DIAGNOSTIC_LENGTH]
        return ""


@dataclass(frozen=True)
class RawResponse:
    text: str = ""

    @property
    def signals_success(self) -> bool:
        return bool(_RAW_SUCCESS.search(self.text)) and not _RAW_FAILURE.search(
            self.text
        )

    @property
    def diagnostic(self) -> str:
        return self.text.strip()[:MAX_DIAGNOSTIC_LENGTH]


GatewayResponse = Union[StructuredResponse, RawResponse]


def decode_response(text: Optional[str]) -> GatewayResponse:
    """Decode a response body into StructuredResponse or RawResponse."""
    text = text or ""
    try:
        parsed = json.loads(text)
    except ValueError:
        return RawResponse(text=text)

    if isinstance(parsed, dict):
        return StructuredResponse(fields=parsed)

    return RawResponse(text=text)


def is_restricted(text: Optional[str]) -> bool:
    """True when the body carries the account-restricted marker."""
    lowered = (text or "").lower()
    return any(marker in lowered for marker in RESTRICTED_MARKERS)


def classify_send_response(
    status_code: int, text: Optional[str]
) -> OperationResult:
    """Classify one send response.

    Success requires both a 2xx status and a body that signals success.
    The restricted-area marker always wins over any success signal.

    Args:
        status_code: HTTP status of the response
        text: Raw response body

    Returns:
        OperationResult; SUCCESS data carries the decoded response
    """
    response = decode_response(text)

    if is_restricted(text):
        return OperationResult.permanent_error(
            "Gateway account is restricted (Restricted Area); "
            "verify the account and linked WhatsApp device",
            error_code="ACCOUNT_RESTRICTED",
        )

    if not 200 <= status_code < 300:
        return classify_http_status(status_code, response.diagnostic)

    if response.signals_success:
        return OperationResult.success(data=response, message="Message accepted")

    return OperationResult.permanent_error(
        response.diagnostic or "Gateway did not confirm the message",
        error_code="GATEWAY_REJECTED",
        data=response,
    )
