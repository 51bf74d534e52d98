"""Error classifiers for gateway exceptions.

Converts exceptions raised by the messaging gateway clients (Twilio SDK,
requests) into standardized OperationResult objects, so every channel
reports failures with the same error codes.

Key Functions:
- classify_twilio_error(): Twilio SDK errors → OperationResult
- classify_requests_error(): requests transport errors → OperationResult
- classify_http_status(): non-2xx HTTP status → OperationResult

Usage:
    from infrastructure.operations.classifiers import classify_twilio_error

    try:
        message = client.messages.create(...)
    except Exception as exc:
        return classify_twilio_error(exc)
"""

from typing import Optional

import requests
from twilio.base.exceptions import TwilioRestException

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus


def _exception_message(exc: Exception) -> str:
    message = str(exc)
    return message if message else type(exc).__name__


def classify_twilio_error(exc: Exception) -> OperationResult:
    """Classify Twilio SDK errors into OperationResult.

    The message is the error's own message, kept verbatim so operators see
    exactly what Twilio reported (e.g. "The 'To' number ... is not a valid
    phone number.").

    Status Code Mapping:
    - 401/403: Credentials refused → UNAUTHORIZED
    - 429: Rate limited → TRANSIENT_ERROR
    - 5xx: Twilio server error → TRANSIENT_ERROR
    - Other 4xx: Request rejected → PERMANENT_ERROR
    - Non-REST exceptions (connection, timeout) → TRANSIENT_ERROR

    Args:
        exc: Exception raised by the Twilio client

    Returns:
        OperationResult describing the failure
    """
    if not isinstance(exc, TwilioRestException):
        return OperationResult.transient_error(
            _exception_message(exc),
            error_code="CONNECTION_ERROR",
        )

    status_code: Optional[int] = getattr(exc, "status", None)
    message = getattr(exc, "msg", None) or _exception_message(exc)

    if status_code in (401, 403):
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            message,
            error_code="UNAUTHORIZED",
        )

    if status_code == 429:
        return OperationResult.transient_error(message, error_code="RATE_LIMITED")

    if status_code and 500 <= status_code < 600:
        return OperationResult.transient_error(message, error_code="SERVER_ERROR")

    twilio_code = getattr(exc, "code", None)
    return OperationResult.permanent_error(
        message,
        error_code=f"TWILIO_{twilio_code}" if twilio_code else "GATEWAY_REJECTED",
    )


def classify_requests_error(exc: Exception) -> OperationResult:
    """Classify requests transport errors into OperationResult.

    Args:
        exc: Exception raised while performing an HTTP call with requests

    Returns:
        OperationResult with TRANSIENT_ERROR status and a specific error code
    """
    message = _exception_message(exc)

    if isinstance(exc, requests.Timeout):
        return OperationResult.transient_error(message, error_code="TIMEOUT")

    if isinstance(exc, requests.ConnectionError):
        return OperationResult.transient_error(message, error_code="CONNECTION_ERROR")

    return OperationResult.transient_error(message, error_code="SEND_ERROR")


def classify_http_status(status_code: int, detail: str = "") -> OperationResult:
    """Classify a non-2xx HTTP status into OperationResult.

    Args:
        status_code: HTTP status code returned by the gateway
        detail: Best available diagnostic text from the response body

    Returns:
        OperationResult with error_code ``HTTP_<status>``
    """
    message = f"Gateway returned HTTP {status_code}"
    if detail:
        message = f"{message}: {detail}"

    if status_code in (401, 403):
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED, message, error_code=f"HTTP_{status_code}"
        )

    if status_code == 429 or 500 <= status_code < 600:
        return OperationResult.transient_error(message, error_code=f"HTTP_{status_code}")

    return OperationResult.permanent_error(message, error_code=f"HTTP_{status_code}")
