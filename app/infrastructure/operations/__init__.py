"""Operation result types and status enums.

This module contains the standardized result type used by gateway
integrations, its status enum, and classifiers that turn gateway exceptions
into results.
"""

from infrastructure.operations.classifiers import (
    classify_http_status,
    classify_requests_error,
    classify_twilio_error,
)
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_http_status",
    "classify_requests_error",
    "classify_twilio_error",
]
