"""Operation status enumeration.

Status codes for operation results, used to classify the outcome of a
gateway call before it is turned into a delivery outcome.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Network, timeout or rate-limit failure
        PERMANENT_ERROR: Gateway rejected the request
        UNAUTHORIZED: Credentials refused by the gateway
        CONFIGURATION_ERROR: Required setting missing; no request was made
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    CONFIGURATION_ERROR = "configuration_error"
