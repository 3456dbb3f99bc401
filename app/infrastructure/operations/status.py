"""Operation status enumeration.

Status codes for operation results, used to classify outcomes of operations
across the application.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        PERMANENT_ERROR: Non-retryable error (validation, unsupported input)
        NOT_FOUND: Resource not found
    """

    SUCCESS = "success"
    PERMANENT_ERROR = "permanent_error"
    NOT_FOUND = "not_found"
