"""Operation result dataclass.

Result type for engine operations that report failures instead of raising:
translation lookups and language switches.
"""

from dataclasses import dataclass
from typing import Any, Optional

from infrastructure.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Outcome of a lookup or language switch.

    Attributes:
        status: High-level outcome.
        message: Human-friendly message (also what the UI shows on failure).
        data: Payload on success, e.g. the resolved node or the new language code.
        error_code: Machine code on failure, e.g. "key_not_found" or
            "unsupported_language".
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Create a failed result with an explicit status.

        Args:
            status: Failure status.
            message: Human-friendly error message.
            error_code: Optional machine error code.
            data: Optional payload describing the failure.

        Returns:
            OperationResult with the given status.
        """
        return cls(status=status, message=message, error_code=error_code, data=data)

    @classmethod
    def permanent_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Failure that repeating the call will not fix (unsupported language,
        language without translations)."""
        return cls.error(OperationStatus.PERMANENT_ERROR, message, error_code)

    @classmethod
    def not_found(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Missing category or key."""
        return cls.error(OperationStatus.NOT_FOUND, message, error_code)
