"""Outcome of a non-raising AWS check.

The facade itself raises boto3 errors; checks such as the credential health
check report through ``OperationResult`` so callers can branch on ``status``
without a try/except.
"""

from typing import Optional, Any
from dataclasses import dataclass

from provider.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Status plus payload of a single check.

    Attributes:
        status: classified outcome
        message: short text for logs, e.g. "AWS API throttled"
        data: payload on success, such as the caller identity
        error_code: stable code for the failure class, e.g. "FORBIDDEN"
        retry_after: seconds to wait before asking again when throttled
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None
    retry_after: Optional[int] = None

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
        retry_after: Optional[int] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Build a failed result with an explicit status.

        Used directly for UNAUTHORIZED and NOT_FOUND, which have no shortcut.
        """
        return cls(
            status=status,
            message=message,
            error_code=error_code,
            retry_after=retry_after,
            data=data,
        )

    @classmethod
    def transient_error(
        cls,
        message: str,
        error_code: Optional[str] = None,
        retry_after: Optional[int] = None,
    ) -> "OperationResult":
        """Failure that can clear without any change on the caller's side.

        Connection errors and unknown AWS service errors land here.
        """
        return cls.error(
            OperationStatus.TRANSIENT_ERROR, message, error_code, retry_after
        )

    @classmethod
    def permanent_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Failure caused by the request itself, such as a malformed policy."""
        return cls.error(OperationStatus.PERMANENT_ERROR, message, error_code)
