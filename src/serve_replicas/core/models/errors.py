"""Custom exception classes for the replica view."""

from typing import Any

from serve_replicas.core.utils.constants import (
    ERROR_CODE_INVALID_FILTER,
    ERROR_CODE_RESOURCE_NOT_FOUND,
)


class ReplicaViewError(Exception):
    """
    Base exception for all replica view errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class NotFoundError(ReplicaViewError):
    """Raised when a referenced application or deployment does not exist."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_RESOURCE_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class FilterError(ReplicaViewError):
    """Raised when a filter predicate is registered incorrectly."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_FILTER,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
