"""
Exception hierarchy for the background remover backend.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class BgRemoverException(Exception):
    """Base exception for all background remover application errors."""

    code: str = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class UnauthorizedError(BgRemoverException):
    """Raised when no authenticated user is present."""

    code = "UNAUTHORIZED"

    def __init__(
        self,
        message: str = "You must be signed in to perform this action.",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)


class InvalidInputError(BgRemoverException):
    """Raised when input validation fails."""

    code = "BAD_REQUEST"

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class JobNotFoundError(BgRemoverException):
    """
    Raised when a job does not exist within the caller's ownership scope.

    The message never reveals whether the id exists for another user.
    """

    code = "NOT_FOUND"

    def __init__(self, job_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize job not found error.

        Args:
            job_id: ID of the missing job
            details: Additional context
        """
        self.job_id = job_id
        super().__init__("Background removal job not found.", details)
