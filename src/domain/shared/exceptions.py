"""
Domain Layer Exceptions

This module defines the exception hierarchy for the Domain Layer.
All domain-specific exceptions inherit from DomainException.

Responsibility:
    - Base exception class for domain errors
    - Type-safe error handling across layers
    - Clear separation from framework exceptions (FastAPI, httpx)

Architecture Notes:
    - Part of Shared Domain (used across all subdomains)
    - API Layer maps each exception to an HTTP status code in src/api/main.py
    - Messages are user-facing: they are relayed verbatim in {"error": ...}
"""

from typing import Any


class DomainException(Exception):
    """
    Base exception for all domain layer errors.

    This exception serves as the root of the domain exception hierarchy.
    All domain-specific exceptions inherit from this class to enable
    type-safe error handling in Application and API layers.

    Usage:
        - Catch this in Application Layer to handle all domain errors
        - API Layer converts to appropriate HTTP status codes
        - The `message` attribute is what ends up in the response body

    Examples:
        >>> raise DomainException("Business rule violation")

        >>> try:
        ...     # domain operation
        ... except DomainException as e:
        ...     logger.error(f"Domain error: {e}")
    """

    def __init__(self, message: str) -> None:
        """
        Initialize domain exception with error message.

        Args:
            message: Human-readable error description
        """
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.__class__.__name__}: {self.message}"

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"{self.__class__.__name__}(message={self.message!r})"


class MissingApplicationFieldsError(DomainException):
    """
    Raised when a submission lacks one of the four required parts.

    The proxy raises this before contacting the worker, so no downstream
    call is made for an incomplete submission.

    Examples:
        >>> raise MissingApplicationFieldsError(missing_fields=["cv"])
    """

    DEFAULT_MESSAGE = "Please fill all fields and upload a CV."

    def __init__(
        self, message: str | None = None, missing_fields: list[str] | None = None
    ) -> None:
        """
        Initialize missing fields error.

        Args:
            message: Error description (defaults to the fixed user-facing text)
            missing_fields: Names of the parts that were absent or empty
        """
        self.missing_fields = list(missing_fields or [])
        super().__init__(message or self.DEFAULT_MESSAGE)


class DownstreamServiceError(DomainException):
    """
    Raised when the application worker cannot complete a submission.

    Covers both a worker that answers with a non-success status and a
    worker that cannot be reached at all (DNS failure, connection reset,
    unreadable response body).

    Examples:
        >>> raise DownstreamServiceError("disk full", status_code=507)
        >>> raise DownstreamServiceError(
        ...     DownstreamServiceError.TRANSPORT_FAILURE_MESSAGE
        ... )
    """

    UNSUCCESSFUL_RESPONSE_MESSAGE = "Something went wrong!"
    TRANSPORT_FAILURE_MESSAGE = "There was an error processing your request"

    def __init__(self, message: Any, status_code: int | None = None) -> None:
        """
        Initialize downstream error.

        Args:
            message: Error relayed to the client, unchanged from the worker
            status_code: Worker HTTP status, None when no response was received
        """
        self.status_code = status_code
        super().__init__(message)
