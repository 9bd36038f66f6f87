"""
Domain Layer Exceptions

This module defines the exception hierarchy for the Domain Layer.
All domain-specific exceptions inherit from DomainException.

Responsibility:
    - Base exception class for domain errors
    - Type-safe error handling across layers
    - Clear separation from framework exceptions

Error Kinds:
    - InvalidRecordError: input record is missing a field the Matcher reads
    - RecordNotFoundError: record store has no record with the given id
    - StoreUnavailableError: any other record store failure
    - InvalidStatusTransitionError: backwards status change requested from a store

Propagation Rules:
    - The Matcher raises InvalidRecordError itself and never recovers from it
    - Store errors (RecordNotFoundError, StoreUnavailableError,
      InvalidStatusTransitionError) pass through the Matcher unchanged
    - Nothing is retried inside the Domain Layer
"""

from typing import Any


class DomainException(Exception):
    """
    Base exception for all domain layer errors.

    This exception serves as the root of the domain exception hierarchy.
    Catch it in the Application Layer or a script entry point to handle
    every domain error in one place.

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


class InvalidRecordError(DomainException):
    """
    Raised when an item record cannot be scored.

    This exception is raised when:
    - description, location or date is missing (None) on the anchor
    - the same is true for any member of the candidate pool
    - a record is constructed with a status its kind cannot hold
      (e.g. a LostRecord with status FOUND)

    A single malformed pool member aborts the whole candidate search.
    Malformed records are never skipped.

    Attributes:
        field_name: Name of the offending field (optional)
        record_id: Identifier of the offending record (optional)

    Examples:
        >>> raise InvalidRecordError("description is required", field_name="description")
        >>> raise InvalidRecordError(
        ...     "location is required", field_name="location", record_id=42
        ... )
    """

    def __init__(
        self,
        message: str,
        field_name: str | None = None,
        record_id: Any = None,
    ) -> None:
        """
        Initialize record validation error.

        Args:
            message: Error description
            field_name: Name of field that caused error (optional)
            record_id: Id of the record that failed validation (optional)
        """
        self.field_name = field_name
        self.record_id = record_id

        detailed_parts = [message]
        if record_id is not None:
            detailed_parts.append(f"Record: {record_id}")

        super().__init__(" | ".join(detailed_parts))


class RecordNotFoundError(DomainException):
    """
    Raised when a record store has no record with the requested id.

    Generated by record store collaborators (or by Result.unwrap() on a
    failed lookup), never by the Matcher itself.

    Attributes:
        kind: Record kind that was looked up ("LOST" or "FOUND", optional)
        record_id: Identifier that was not found

    Examples:
        >>> raise RecordNotFoundError("Lost item not found", kind="LOST", record_id=7)
    """

    def __init__(
        self,
        message: str,
        kind: str | None = None,
        record_id: Any = None,
    ) -> None:
        """
        Initialize not-found error.

        Args:
            message: Error description
            kind: Record kind that was looked up (optional)
            record_id: Identifier that was not found (optional)
        """
        self.kind = kind
        self.record_id = record_id

        detailed_parts = [message]
        if kind is not None:
            detailed_parts.append(f"Kind: {kind}")
        if record_id is not None:
            detailed_parts.append(f"Id: {record_id}")

        super().__init__(" | ".join(detailed_parts))


class StoreUnavailableError(DomainException):
    """
    Raised by a record store for any failure other than a missing record.

    The Matcher surfaces it unchanged and never retries.

    Attributes:
        original_error: Underlying exception from the storage backend (optional)

    Examples:
        >>> raise StoreUnavailableError(
        ...     "Cannot update status",
        ...     original_error=ConnectionError("connection refused"),
        ... )
    """

    def __init__(
        self,
        message: str,
        original_error: Exception | None = None,
    ) -> None:
        """
        Initialize store failure error.

        Args:
            message: Error description
            original_error: Original exception from the backend (optional)
        """
        self.original_error = original_error

        detailed_parts = [message]
        if original_error:
            detailed_parts.append(
                f"Original error: {type(original_error).__name__}: {original_error}"
            )

        super().__init__(" | ".join(detailed_parts))


class InvalidStatusTransitionError(DomainException):
    """
    Raised by a record store when a status change would move backwards.

    Legal transitions: LOST|FOUND -> MATCHED -> RECOVERED.
    RECOVERED is terminal.

    Attributes:
        current_status: Status the record currently holds
        requested_status: Status that was requested

    Examples:
        >>> raise InvalidStatusTransitionError(
        ...     "Cannot move RECOVERED item back to MATCHED",
        ...     current_status="RECOVERED",
        ...     requested_status="MATCHED",
        ... )
    """

    def __init__(
        self,
        message: str,
        current_status: str | None = None,
        requested_status: str | None = None,
    ) -> None:
        self.current_status = current_status
        self.requested_status = requested_status
        super().__init__(message)
