"""
Result Type

Explicit success/failure return value for lookups that may legitimately
find nothing (e.g. fetching a record by id).

Callers must decide what absence means for them:
    - unwrap() turns a failure back into its exception
    - is_ok() / is_err() allow branching without try/except

Architecture Notes:
    - Part of Shared Domain (used across all subdomains)
    - Immutable (frozen dataclasses)
    - Generic over the success value and the error type
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """
    Successful result carrying a value.

    Examples:
        >>> result = Ok(42)
        >>> result.is_ok()
        True
        >>> result.unwrap()
        42
    """

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the carried value."""
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """
    Failed result carrying the error that explains the failure.

    Examples:
        >>> result = Err(RecordNotFoundError("Lost item not found", record_id=1))
        >>> result.is_err()
        True
        >>> result.unwrap()  # raises RecordNotFoundError
    """

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        """Raise the carried error."""
        raise self.error


Result = Union[Ok[T], Err[E]]
