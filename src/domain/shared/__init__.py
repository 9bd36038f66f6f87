"""
Shared Domain Module

Shared domain concepts used across all subdomains.
Contains domain exceptions and the Result type.

This module exports:
    - DomainException: Base exception for all domain errors
    - InvalidRecordError, RecordNotFoundError, StoreUnavailableError,
      InvalidStatusTransitionError: concrete error kinds
    - Ok, Err, Result: explicit lookup results
"""

from .exceptions import (
    DomainException,
    InvalidRecordError,
    InvalidStatusTransitionError,
    RecordNotFoundError,
    StoreUnavailableError,
)
from .result import Err, Ok, Result

__all__ = [
    "DomainException",
    "InvalidRecordError",
    "InvalidStatusTransitionError",
    "RecordNotFoundError",
    "StoreUnavailableError",
    "Ok",
    "Err",
    "Result",
]
