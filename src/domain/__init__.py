"""
Domain Layer - Core Business Logic

Heart of the lost & found matching application. Contains the record
entities, value objects, the Matcher and the record store interface.
Framework-independent and highly testable.

Architecture:
    - Clean Architecture: Domain Layer is the center, no infrastructure dependencies
    - Domain-Driven Design: Entities, Value Objects, Services, Repositories
    - Dependency Inversion: Domain defines interfaces, Infrastructure implements

Subdomains:
    - items: Lost/found records and candidate matching
    - shared: Cross-subdomain concepts (exceptions, Result)

Usage:
    >>> from src.domain import Matcher, LostRecord, DomainException
    >>> from src.domain.items.services import Matcher
"""

# Items Subdomain
from .items import (
    FoundRecord,
    ItemKind,
    ItemStatus,
    LostRecord,
    MatchCandidate,
    Matcher,
    MatchScore,
    RecordStoreProtocol,
)

# Shared Domain
from .shared import (
    DomainException,
    InvalidRecordError,
    RecordNotFoundError,
    StoreUnavailableError,
)

__all__ = [
    # Items Subdomain
    "LostRecord",
    "FoundRecord",
    "ItemStatus",
    "ItemKind",
    "MatchScore",
    "MatchCandidate",
    "Matcher",
    "RecordStoreProtocol",
    # Shared Domain
    "DomainException",
    "InvalidRecordError",
    "RecordNotFoundError",
    "StoreUnavailableError",
]
