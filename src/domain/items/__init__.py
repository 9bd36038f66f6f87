"""
Items Subdomain Module

Core business logic for matching lost items against found items.
Contains entities, value objects, the Matcher service and the record store
interface.

Exports:
    Entities:
        - LostRecord, FoundRecord: Reported items
        - ItemStatus, ItemKind: Lifecycle status and pool kind

    Value Objects:
        - MatchScore: Composite score with sub-score breakdown
        - MatchCandidate: Pool member paired with its score

    Services:
        - Matcher: Candidate search and match confirmation

    Repository Interfaces:
        - RecordStoreProtocol: Record pool contract

Usage:
    >>> from src.domain.items import Matcher, LostRecord, ItemKind
    >>> from src.domain.items.matching_config import MatchingConfig
"""

# Entities
from .entities import FoundRecord, ItemKind, ItemRecordView, ItemStatus, LostRecord

# Value Objects
from .value_objects import MatchCandidate, MatchScore

# Services
from .services import Matcher

# Repository Interfaces
from .repositories import RecordStoreProtocol

from . import matching_config

__all__ = [
    # Entities
    "LostRecord",
    "FoundRecord",
    "ItemStatus",
    "ItemKind",
    "ItemRecordView",
    # Value Objects
    "MatchScore",
    "MatchCandidate",
    # Services
    "Matcher",
    # Repository Interfaces
    "RecordStoreProtocol",
    "matching_config",
]
