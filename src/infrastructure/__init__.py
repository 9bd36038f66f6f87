"""
Infrastructure Layer - External Dependencies

Implements technical capabilities that support the Domain Layer.

Architecture:
    - Implements Domain repository interfaces (Dependency Inversion)
    - No Domain business logic (only technical implementations)

Modules:
    - persistence: Record store implementations

Exports:
    From persistence:
        - InMemoryRecordStore: Dict-backed record pool (implements Protocol)
        - load_record_stores: Build lost/found stores from a JSON file

Usage:
    >>> from src.infrastructure import InMemoryRecordStore, load_record_stores
    >>> lost_store, found_store = load_record_stores("records.json")
"""

# Persistence
from .persistence import InMemoryRecordStore, load_record_stores

__all__ = [
    # Persistence
    "InMemoryRecordStore",
    "load_record_stores",
]
