"""
Item Repository Interfaces Module

Repository pattern interfaces (contracts) for the record pools.
Defined in Domain Layer, implemented in Infrastructure Layer.

This module exports:
    - RecordStoreProtocol: Record pool interface (one per record kind)
"""

from .record_store import RecordStoreProtocol

__all__ = [
    "RecordStoreProtocol",
]
