"""
Repository Implementations Module

Concrete implementations of Domain repository interfaces.

Exports:
    - InMemoryRecordStore: Dict-backed RecordStoreProtocol implementation
    - load_record_stores: JSON fixture loader
"""

from .in_memory_record_store import InMemoryRecordStore, load_record_stores

__all__ = [
    "InMemoryRecordStore",
    "load_record_stores",
]
