"""
Persistence Infrastructure Module

Record store implementations.

Exports:
    From repositories:
        - InMemoryRecordStore
        - load_record_stores
"""

from .repositories import InMemoryRecordStore, load_record_stores

__all__ = [
    "InMemoryRecordStore",
    "load_record_stores",
]
