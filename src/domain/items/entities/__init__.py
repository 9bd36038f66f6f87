"""
Item Domain Entities.

This module exports the record entities consumed by the Matcher.

Available Entities:
    - LostRecord: Item reported as lost
    - FoundRecord: Item reported as found
    - ItemStatus: Lifecycle status shared by both kinds
    - ItemKind: Which pool a record belongs to
    - ItemRecordView: Read-only capability set the Matcher scores against
"""

from src.domain.items.entities.item_record import (
    FoundRecord,
    ItemKind,
    ItemRecordView,
    ItemStatus,
    LostRecord,
)

__all__ = [
    "LostRecord",
    "FoundRecord",
    "ItemStatus",
    "ItemKind",
    "ItemRecordView",
]
