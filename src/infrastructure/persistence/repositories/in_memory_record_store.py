"""
In-Memory Record Store Implementation

Concrete implementation of RecordStoreProtocol from Domain Layer.
Keeps one record pool (lost or found) in a dict, in insertion order.

Responsibility:
    - Implement Domain repository interface
    - Serve open pools and single-record lookups
    - Enforce forward-only status transitions
    - Load pools from JSON fixture files

Architecture Notes:
    - Infrastructure Layer (implements Domain interface)
    - Reference collaborator for tests, scripts and local development
    - No persistence: records live for the lifetime of the instance
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Generic, Iterable, Type, TypeVar

from src.domain.items.entities.item_record import (
    FoundRecord,
    ItemKind,
    ItemStatus,
    LostRecord,
)
from src.domain.shared.exceptions import (
    InvalidStatusTransitionError,
    RecordNotFoundError,
)
from src.domain.shared.result import Err, Ok, Result

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", LostRecord, FoundRecord)

_RECORD_TYPES: dict[ItemKind, Type] = {
    ItemKind.LOST: LostRecord,
    ItemKind.FOUND: FoundRecord,
}


class InMemoryRecordStore(Generic[RecordT]):
    """
    Dict-backed implementation of RecordStoreProtocol.

    Storage Strategy:
        - Key: record id
        - Value: immutable record snapshot
        - Status change replaces the snapshot (record.with_status())

    Transition Rules:
        - Forward only: LOST|FOUND -> MATCHED -> RECOVERED
        - Requesting the current status again is a no-op
        - Backwards requests raise InvalidStatusTransitionError

    Examples:
        >>> store = InMemoryRecordStore(ItemKind.LOST, [lost_wallet, lost_keys])
        >>> result = await store.get_record(lost_wallet.id)
        >>> result.unwrap().name
        'Wallet'
        >>> await store.set_status(lost_wallet.id, ItemStatus.MATCHED)
    """

    def __init__(self, kind: ItemKind, records: Iterable[RecordT] = ()) -> None:
        """
        Initialize store for one record kind.

        Args:
            kind: Which pool this store holds
            records: Initial records (iteration order is preserved)

        Raises:
            ValueError: If a record's kind differs from the store's kind
        """
        self.kind = kind
        self._records: dict[Any, RecordT] = {}
        self._lock = asyncio.Lock()

        for record in records:
            self.add(record)

    def add(self, record: RecordT) -> None:
        """
        Insert or replace a record.

        Raises:
            ValueError: If record kind doesn't match the store kind
        """
        if record.kind is not self.kind:
            raise ValueError(
                f"Cannot add {record.kind.value} record to {self.kind.value} store"
            )
        self._records[record.id] = record

    def __len__(self) -> int:
        return len(self._records)

    async def get_open_records(self) -> list[RecordT]:
        """Records whose status is still open, in insertion order."""
        return [record for record in self._records.values() if record.status.is_open()]

    async def get_all_records(self) -> list[RecordT]:
        """All records regardless of status, in insertion order."""
        return list(self._records.values())

    async def get_record(self, record_id: Any) -> Result[RecordT, RecordNotFoundError]:
        """Ok(record) if present, Err(RecordNotFoundError) otherwise."""
        record = self._records.get(record_id)
        if record is None:
            return Err(
                RecordNotFoundError(
                    f"{self.kind.value.capitalize()} item not found",
                    kind=self.kind.value,
                    record_id=record_id,
                )
            )
        return Ok(record)

    async def set_status(self, record_id: Any, new_status: ItemStatus) -> None:
        """
        Apply a forward status transition.

        Raises:
            RecordNotFoundError: If no record has record_id
            InvalidStatusTransitionError: If new_status is behind the current one
                or not valid for this record kind
        """
        async with self._lock:
            record = (await self.get_record(record_id)).unwrap()

            if record.status is new_status:
                logger.debug(
                    f"{self.kind.value} record {record_id!r} already {new_status.value}"
                )
                return

            if (
                not record.status.can_transition_to(new_status)
                or new_status not in record.ALLOWED_STATUSES
            ):
                raise InvalidStatusTransitionError(
                    f"Cannot move {self.kind.value} record {record_id!r} "
                    f"from {record.status.value} to {new_status.value}",
                    current_status=record.status.value,
                    requested_status=new_status.value,
                )

            self._records[record_id] = record.with_status(new_status)

        logger.info(
            f"{self.kind.value} record {record_id!r}: "
            f"{record.status.value} -> {new_status.value}"
        )

    @classmethod
    def from_dicts(
        cls, kind: ItemKind, rows: Iterable[dict[str, Any]]
    ) -> "InMemoryRecordStore":
        """
        Build a store from serialized records (record.to_dict() format).

        Raises:
            KeyError: If a row has no 'id'
            InvalidRecordError: If a row's status is illegal for the kind
        """
        record_type = _RECORD_TYPES[kind]
        return cls(kind, (record_type.from_dict(row) for row in rows))


def load_record_stores(
    path: Path | str,
) -> tuple[InMemoryRecordStore[LostRecord], InMemoryRecordStore[FoundRecord]]:
    """
    Load lost and found pools from a JSON file.

    Expected format:
        {
            "lost": [{"id": 1, "name": "Wallet", "description": "...",
                      "date": "2024-05-01", "location": "...", ...}],
            "found": [...]
        }

    Args:
        path: Path to JSON file

    Returns:
        (lost_store, found_store)

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If file is not valid JSON
        InvalidRecordError: If a record has an illegal status
    """
    path = Path(path)

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    lost_store = InMemoryRecordStore.from_dicts(ItemKind.LOST, data.get("lost", []))
    found_store = InMemoryRecordStore.from_dicts(ItemKind.FOUND, data.get("found", []))

    logger.info(
        f"Loaded {len(lost_store)} lost and {len(found_store)} found records from {path}"
    )

    return lost_store, found_store
