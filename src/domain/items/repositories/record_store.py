"""
RecordStore Interface

Repository pattern interface for the lost and found record pools.
Defines the contract the Matcher drives; the CRUD layer implements it.

Responsibility:
    - Supply candidate pools (open records)
    - Fetch a single record by id (explicit Result, no exception for absence)
    - Apply status transitions requested by the Matcher

Architecture Notes:
    - Repository Pattern (Martin Fowler)
    - Protocol-based interface (structural typing)
    - Async methods (stores perform I/O)
    - One store instance per record kind, both injected into the Matcher
"""

from typing import Any, Protocol, Sequence, TypeVar

from src.domain.items.entities.item_record import FoundRecord, ItemStatus, LostRecord
from src.domain.shared.exceptions import RecordNotFoundError
from src.domain.shared.result import Result

RecordT = TypeVar("RecordT", LostRecord, FoundRecord)


class RecordStoreProtocol(Protocol[RecordT]):
    """
    Protocol defining the contract for one record pool (lost or found).

    The store owns record lifecycle and all invariants about legal status
    transitions. The Matcher only reads records and requests MATCHED.

    Usage:
        >>> matcher = Matcher(lost_store=lost_store, found_store=found_store)
        >>> candidates = await matcher.find_candidates_for_lost(lost_id)
        >>> await matcher.confirm_match(lost_id, candidates[0].record.id)
    """

    async def get_open_records(self) -> Sequence[RecordT]:
        """
        Retrieve the candidate pool.

        Stores may filter to open (non-MATCHED, non-RECOVERED) records or return
        the whole pool; the Matcher filters by status regardless.

        Returns:
            Records in a stable iteration order (used to break score ties)

        Raises:
            StoreUnavailableError: If the backend cannot be read
        """
        ...

    async def get_record(self, record_id: Any) -> Result[RecordT, RecordNotFoundError]:
        """
        Fetch one record by id.

        Returns:
            Ok(record) if present, Err(RecordNotFoundError) if absent

        Raises:
            StoreUnavailableError: If the backend cannot be read
        """
        ...

    async def set_status(self, record_id: Any, new_status: ItemStatus) -> None:
        """
        Persist a status transition.

        Whether repeating a transition is an error or a no-op is the
        store's decision.

        Raises:
            RecordNotFoundError: If no record has record_id
            InvalidStatusTransitionError: If the transition would move backwards
            StoreUnavailableError: If the backend cannot be written
        """
        ...
