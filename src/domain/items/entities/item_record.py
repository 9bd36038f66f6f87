"""
Item Record Entities.

Domain entities representing a reported lost item and a reported found item.
Both kinds have identity (id) and a forward-only status lifecycle:

    LOST | FOUND -> MATCHED -> RECOVERED

Records are immutable snapshots. A status change produces a new snapshot
(with_status()), which record stores persist; the Matcher only ever reads them.
"""

from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import Any, ClassVar, Optional, Protocol

from src.domain.shared.exceptions import InvalidRecordError


class ItemStatus(str, Enum):
    """
    Lifecycle states shared by lost and found records.

    States:
        LOST: Item has been reported as lost (initial state of a LostRecord)
        FOUND: Item has been reported as found (initial state of a FoundRecord)
        MATCHED: A lost/found pair has been confirmed as linked
        RECOVERED: Item has been returned to its owner (terminal)
    """

    LOST = "LOST"
    FOUND = "FOUND"
    MATCHED = "MATCHED"
    RECOVERED = "RECOVERED"

    @property
    def rank(self) -> int:
        """Position along the lifecycle (LOST and FOUND share the first step)."""
        return _STATUS_RANK[self]

    def is_open(self) -> bool:
        """A record is open (eligible as a candidate) until it is MATCHED or RECOVERED."""
        return self not in (ItemStatus.MATCHED, ItemStatus.RECOVERED)

    def can_transition_to(self, new_status: "ItemStatus") -> bool:
        """
        Check whether moving to new_status goes forward along the lifecycle.

        Record stores use this to enforce the state machine. Staying in the
        same status is not a transition and returns False.

        Examples:
            >>> ItemStatus.LOST.can_transition_to(ItemStatus.MATCHED)
            True
            >>> ItemStatus.MATCHED.can_transition_to(ItemStatus.LOST)
            False
            >>> ItemStatus.LOST.can_transition_to(ItemStatus.FOUND)
            False
        """
        return new_status.rank > self.rank


_STATUS_RANK: dict[ItemStatus, int] = {
    ItemStatus.LOST: 0,
    ItemStatus.FOUND: 0,
    ItemStatus.MATCHED: 1,
    ItemStatus.RECOVERED: 2,
}


class ItemKind(str, Enum):
    """Which pool a record belongs to."""

    LOST = "LOST"
    FOUND = "FOUND"

    @property
    def opposite(self) -> "ItemKind":
        return ItemKind.FOUND if self is ItemKind.LOST else ItemKind.LOST

    @property
    def initial_status(self) -> ItemStatus:
        return ItemStatus.LOST if self is ItemKind.LOST else ItemStatus.FOUND


class ItemRecordView(Protocol):
    """
    Read-only view the Matcher needs from any record kind.

    The Matcher is written against this capability set only, so lost and
    found records are scored uniformly without sharing anything else.
    """

    @property
    def description(self) -> Optional[str]: ...

    @property
    def location(self) -> Optional[str]: ...

    @property
    def date(self) -> Optional[date]: ...

    @property
    def status(self) -> ItemStatus: ...


# Fields the Matcher reads from every record (must not be None)
SCORED_FIELDS: tuple[str, ...] = ("description", "location", "date")


@dataclass(frozen=True)
class _ItemRecord:
    """
    Fields and behaviour common to both record kinds.

    Attributes:
        id: Record identifier assigned by the record store
        name: Short item name ("Wallet", "Keys")
        description: Free-text description (scored)
        date: Date the item was lost or found (scored)
        location: Free-text location (scored)
        contact: Contact details of the reporter
        status: Current lifecycle status
        owner_id: Reference to the reporting user
        image_path: Stored image path, if any (never read by the Matcher)
    """

    id: Any
    name: str
    description: Optional[str]
    date: Optional[date]
    location: Optional[str]
    contact: str
    status: ItemStatus
    owner_id: Any = None
    image_path: Optional[str] = None

    KIND: ClassVar[ItemKind]
    ALLOWED_STATUSES: ClassVar[frozenset[ItemStatus]]

    def __post_init__(self) -> None:
        if not isinstance(self.status, ItemStatus):
            try:
                object.__setattr__(self, "status", ItemStatus(self.status))
            except ValueError:
                raise InvalidRecordError(
                    f"Unknown status {self.status!r}",
                    field_name="status",
                    record_id=self.id,
                )

        if self.status not in self.ALLOWED_STATUSES:
            raise InvalidRecordError(
                f"{type(self).__name__} cannot have status {self.status.value}",
                field_name="status",
                record_id=self.id,
            )

    @property
    def kind(self) -> ItemKind:
        return self.KIND

    def missing_fields(self) -> list[str]:
        """Names of scored fields that are None."""
        return [name for name in SCORED_FIELDS if getattr(self, name) is None]

    def with_status(self, new_status: ItemStatus) -> "_ItemRecord":
        """Return a copy of this record holding new_status."""
        return replace(self, status=new_status)

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize record to a JSON-friendly dictionary.

        Examples:
            >>> record.to_dict()["status"]
            'LOST'
        """
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "date": self.date.isoformat() if self.date else None,
            "location": self.location,
            "contact": self.contact,
            "status": self.status.value,
            "owner_id": self.owner_id,
            "image_path": self.image_path,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "_ItemRecord":
        """
        Deserialize record from dictionary (to_dict() output or a JSON fixture).

        Missing optional keys fall back to defaults; status defaults to the
        kind's initial status. A missing date stays None so the Matcher can
        reject the record.

        Raises:
            KeyError: If 'id' is missing
            InvalidRecordError: If status is unknown or illegal for the kind
        """
        raw_date = data.get("date")
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            description=data.get("description"),
            date=date.fromisoformat(raw_date) if raw_date else None,
            location=data.get("location"),
            contact=data.get("contact", ""),
            status=data.get("status", cls.KIND.initial_status.value),
            owner_id=data.get("owner_id"),
            image_path=data.get("image_path"),
        )

    def __str__(self) -> str:
        return f"{self.name} [{self.status.value}]"


@dataclass(frozen=True)
class LostRecord(_ItemRecord):
    """
    An item reported as lost.

    Examples:
        >>> lost = LostRecord(
        ...     id=1,
        ...     name="Wallet",
        ...     description="black leather wallet with cards",
        ...     date=date(2024, 5, 1),
        ...     location="Central Park",
        ...     contact="owner@example.com",
        ...     status=ItemStatus.LOST,
        ... )
        >>> lost.kind
        <ItemKind.LOST: 'LOST'>
    """

    status: ItemStatus = ItemStatus.LOST

    KIND: ClassVar[ItemKind] = ItemKind.LOST
    ALLOWED_STATUSES: ClassVar[frozenset[ItemStatus]] = frozenset(
        {ItemStatus.LOST, ItemStatus.MATCHED, ItemStatus.RECOVERED}
    )


@dataclass(frozen=True)
class FoundRecord(_ItemRecord):
    """An item reported as found."""

    status: ItemStatus = ItemStatus.FOUND

    KIND: ClassVar[ItemKind] = ItemKind.FOUND
    ALLOWED_STATUSES: ClassVar[frozenset[ItemStatus]] = frozenset(
        {ItemStatus.FOUND, ItemStatus.MATCHED, ItemStatus.RECOVERED}
    )
