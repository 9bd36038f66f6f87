"""
Shared Application Models

Responsibility:
    Response DTOs handed to whatever request layer wraps the Matcher.
    Converts domain records and candidates into flat, serializable models.

Architecture Notes:
    - Part of Application Layer (Shared)
    - Pydantic models (JSON-ready via model_dump())
    - Built from Domain objects, never the other way round

Contains:
    - ItemResponse: Flat view of one lost or found record
    - MatchCandidateResponse: ItemResponse plus score details

Does NOT contain:
    - Business logic (belongs to Domain Layer)
    - HTTP models (no HTTP layer in this project)
"""

import datetime
from typing import Any, Optional, Union

from pydantic import BaseModel, Field

from src.domain.items.entities.item_record import FoundRecord, ItemStatus, LostRecord
from src.domain.items.value_objects.match_candidate import MatchCandidate


class ItemResponse(BaseModel):
    """
    Flat representation of a lost or found record.

    Attributes:
        id: Record identifier
        name: Item name
        description: Free-text description
        date: Date lost or found
        location: Free-text location
        contact: Reporter contact details
        image_path: Stored image path (optional)
        status: Current lifecycle status
        owner_id: Reporting user reference (optional)
        item_type: "LOST" or "FOUND"

    Usage:
        >>> response = ItemResponse.from_record(lost_record)
        >>> response.item_type
        'LOST'
    """

    id: Any = Field(description="Record identifier")
    name: str = Field(description="Item name")
    description: Optional[str] = Field(default=None, description="Item description")
    date: Optional[datetime.date] = Field(default=None, description="Date lost or found")
    location: Optional[str] = Field(default=None, description="Where the item was lost or found")
    contact: str = Field(default="", description="Reporter contact details")
    image_path: Optional[str] = Field(default=None, description="Stored image path")
    status: ItemStatus = Field(description="Current lifecycle status")
    owner_id: Any = Field(default=None, description="Reporting user reference")
    item_type: str = Field(description="'LOST' or 'FOUND'")

    @classmethod
    def from_record(cls, record: Union[LostRecord, FoundRecord]) -> "ItemResponse":
        """Build response from a domain record."""
        return cls(
            id=record.id,
            name=record.name,
            description=record.description,
            date=record.date,
            location=record.location,
            contact=record.contact,
            image_path=record.image_path,
            status=record.status,
            owner_id=record.owner_id,
            item_type=record.kind.value,
        )


class MatchCandidateResponse(BaseModel):
    """
    One suggested match, ready for display.

    Attributes:
        item: The suggested record (opposite kind to the anchor)
        match_score: Composite score (0-1)
        description_score: Description sub-score (0-1)
        location_score: Location sub-score (0-1)
        date_score: Date sub-score (0-1)
        explanation: Human-readable score breakdown
    """

    item: ItemResponse
    match_score: float = Field(ge=0.0, le=1.0)
    description_score: float = Field(ge=0.0, le=1.0)
    location_score: float = Field(ge=0.0, le=1.0)
    date_score: float = Field(ge=0.0, le=1.0)
    explanation: str

    @classmethod
    def from_candidate(cls, candidate: MatchCandidate) -> "MatchCandidateResponse":
        """Build response from a domain MatchCandidate."""
        score = candidate.score
        return cls(
            item=ItemResponse.from_record(candidate.record),
            match_score=score.final_score,
            description_score=score.description_score,
            location_score=score.location_score,
            date_score=score.date_score,
            explanation=score.explain(),
        )
