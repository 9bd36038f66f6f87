"""
MatchCandidate Value Object

A pool member retained by the Matcher, paired with its score.

Architecture Notes:
    - Value Object (immutable, defined by values)
    - Frozen dataclass: records are plain dataclasses, not pydantic models
    - Unpacks as a (record, score) pair
"""

from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar, Union

from src.domain.items.entities.item_record import FoundRecord, LostRecord
from src.domain.items.value_objects.match_score import MatchScore

RecordT = TypeVar("RecordT", LostRecord, FoundRecord)


@dataclass(frozen=True)
class MatchCandidate(Generic[RecordT]):
    """
    One entry of a candidate list.

    Attributes:
        record: The pool member (opposite kind to the anchor)
        score: Its MatchScore against the anchor

    Examples:
        >>> candidate = candidates[0]
        >>> record, score = candidate
        >>> candidate.final_score == score.final_score
        True
    """

    record: RecordT
    score: MatchScore

    @property
    def final_score(self) -> float:
        return self.score.final_score

    def __iter__(self) -> Iterator[Union[RecordT, MatchScore]]:
        yield self.record
        yield self.score
