"""
Item Value Objects.

Value Objects are immutable objects that represent domain concepts by their
value, not by their identity.

Available Value Objects:
    - MatchScore: Composite score with description/location/date breakdown
    - MatchCandidate: Pool member paired with its MatchScore
"""

from src.domain.items.value_objects.match_score import MatchScore
from src.domain.items.value_objects.match_candidate import MatchCandidate

__all__ = [
    "MatchScore",
    "MatchCandidate",
]
