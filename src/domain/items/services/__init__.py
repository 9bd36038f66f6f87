"""
Item Domain Services Module

Business operations that don't naturally fit into entities.

This module exports:
    - Matcher: Scores and ranks lost/found candidates, confirms matches
    - description_similarity, location_similarity, date_proximity: sub-scores
"""

from .matcher import Matcher
from .similarity import (
    date_proximity,
    description_similarity,
    location_similarity,
    tokenize,
)

__all__ = [
    "Matcher",
    "date_proximity",
    "description_similarity",
    "location_similarity",
    "tokenize",
]
