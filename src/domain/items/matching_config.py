"""
Matching Configuration

Configuration constants for the Matcher: sub-score weights, the match
threshold, date proximity buckets and tokenization rules.

Business Context:
    A lost/found pair is scored on three independent signals:
    - Description (50%) - what the item looks like
    - Location (30%) - where it was lost/found
    - Date (20%) - when it was lost/found

    The date signal is intentionally coarse (four buckets, not continuous
    decay). Many pairs share a score, so candidate ordering relies on a
    stable sort over the pool.

Design Principles:
    - Configuration as code (not database)
    - Type-safe constants
    - Immutable config objects passed to the Matcher by injection
"""

import os
from dataclasses import dataclass, field
from typing import Any, Final


# ============================================================================
# SUB-SCORE WEIGHTS
# ============================================================================

WEIGHT_DESCRIPTION: Final[float] = 0.5
WEIGHT_LOCATION: Final[float] = 0.3
WEIGHT_DATE: Final[float] = 0.2

WEIGHTS_SUM: Final[float] = WEIGHT_DESCRIPTION + WEIGHT_LOCATION + WEIGHT_DATE


# ============================================================================
# THRESHOLD
# ============================================================================

# Candidates scoring at or above this value are returned (0-1 scale)
MATCH_THRESHOLD: Final[float] = 0.5


# ============================================================================
# TOKENIZATION
# ============================================================================

# Only description tokens longer than this take part in matching
DESCRIPTION_MIN_TOKEN_LENGTH: Final[int] = 3

# Only location tokens longer than this take part in matching
LOCATION_MIN_TOKEN_LENGTH: Final[int] = 2


# ============================================================================
# DATE PROXIMITY BUCKETS
# ============================================================================

# (max days apart, inclusive) -> score; anything beyond the last bucket
# scores DATE_SCORE_FALLBACK
DATE_BUCKETS: Final[tuple[tuple[int, float], ...]] = (
    (7, 1.0),
    (30, 0.7),
    (90, 0.4),
)
DATE_SCORE_FALLBACK: Final[float] = 0.1


# ============================================================================
# HELPER DATACLASSES
# ============================================================================


@dataclass(frozen=True)
class ScoreWeights:
    """
    Weights of the three sub-scores in the composite score.

    Immutable to prevent accidental modification during matching.
    All weights must be positive and sum to 1.0 so the composite stays
    within [0, 1] and is monotonic in each sub-score.

    Usage:
        weights = ScoreWeights.default()
        score = weights.description * d + weights.location * l + weights.date * t
    """

    description: float = WEIGHT_DESCRIPTION
    location: float = WEIGHT_LOCATION
    date: float = WEIGHT_DATE

    def __post_init__(self) -> None:
        """Validate that weights are positive and sum to approximately 1.0"""
        if min(self.description, self.location, self.date) <= 0.0:
            raise ValueError(
                f"Score weights must be positive. "
                f"Weights: description={self.description}, "
                f"location={self.location}, date={self.date}"
            )

        total = self.description + self.location + self.date
        if not 0.99 <= total <= 1.01:  # Allow small floating point errors
            raise ValueError(
                f"Score weights must sum to 1.0, got {total:.4f}. "
                f"Weights: description={self.description}, "
                f"location={self.location}, date={self.date}"
            )

    @classmethod
    def default(cls) -> "ScoreWeights":
        """Get default weights from module constants"""
        return cls()

    def to_dict(self) -> dict[str, float]:
        """Convert to dictionary for serialization/logging"""
        return {
            "description": self.description,
            "location": self.location,
            "date": self.date,
        }


@dataclass(frozen=True)
class MatchingConfig:
    """
    Complete configuration for the Matcher.

    Attributes:
        weights: Sub-score weights (0.5 / 0.3 / 0.2)
        match_threshold: Minimum composite score for a candidate (0.5)
        description_min_token_length: Description tokens must be longer than this (3)
        location_min_token_length: Location tokens must be longer than this (2)
        date_buckets: (max_days, score) steps for date proximity
        date_score_fallback: Date score beyond the last bucket (0.1)

    Usage:
        config = MatchingConfig.default()
        matcher = Matcher(lost_store, found_store, config)
    """

    weights: ScoreWeights = field(default_factory=ScoreWeights.default)
    match_threshold: float = MATCH_THRESHOLD
    description_min_token_length: int = DESCRIPTION_MIN_TOKEN_LENGTH
    location_min_token_length: int = LOCATION_MIN_TOKEN_LENGTH
    date_buckets: tuple[tuple[int, float], ...] = DATE_BUCKETS
    date_score_fallback: float = DATE_SCORE_FALLBACK

    def __post_init__(self) -> None:
        """Validate threshold range and bucket ordering"""
        if not 0.0 <= self.match_threshold <= 1.0:
            raise ValueError(
                f"Match threshold must be in [0, 1], got {self.match_threshold}"
            )

        limits = [max_days for max_days, _ in self.date_buckets]
        if limits != sorted(limits):
            raise ValueError(
                f"Date buckets must be ordered by max days, got {limits}"
            )

    @classmethod
    def default(cls) -> "MatchingConfig":
        """
        Get default configuration from module constants.

        Examples:
            >>> config = MatchingConfig.default()
            >>> config.match_threshold
            0.5
            >>> config.weights.description
            0.5
        """
        return cls()

    @classmethod
    def from_env(cls) -> "MatchingConfig":
        """
        Build configuration, overriding the threshold from the environment.

        Reads MATCH_THRESHOLD (default: module constant). Call load_dotenv()
        in the entry point first if a .env file should be honoured.

        Raises:
            ValueError: If MATCH_THRESHOLD is not a number in [0, 1]
        """
        threshold = float(os.getenv("MATCH_THRESHOLD", str(MATCH_THRESHOLD)))
        return cls(match_threshold=threshold)

    @classmethod
    def for_testing(cls, **overrides: Any) -> "MatchingConfig":
        """
        Create configuration with custom overrides for testing.

        Args:
            **overrides: Keyword arguments to override default values

        Returns:
            MatchingConfig with specified overrides applied

        Raises:
            ValueError: If the resulting configuration is invalid

        Examples:
            >>> config = MatchingConfig.for_testing(match_threshold=0.8)
            >>> config.match_threshold
            0.8
        """
        defaults: dict[str, Any] = {
            "weights": ScoreWeights.default(),
            "match_threshold": MATCH_THRESHOLD,
            "description_min_token_length": DESCRIPTION_MIN_TOKEN_LENGTH,
            "location_min_token_length": LOCATION_MIN_TOKEN_LENGTH,
            "date_buckets": DATE_BUCKETS,
            "date_score_fallback": DATE_SCORE_FALLBACK,
        }

        defaults.update(overrides)

        return cls(**defaults)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for serialization/logging.

        Examples:
            >>> MatchingConfig.default().to_dict()["match_threshold"]
            0.5
        """
        return {
            "weights": self.weights.to_dict(),
            "match_threshold": self.match_threshold,
            "description_min_token_length": self.description_min_token_length,
            "location_min_token_length": self.location_min_token_length,
            "date_buckets": [list(bucket) for bucket in self.date_buckets],
            "date_score_fallback": self.date_score_fallback,
        }


# ============================================================================
# MODULE-LEVEL VALIDATION
# ============================================================================

assert 0.99 <= WEIGHTS_SUM <= 1.01, f"Weights must sum to 1.0, got {WEIGHTS_SUM}"

assert (
    0.0 <= MATCH_THRESHOLD <= 1.0
), f"Threshold must be 0-1, got {MATCH_THRESHOLD}"
