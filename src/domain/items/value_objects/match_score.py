"""
MatchScore Value Object

Represents the composite score of a lost/found pair together with the three
sub-scores it was built from (description, location, date).

Responsibility:
    - Encapsulate composite scoring (0.5 description + 0.3 location + 0.2 date)
    - Validate score ranges (0-1)
    - Provide threshold comparison
    - Immutable value object

Architecture Notes:
    - Value Object (immutable, defined by values)
    - Uses Pydantic for validation
    - Part of items subdomain
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from src.domain.items.matching_config import MATCH_THRESHOLD, ScoreWeights


class MatchScore(BaseModel):
    """
    Immutable value object representing the score of one lost/found pair.

    Attributes:
        description_score: Token overlap of the two descriptions (0-1)
        location_score: 1.0 on exact (case-insensitive) match, token overlap otherwise (0-1)
        date_score: Date proximity bucket (1.0 / 0.7 / 0.4 / 0.1)
        final_score: Weighted sum of the three sub-scores (0-1)
        threshold: Minimum final_score for a candidate (default 0.5)
        weights: Weights used to build final_score

    Examples:
        >>> score = MatchScore.create(
        ...     description_score=2 / 6,
        ...     location_score=1.0,
        ...     date_score=1.0,
        ... )
        >>> round(score.final_score, 3)
        0.667
        >>> score.is_above_threshold()
        True
    """

    description_score: float = Field(
        ..., description="Description token overlap (0-1)", ge=0.0, le=1.0
    )

    location_score: float = Field(
        ..., description="Location similarity (0-1)", ge=0.0, le=1.0
    )

    date_score: float = Field(
        ..., description="Date proximity bucket (0-1)", ge=0.0, le=1.0
    )

    final_score: float = Field(
        ...,
        description="Weighted sum: 0.5 * description + 0.3 * location + 0.2 * date",
        ge=0.0,
        le=1.0,
    )

    threshold: float = Field(
        default=MATCH_THRESHOLD,
        description="Minimum final score for a candidate",
        ge=0.0,
        le=1.0,
    )

    weights: dict[str, float] = Field(
        default_factory=lambda: ScoreWeights.default().to_dict(),
        description="Weights used to build final_score",
    )

    model_config = {
        "frozen": True,  # Immutable value object
        "json_schema_extra": {
            "examples": [
                {
                    "description_score": 0.333,
                    "location_score": 1.0,
                    "date_score": 1.0,
                    "final_score": 0.667,
                    "threshold": 0.5,
                }
            ]
        },
    }

    @model_validator(mode="after")
    def validate_final_score(self) -> "MatchScore":
        """
        Validate that final_score is correctly calculated from components.

        Raises:
            ValueError: If final_score doesn't match the weighted sum
        """
        expected_final = self.calculate_final_score()

        # Allow small floating point tolerance
        if abs(self.final_score - expected_final) > 0.001:
            raise ValueError(
                f"Invalid final_score: expected {expected_final:.4f} "
                f"from {self.weights}, got {self.final_score}"
            )

        return self

    def calculate_final_score(self) -> float:
        """Weighted sum of the sub-scores, clamped to 1.0."""
        return min(
            1.0,
            self.description_score * self.weights["description"]
            + self.location_score * self.weights["location"]
            + self.date_score * self.weights["date"],
        )

    def is_above_threshold(self) -> bool:
        """
        Check if the pair qualifies as a candidate.

        Business rule: final_score >= threshold (inclusive).
        """
        return self.final_score >= self.threshold

    @classmethod
    def create(
        cls,
        description_score: float,
        location_score: float,
        date_score: float,
        threshold: float = MATCH_THRESHOLD,
        weights: Optional[ScoreWeights] = None,
    ) -> "MatchScore":
        """
        Factory method to create MatchScore with auto-calculated final_score.

        Args:
            description_score: Description similarity (0-1)
            location_score: Location similarity (0-1)
            date_score: Date proximity (0-1)
            threshold: Minimum score for a candidate (default 0.5)
            weights: Sub-score weights (default 0.5 / 0.3 / 0.2)

        Returns:
            New MatchScore instance with calculated final_score

        Raises:
            ValidationError: If any score is outside [0, 1] range
        """
        weights = weights or ScoreWeights.default()

        final = min(
            1.0,
            description_score * weights.description
            + location_score * weights.location
            + date_score * weights.date,
        )

        return cls(
            description_score=description_score,
            location_score=location_score,
            date_score=date_score,
            final_score=final,
            threshold=threshold,
            weights=weights.to_dict(),
        )

    def explain(self) -> str:
        """
        Human-readable breakdown of the score.

        Examples:
            >>> MatchScore.create(0.5, 1.0, 0.7).explain()
            'description 50% (x0.5), location 100% (x0.3), date 70% (x0.2) [Total: 69.0%]'
        """
        return (
            f"description {self.description_score:.0%} (x{self.weights['description']}), "
            f"location {self.location_score:.0%} (x{self.weights['location']}), "
            f"date {self.date_score:.0%} (x{self.weights['date']}) "
            f"[Total: {self.final_score * 100:.1f}%]"
        )

    def to_dict(self) -> dict[str, float]:
        """Convert to dictionary representation (sub-scores, final, threshold)."""
        return {
            "description_score": self.description_score,
            "location_score": self.location_score,
            "date_score": self.date_score,
            "final_score": self.final_score,
            "threshold": self.threshold,
        }
