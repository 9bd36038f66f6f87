"""
Matching Use Case - Application Orchestration

Responsibility:
    Exposes the Matcher to a request layer in terms of record ids and DTOs.

Architecture Notes:
    - Part of Application Layer (Services/Use Cases)
    - Depends on Domain Layer (Matcher, record store interface)
    - Constructor injection, no framework

Contains:
    - MatchingUseCase: id-based candidate search and match confirmation

Does NOT contain:
    - Scoring rules (delegated to Matcher)
    - Storage (delegated to record stores)
    - Error translation: domain errors propagate unchanged
"""

import logging
from typing import Any

from src.application.models import MatchCandidateResponse
from src.domain.items.services.matcher import Matcher

# Configure logger for this module
logger = logging.getLogger(__name__)


class MatchingUseCase:
    """
    Application service wrapping the Matcher.

    Flow:
        Request layer -> MatchingUseCase -> Matcher -> record stores

    Example:
        >>> use_case = MatchingUseCase(Matcher(lost_store, found_store))
        >>> suggestions = await use_case.find_matches_for_lost_item(lost_id)
        >>> await use_case.confirm_match(lost_id, suggestions[0].item.id)
    """

    def __init__(self, matcher: Matcher):
        """
        Initialize use case with dependencies.

        Args:
            matcher: Matcher with its record stores already injected
        """
        self.matcher = matcher

    async def find_matches_for_lost_item(
        self, lost_id: Any
    ) -> list[MatchCandidateResponse]:
        """
        Suggested found items for one lost item, best first.

        Raises:
            RecordNotFoundError: If lost_id doesn't exist
            InvalidRecordError: If any record involved is malformed
        """
        candidates = await self.matcher.find_candidates_for_lost(lost_id)

        logger.info(
            f"Lost item {lost_id!r}: {len(candidates)} potential matches"
        )

        return [MatchCandidateResponse.from_candidate(c) for c in candidates]

    async def find_matches_for_found_item(
        self, found_id: Any
    ) -> list[MatchCandidateResponse]:
        """
        Suggested lost items for one found item, best first.

        Raises:
            RecordNotFoundError: If found_id doesn't exist
            InvalidRecordError: If any record involved is malformed
        """
        candidates = await self.matcher.find_candidates_for_found(found_id)

        logger.info(
            f"Found item {found_id!r}: {len(candidates)} potential matches"
        )

        return [MatchCandidateResponse.from_candidate(c) for c in candidates]

    async def confirm_match(self, lost_id: Any, found_id: Any) -> None:
        """
        Mark both items MATCHED.

        Raises:
            RecordNotFoundError, InvalidStatusTransitionError,
            StoreUnavailableError: Propagated from the record stores
        """
        await self.matcher.confirm_match(lost_id, found_id)

        logger.info(f"Match confirmed: lost={lost_id!r} found={found_id!r}")
