"""
Matcher - Domain Service

Scores lost/found pairs and returns ranked candidate lists; confirms a pair
by asking the record stores to mark both records MATCHED.

Architecture Notes:
    - Pure domain service (record stores injected, no ambient registry)
    - Stateless between calls; find_candidates performs no I/O
    - Store-facing operations are async (stores perform I/O)

Business Rules:
    - score = 0.5 * description + 0.3 * location + 0.2 * date
    - Only open pool members (not MATCHED / RECOVERED) are scored
    - Candidates need score >= 0.5 (inclusive)
    - Ties keep pool order (stable sort)
    - One malformed record fails the whole search (never skipped)

Known Gaps:
    - Duplicate tokens in one text may all count against the same token of the
      other text, so "wallet wallet" vs "wallet" scores two matches.
    - confirm_match() looks up both ids first, so an unknown id changes nothing.
      After both lookups succeed it performs two independent writes; if the
      second fails the first is not rolled back. Atomicity belongs to the
      record stores.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Sequence, Union

from src.domain.items.entities.item_record import (
    FoundRecord,
    ItemKind,
    ItemRecordView,
    ItemStatus,
    LostRecord,
    SCORED_FIELDS,
)
from src.domain.items.matching_config import MatchingConfig
from src.domain.items.repositories.record_store import RecordStoreProtocol
from src.domain.items.services.similarity import (
    date_proximity,
    description_similarity,
    location_similarity,
)
from src.domain.items.value_objects.match_candidate import MatchCandidate
from src.domain.items.value_objects.match_score import MatchScore
from src.domain.shared.exceptions import InvalidRecordError

logger = logging.getLogger(__name__)

AnyRecord = Union[LostRecord, FoundRecord]


@dataclass
class Matcher:
    """
    Domain service matching lost records against found records and back.

    Responsibilities:
        - Score a lost/found pair (description, location, date)
        - Filter a pool to open members at or above the threshold
        - Rank candidates by score, keeping pool order for ties
        - Request MATCHED for a confirmed pair

    Does NOT:
        - Validate or sanitize text (upstream collaborator's job)
        - Create, store or delete records
        - Enforce legal status transitions (record store's job)
        - Check that a confirmed pair was ever suggested

    Attributes:
        lost_store: Record store for the lost pool
        found_store: Record store for the found pool
        config: Weights, threshold and tokenization rules

    Usage Example:
        >>> matcher = Matcher(lost_store=lost_store, found_store=found_store)
        >>> candidates = matcher.find_candidates(lost, found_pool, ItemKind.LOST)
        >>> for record, score in candidates:
        ...     print(record.name, score.final_score)
        >>> await matcher.confirm_match(lost.id, candidates[0].record.id)
    """

    lost_store: RecordStoreProtocol[LostRecord]
    found_store: RecordStoreProtocol[FoundRecord]
    config: MatchingConfig = field(default_factory=MatchingConfig.default)

    def find_candidates(
        self,
        anchor: AnyRecord,
        pool: Sequence[AnyRecord],
        anchor_kind: ItemKind,
    ) -> list[MatchCandidate]:
        """
        Score every open pool member against the anchor and keep the good ones.

        Algorithm:
            1. Validate the anchor and every pool member (scored fields present,
               anchor of anchor_kind, members of the opposite kind)
            2. Skip members whose status is MATCHED or RECOVERED
            3. Score each remaining member against the anchor
            4. Keep members with final_score >= threshold
            5. Stable-sort by final_score descending

        Args:
            anchor: The record candidates are sought for (either kind)
            pool: Records of the opposite kind, in a stable order
            anchor_kind: Kind of the anchor; decides which side is "lost"
                when scoring

        Returns:
            MatchCandidate list, best first; ties in pool order.
            Empty list for an empty pool.

        Raises:
            InvalidRecordError: If the anchor or ANY pool member (open or not)
                lacks description, location or date, or has the wrong kind

        Examples:
            >>> candidates = matcher.find_candidates(lost, found_pool, ItemKind.LOST)
            >>> [round(c.final_score, 3) for c in candidates]
            [0.667]
        """
        self._require_scored_fields(anchor)
        self._require_kind(anchor, anchor_kind)
        for member in pool:
            self._require_scored_fields(member)
            self._require_kind(member, anchor_kind.opposite)

        candidates: list[MatchCandidate] = []

        for member in pool:
            if not member.status.is_open():
                continue

            if anchor_kind is ItemKind.LOST:
                match_score = self.score(anchor, member)
            else:
                match_score = self.score(member, anchor)

            if match_score.is_above_threshold():
                candidates.append(MatchCandidate(record=member, score=match_score))

        # list.sort is stable: equal scores keep pool order
        candidates.sort(key=lambda candidate: candidate.final_score, reverse=True)

        logger.debug(
            f"Scored {anchor_kind.value} anchor {getattr(anchor, 'id', None)!r} "
            f"against {len(pool)} records: {len(candidates)} candidates "
            f"(threshold={self.config.match_threshold})"
        )

        return candidates

    def score(self, lost: ItemRecordView, found: ItemRecordView) -> MatchScore:
        """
        Composite score of one lost/found pair.

        Formula:
            0.5 * description_similarity(lost, found)
            + 0.3 * location_similarity(lost, found)
            + 0.2 * date_proximity(lost, found)

        Args:
            lost: Lost side of the pair (its tokens are the ones counted)
            found: Found side of the pair

        Returns:
            MatchScore with sub-scores and final_score in [0, 1]
        """
        description_score = description_similarity(
            lost.description,
            found.description,
            min_token_length=self.config.description_min_token_length,
        )

        location_score = location_similarity(
            lost.location,
            found.location,
            min_token_length=self.config.location_min_token_length,
        )

        date_score = date_proximity(
            lost.date,
            found.date,
            buckets=self.config.date_buckets,
            fallback=self.config.date_score_fallback,
        )

        return MatchScore.create(
            description_score=description_score,
            location_score=location_score,
            date_score=date_score,
            threshold=self.config.match_threshold,
            weights=self.config.weights,
        )

    async def find_candidates_for_lost(self, lost_id: Any) -> list[MatchCandidate]:
        """
        Candidates (found records) for the lost record with lost_id.

        Raises:
            RecordNotFoundError: If no lost record has lost_id
            InvalidRecordError: If the anchor or any pool member is malformed
            StoreUnavailableError: If a store cannot be read
        """
        lost = (await self.lost_store.get_record(lost_id)).unwrap()
        pool = await self.found_store.get_open_records()

        return self.find_candidates(lost, pool, ItemKind.LOST)

    async def find_candidates_for_found(self, found_id: Any) -> list[MatchCandidate]:
        """
        Candidates (lost records) for the found record with found_id.

        Raises:
            RecordNotFoundError: If no found record has found_id
            InvalidRecordError: If the anchor or any pool member is malformed
            StoreUnavailableError: If a store cannot be read
        """
        found = (await self.found_store.get_record(found_id)).unwrap()
        pool = await self.lost_store.get_open_records()

        return self.find_candidates(found, pool, ItemKind.FOUND)

    async def confirm_match(self, lost_id: Any, found_id: Any) -> None:
        """
        Mark a lost/found pair as MATCHED.

        Resolves both ids before writing anything, then issues two transition
        requests, lost first. Not idempotency-checked: calling twice issues
        four requests and the store decides whether a repeat is an error.
        Any pair may be confirmed.

        If either id is unknown, neither record is touched.
        If the lost transition fails, the found record is not touched.
        If the found transition fails, the lost record stays MATCHED.

        Raises:
            RecordNotFoundError: If lost_id or found_id doesn't exist
            InvalidStatusTransitionError: Propagated from the store
            StoreUnavailableError: Propagated from the store
        """
        logger.info(f"Confirming match: lost={lost_id!r} found={found_id!r}")

        (await self._store_for(ItemKind.LOST).get_record(lost_id)).unwrap()
        (await self._store_for(ItemKind.FOUND).get_record(found_id)).unwrap()

        await self._store_for(ItemKind.LOST).set_status(lost_id, ItemStatus.MATCHED)
        await self._store_for(ItemKind.FOUND).set_status(found_id, ItemStatus.MATCHED)

    def _store_for(self, kind: ItemKind) -> RecordStoreProtocol:
        return self.lost_store if kind is ItemKind.LOST else self.found_store

    @staticmethod
    def _require_scored_fields(record: Any) -> None:
        for name in SCORED_FIELDS:
            if getattr(record, name, None) is None:
                raise InvalidRecordError(
                    f"{name} is required for matching",
                    field_name=name,
                    record_id=getattr(record, "id", None),
                )

    @staticmethod
    def _require_kind(record: Any, expected: ItemKind) -> None:
        # Plain ItemRecordView objects carry no kind and are trusted
        kind = getattr(record, "kind", None)
        if kind is not None and kind is not expected:
            raise InvalidRecordError(
                f"Expected a {expected.value} record, got {kind.value}",
                field_name="kind",
                record_id=getattr(record, "id", None),
            )
