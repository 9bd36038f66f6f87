"""
Tests for Matcher domain service.
Covers: scoring, threshold filtering, status exclusion, ranking, fail-fast
validation, store-backed lookups and match confirmation.
"""

from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.domain.items.entities.item_record import ItemKind, ItemStatus
from src.domain.items.matching_config import MatchingConfig
from src.domain.items.services.matcher import Matcher
from src.domain.shared.exceptions import (
    InvalidRecordError,
    InvalidStatusTransitionError,
    RecordNotFoundError,
    StoreUnavailableError,
)
from src.domain.shared.result import Err, Ok


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def lost_store(lost_wallet):
    """Mock lost record store; get_record finds the lost wallet."""
    store = MagicMock()
    store.get_record = AsyncMock(return_value=Ok(lost_wallet))
    store.get_open_records = AsyncMock(return_value=[])
    store.set_status = AsyncMock(return_value=None)
    return store


@pytest.fixture
def found_store(found_wallet):
    """Mock found record store; get_record finds the found wallet."""
    store = MagicMock()
    store.get_record = AsyncMock(return_value=Ok(found_wallet))
    store.get_open_records = AsyncMock(return_value=[])
    store.set_status = AsyncMock(return_value=None)
    return store


@pytest.fixture
def matcher(lost_store, found_store):
    """Create Matcher with default config and mock stores."""
    return Matcher(lost_store=lost_store, found_store=found_store)


# ============================================================================
# TESTS - score()
# ============================================================================


def test_score_canonical_pair(matcher, lost_wallet, found_wallet):
    """Test wallet pair: description 1/3, location 1.0, date 1.0."""
    score = matcher.score(lost_wallet, found_wallet)

    assert score.description_score == pytest.approx(1 / 3)
    assert score.location_score == 1.0
    assert score.date_score == 1.0
    assert score.final_score == pytest.approx(0.6667, abs=1e-3)


def test_score_stays_in_unit_interval(matcher, make_lost, make_found):
    """Test score of identical records is at most 1.0."""
    lost = make_lost(description="silver laptop charger", location="Library")
    found = make_found(
        description="silver laptop charger", location="Library", date=lost.date
    )

    score = matcher.score(lost, found)

    assert score.final_score == pytest.approx(1.0)
    assert 0.0 <= score.final_score <= 1.0


def test_score_monotonic_in_description(matcher, make_lost, make_found):
    """Test more description overlap never lowers the score."""
    lost = make_lost(description="silver laptop charger cable")
    weaker = make_found(description="silver phone case cover")
    stronger = make_found(description="silver laptop case cover")

    assert (
        matcher.score(lost, stronger).final_score
        >= matcher.score(lost, weaker).final_score
    )


def test_score_uses_config_threshold(lost_store, found_store, lost_wallet, found_wallet):
    """Test score carries the configured threshold."""
    config = MatchingConfig.for_testing(match_threshold=0.8)
    matcher = Matcher(lost_store=lost_store, found_store=found_store, config=config)

    score = matcher.score(lost_wallet, found_wallet)

    assert score.threshold == 0.8
    assert score.is_above_threshold() is False


# ============================================================================
# TESTS - find_candidates()
# ============================================================================


def test_find_candidates_canonical_pair(matcher, lost_wallet, found_wallet):
    """Test the wallet pair is returned with score ~0.667."""
    candidates = matcher.find_candidates(lost_wallet, [found_wallet], ItemKind.LOST)

    assert len(candidates) == 1
    assert candidates[0].record is found_wallet
    assert round(candidates[0].final_score, 3) == 0.667


def test_find_candidates_empty_pool(matcher, lost_wallet):
    """Test empty pool gives empty result."""
    assert matcher.find_candidates(lost_wallet, [], ItemKind.LOST) == []


def test_find_candidates_threshold_inclusive(matcher, make_lost, make_found):
    """Test a member scoring exactly 0.5 is included, 0.44 is not."""
    lost = make_lost(description="silver laptop")
    at_threshold = make_found(id=20, description="blue scarf", date=lost.date)
    below = make_found(
        id=21, description="blue scarf", date=lost.date + timedelta(days=10)
    )

    candidates = matcher.find_candidates(lost, [at_threshold, below], ItemKind.LOST)

    assert [c.record.id for c in candidates] == [20]
    assert candidates[0].final_score == 0.5


def test_find_candidates_excludes_matched_and_recovered(matcher, make_lost, make_found):
    """Test closed members never appear, even with a perfect score."""
    lost = make_lost()
    matched = make_found(id=20, description=lost.description, status=ItemStatus.MATCHED)
    recovered = make_found(
        id=21, description=lost.description, status=ItemStatus.RECOVERED
    )
    open_member = make_found(id=22)

    candidates = matcher.find_candidates(
        lost, [matched, recovered, open_member], ItemKind.LOST
    )

    assert [c.record.id for c in candidates] == [22]


def test_find_candidates_sorted_descending(matcher, make_lost, make_found):
    """Test best candidate first."""
    lost = make_lost()
    medium = make_found(id=20, date=lost.date + timedelta(days=20))
    best = make_found(id=21, description=lost.description)
    good = make_found(id=22)

    candidates = matcher.find_candidates(lost, [medium, best, good], ItemKind.LOST)

    assert [c.record.id for c in candidates] == [21, 22, 20]
    scores = [c.final_score for c in candidates]
    assert scores == sorted(scores, reverse=True)


def test_find_candidates_ties_keep_pool_order(matcher, make_lost, make_found):
    """Test equal scores keep pool order."""
    lost = make_lost()
    pool = [make_found(id=found_id) for found_id in (30, 10, 20)]

    candidates = matcher.find_candidates(lost, pool, ItemKind.LOST)

    assert [c.record.id for c in candidates] == [30, 10, 20]


def test_find_candidates_found_anchor(matcher, lost_wallet, found_wallet):
    """Test FOUND anchor scores with the lost record's description first."""
    candidates = matcher.find_candidates(found_wallet, [lost_wallet], ItemKind.FOUND)

    assert len(candidates) == 1
    assert candidates[0].record is lost_wallet
    assert candidates[0].score == matcher.score(lost_wallet, found_wallet)


def test_find_candidates_duplicate_tokens_counted(matcher, make_lost, make_found):
    """Test repeated lost tokens each match the same found token."""
    lost = make_lost(description="wallet wallet")
    found = make_found(description="wallet", location="Library", date=lost.date)

    candidates = matcher.find_candidates(lost, [found], ItemKind.LOST)

    assert candidates[0].score.description_score == 1.0


@pytest.mark.parametrize("missing", ["description", "location", "date"])
def test_find_candidates_invalid_anchor(matcher, make_lost, found_wallet, missing):
    """Test anchor missing a scored field raises InvalidRecordError."""
    lost = make_lost(**{missing: None})

    with pytest.raises(InvalidRecordError) as exc_info:
        matcher.find_candidates(lost, [found_wallet], ItemKind.LOST)

    assert exc_info.value.field_name == missing


def test_find_candidates_one_invalid_member_fails_whole_search(
    matcher, lost_wallet, make_found
):
    """Test a malformed member aborts the search instead of being skipped."""
    pool = [make_found(id=20), make_found(id=21, location=None), make_found(id=22)]

    with pytest.raises(InvalidRecordError) as exc_info:
        matcher.find_candidates(lost_wallet, pool, ItemKind.LOST)

    assert exc_info.value.record_id == 21
    assert exc_info.value.field_name == "location"


def test_find_candidates_invalid_closed_member_still_fails(
    matcher, lost_wallet, make_found
):
    """Test validation covers closed members too."""
    pool = [make_found(id=20, date=None, status=ItemStatus.MATCHED)]

    with pytest.raises(InvalidRecordError):
        matcher.find_candidates(lost_wallet, pool, ItemKind.LOST)


def test_find_candidates_anchor_kind_mismatch(matcher, lost_wallet, make_lost):
    """Test a lost anchor passed as FOUND is rejected instead of swapping roles."""
    with pytest.raises(InvalidRecordError) as exc_info:
        matcher.find_candidates(lost_wallet, [make_lost(id=2)], ItemKind.FOUND)

    assert exc_info.value.field_name == "kind"
    assert exc_info.value.record_id == lost_wallet.id


def test_find_candidates_pool_member_of_same_kind(matcher, lost_wallet, make_lost):
    """Test a lost record inside the found pool fails the whole search."""
    with pytest.raises(InvalidRecordError) as exc_info:
        matcher.find_candidates(lost_wallet, [make_lost(id=2)], ItemKind.LOST)

    assert exc_info.value.field_name == "kind"
    assert exc_info.value.record_id == 2


def test_find_candidates_does_not_touch_stores(
    matcher, lost_store, found_store, lost_wallet, found_wallet
):
    """Test pure search performs no store calls."""
    matcher.find_candidates(lost_wallet, [found_wallet], ItemKind.LOST)

    lost_store.get_record.assert_not_called()
    found_store.get_open_records.assert_not_called()
    found_store.set_status.assert_not_called()


# ============================================================================
# TESTS - store-backed lookups
# ============================================================================


@pytest.mark.asyncio
async def test_find_candidates_for_lost(matcher, lost_store, found_store, lost_wallet, found_wallet):
    """Test lookup by lost id searches the open found pool."""
    lost_store.get_record.return_value = Ok(lost_wallet)
    found_store.get_open_records.return_value = [found_wallet]

    candidates = await matcher.find_candidates_for_lost(lost_wallet.id)

    lost_store.get_record.assert_awaited_once_with(lost_wallet.id)
    found_store.get_open_records.assert_awaited_once()
    assert [c.record for c in candidates] == [found_wallet]


@pytest.mark.asyncio
async def test_find_candidates_for_found(matcher, lost_store, found_store, lost_wallet, found_wallet):
    """Test lookup by found id searches the open lost pool."""
    found_store.get_record.return_value = Ok(found_wallet)
    lost_store.get_open_records.return_value = [lost_wallet]

    candidates = await matcher.find_candidates_for_found(found_wallet.id)

    assert [c.record for c in candidates] == [lost_wallet]


@pytest.mark.asyncio
async def test_find_candidates_for_unknown_lost_id(matcher, lost_store, found_store):
    """Test unknown anchor id raises RecordNotFoundError."""
    lost_store.get_record.return_value = Err(
        RecordNotFoundError("Lost item not found", kind="LOST", record_id=99)
    )

    with pytest.raises(RecordNotFoundError):
        await matcher.find_candidates_for_lost(99)

    found_store.get_open_records.assert_not_called()


# ============================================================================
# TESTS - confirm_match()
# ============================================================================


@pytest.mark.asyncio
async def test_confirm_match_sets_both_matched(matcher, lost_store, found_store):
    """Test both records are moved to MATCHED, lost first."""
    requests = []
    lost_store.set_status.side_effect = lambda *args: requests.append(("lost", *args))
    found_store.set_status.side_effect = lambda *args: requests.append(("found", *args))

    await matcher.confirm_match(1, 10)

    assert requests == [
        ("lost", 1, ItemStatus.MATCHED),
        ("found", 10, ItemStatus.MATCHED),
    ]


@pytest.mark.asyncio
async def test_confirm_match_unknown_lost_changes_nothing(
    matcher, lost_store, found_store
):
    """Test unknown lost id raises before any status write."""
    lost_store.get_record.return_value = Err(
        RecordNotFoundError("Lost item not found", kind="LOST", record_id=99)
    )

    with pytest.raises(RecordNotFoundError):
        await matcher.confirm_match(99, 10)

    lost_store.set_status.assert_not_called()
    found_store.set_status.assert_not_called()


@pytest.mark.asyncio
async def test_confirm_match_unknown_found_leaves_lost_untouched(
    matcher, lost_store, found_store
):
    """Test unknown found id raises before the lost record is written."""
    found_store.get_record.return_value = Err(
        RecordNotFoundError("Found item not found", kind="FOUND", record_id=999)
    )

    with pytest.raises(RecordNotFoundError) as exc_info:
        await matcher.confirm_match(1, 999)

    assert exc_info.value.kind == "FOUND"
    lost_store.set_status.assert_not_called()
    found_store.set_status.assert_not_called()


@pytest.mark.asyncio
async def test_confirm_match_lost_write_failure_skips_found(
    matcher, lost_store, found_store
):
    """Test failing lost transition stops before the found transition."""
    lost_store.set_status.side_effect = StoreUnavailableError("Cannot update status")

    with pytest.raises(StoreUnavailableError):
        await matcher.confirm_match(1, 10)

    found_store.set_status.assert_not_called()


@pytest.mark.asyncio
async def test_confirm_match_found_failure_not_rolled_back(
    matcher, lost_store, found_store
):
    """Test failing found transition propagates; lost update is not undone."""
    found_store.set_status.side_effect = StoreUnavailableError("Cannot update status")

    with pytest.raises(StoreUnavailableError):
        await matcher.confirm_match(1, 10)

    lost_store.set_status.assert_awaited_once_with(1, ItemStatus.MATCHED)


@pytest.mark.asyncio
async def test_confirm_match_store_rejection_propagates(matcher, lost_store):
    """Test store's transition error surfaces unchanged."""
    error = InvalidStatusTransitionError(
        "Cannot go back", current_status="RECOVERED", requested_status="MATCHED"
    )
    lost_store.set_status.side_effect = error

    with pytest.raises(InvalidStatusTransitionError) as exc_info:
        await matcher.confirm_match(1, 10)

    assert exc_info.value is error


@pytest.mark.asyncio
async def test_confirm_match_twice_issues_four_requests(matcher, lost_store, found_store):
    """Test confirm_match has no idempotency check of its own."""
    await matcher.confirm_match(1, 10)
    await matcher.confirm_match(1, 10)

    assert lost_store.set_status.await_count == 2
    assert found_store.set_status.await_count == 2
