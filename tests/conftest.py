"""
Pytest Configuration and Shared Fixtures

This module contains pytest configuration and shared fixtures used across
all test suites (unit, e2e).

Fixtures:
    - make_lost: Factory for LostRecord with sensible defaults
    - make_found: Factory for FoundRecord with sensible defaults
    - lost_wallet / found_wallet: The canonical wallet pair (score ~0.667)
    - records_file: JSON record file on disk for loader/script tests

Architecture Notes:
    - Factories keep tests focused on the field under test
    - No external services: record stores are in-memory

Usage:
    Tests automatically have access to these fixtures by name:

    def test_something(make_lost, make_found):
        lost = make_lost(description="red umbrella")
        found = make_found(description="red umbrella")
"""

import json
import logging
from datetime import date
from pathlib import Path

import pytest

from src.domain.items.entities.item_record import FoundRecord, LostRecord

# Configure logger for tests
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# ============================================================================
# RECORD FACTORIES
# ============================================================================


@pytest.fixture
def make_lost():
    """
    Factory fixture building LostRecord instances.

    Usage:
        lost = make_lost(id=3, location="Library")
    """

    def _make(**overrides) -> LostRecord:
        fields = {
            "id": 1,
            "name": "Wallet",
            "description": "black leather wallet with cards",
            "date": date(2024, 5, 1),
            "location": "Central Park",
            "contact": "owner@example.com",
        }
        fields.update(overrides)
        return LostRecord(**fields)

    return _make


@pytest.fixture
def make_found():
    """
    Factory fixture building FoundRecord instances.

    Usage:
        found = make_found(id=9, date=date(2024, 6, 1))
    """

    def _make(**overrides) -> FoundRecord:
        fields = {
            "id": 10,
            "name": "Wallet",
            "description": "found a leather wallet near park",
            "date": date(2024, 5, 3),
            "location": "Central Park",
            "contact": "finder@example.com",
        }
        fields.update(overrides)
        return FoundRecord(**fields)

    return _make


@pytest.fixture
def lost_wallet(make_lost) -> LostRecord:
    """Lost wallet from the canonical pair."""
    return make_lost()


@pytest.fixture
def found_wallet(make_found) -> FoundRecord:
    """Found wallet from the canonical pair (description 1/3, location 1.0, date 1.0)."""
    return make_found()


# ============================================================================
# FILE FIXTURES
# ============================================================================


@pytest.fixture
def records_file(tmp_path: Path) -> Path:
    """
    JSON record file with two lost and three found records.

    Layout:
        lost 1  Wallet    (open)
        lost 2  Umbrella  (open)
        found 10 Wallet   (open, good match for lost 1)
        found 11 Keys     (open, unrelated)
        found 12 Wallet   (MATCHED, never a candidate)
    """
    data = {
        "lost": [
            {
                "id": 1,
                "name": "Wallet",
                "description": "black leather wallet with cards",
                "date": "2024-05-01",
                "location": "Central Park",
                "contact": "owner@example.com",
                "status": "LOST",
            },
            {
                "id": 2,
                "name": "Umbrella",
                "description": "red folding umbrella",
                "date": "2024-01-10",
                "location": "Library",
                "contact": "reader@example.com",
            },
        ],
        "found": [
            {
                "id": 10,
                "name": "Wallet",
                "description": "found a leather wallet near park",
                "date": "2024-05-03",
                "location": "Central Park",
                "contact": "finder@example.com",
                "status": "FOUND",
            },
            {
                "id": 11,
                "name": "Keys",
                "description": "bunch of keys on a ring",
                "date": "2023-11-20",
                "location": "Train Station",
                "contact": "staff@example.com",
            },
            {
                "id": 12,
                "name": "Wallet",
                "description": "black leather wallet with cards",
                "date": "2024-05-01",
                "location": "Central Park",
                "contact": "desk@example.com",
                "status": "MATCHED",
            },
        ],
    }

    path = tmp_path / "records.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


# ============================================================================
# PYTEST CONFIGURATION HOOKS
# ============================================================================


def pytest_configure(config):
    """
    Pytest configuration hook.

    Registers custom markers for test categorization.

    Markers:
        - e2e: End-to-end tests (loader -> use case -> store round trip)
        - unit: Unit tests (no I/O beyond tmp_path)

    Usage:
        # Run only E2E tests:
        # pytest -m e2e
    """
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests (full matching workflow)"
    )
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
