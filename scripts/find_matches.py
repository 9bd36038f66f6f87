#!/usr/bin/env python3
"""
CLI tool for finding lost/found match candidates in a JSON record file.

Loads lost and found pools from a JSON file into in-memory record stores,
prints ranked candidates for one record, and optionally confirms a match.

Usage:
    python scripts/find_matches.py --records data/records.json --lost-id 1
    python scripts/find_matches.py --records data/records.json --found-id 7 --threshold 0.6
    python scripts/find_matches.py --records data/records.json --confirm 1 7

Record file format:
    {
        "lost":  [{"id": 1, "name": "Wallet", "description": "...",
                   "date": "2024-05-01", "location": "...", "contact": "...",
                   "status": "LOST"}],
        "found": [...]
    }

    Ids may be JSON numbers or strings; command line ids are matched
    against them by their text form.

Environment:
    MATCH_THRESHOLD - default threshold when --threshold is not given (.env honoured)
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.application.services.matching_use_case import MatchingUseCase
from src.domain.items.matching_config import MatchingConfig
from src.domain.items.services.matcher import Matcher
from src.domain.shared.exceptions import DomainException
from src.infrastructure.persistence.repositories.in_memory_record_store import (
    load_record_stores,
)

# Load environment variables from .env file
load_dotenv()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find candidate matches between lost and found items",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Candidates for a lost item
  python scripts/find_matches.py --records data/records.json --lost-id 1

  # Candidates for a found item with a stricter threshold
  python scripts/find_matches.py --records data/records.json --found-id 7 --threshold 0.6

  # Confirm a match (marks both items MATCHED)
  python scripts/find_matches.py --records data/records.json --confirm 1 7
        """,
    )

    parser.add_argument(
        "--records",
        type=Path,
        required=True,
        help="Path to JSON file with 'lost' and 'found' record lists",
    )

    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument(
        "--lost-id",
        type=str,
        help="Find found-item candidates for this lost item",
    )
    target.add_argument(
        "--found-id",
        type=str,
        help="Find lost-item candidates for this found item",
    )
    target.add_argument(
        "--confirm",
        type=str,
        nargs=2,
        metavar=("LOST_ID", "FOUND_ID"),
        help="Mark a lost/found pair as MATCHED",
    )

    parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="Match threshold 0-1 (default: MATCH_THRESHOLD env or 0.5)",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


async def resolve_record_id(store, raw_id: str):
    """
    Map a command line id onto the id type used in the record file.

    JSON ids may be numbers or strings; the store is keyed by the loaded
    value, so "7" must become 7 when the file holds integer ids.
    Unknown ids are returned unchanged and fail later as not found.
    """
    for record in await store.get_all_records():
        if str(record.id) == raw_id:
            return record.id
    return raw_id


async def main(argv=None) -> int:
    """Main execution function. Returns process exit code."""
    args = parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    # Step 1: Load records
    logger.info(f"Loading records from {args.records}")
    try:
        lost_store, found_store = load_record_stores(args.records)
    except FileNotFoundError:
        logger.error(f"Record file not found: {args.records}")
        return 1
    except (ValueError, KeyError, DomainException) as e:
        logger.error(f"Failed to load records: {e}")
        return 1

    # Step 2: Build matcher
    try:
        if args.threshold is not None:
            config = MatchingConfig(match_threshold=args.threshold)
        else:
            config = MatchingConfig.from_env()
    except ValueError as e:
        logger.error(f"Invalid threshold: {e}")
        return 1

    use_case = MatchingUseCase(
        Matcher(lost_store=lost_store, found_store=found_store, config=config)
    )

    # Step 3: Run the requested operation
    try:
        if args.confirm:
            lost_id = await resolve_record_id(lost_store, args.confirm[0])
            found_id = await resolve_record_id(found_store, args.confirm[1])
            await use_case.confirm_match(lost_id, found_id)
            print(f"Lost item {lost_id} and found item {found_id} marked MATCHED")
            return 0

        if args.lost_id is not None:
            lost_id = await resolve_record_id(lost_store, args.lost_id)
            suggestions = await use_case.find_matches_for_lost_item(lost_id)
        else:
            found_id = await resolve_record_id(found_store, args.found_id)
            suggestions = await use_case.find_matches_for_found_item(found_id)
    except DomainException as e:
        logger.error(str(e))
        return 1

    # Step 4: Print results
    if not suggestions:
        print("No potential matches found")
        return 0

    print("=" * 80)
    for rank, suggestion in enumerate(suggestions, start=1):
        item = suggestion.item
        print(
            f"{rank:>3}. [{item.item_type} #{item.id}] {item.name} "
            f"({item.location}, {item.date}) score={suggestion.match_score:.3f}"
        )
        print(f"     {suggestion.explanation}")
    print("=" * 80)

    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
