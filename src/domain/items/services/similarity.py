"""
Similarity Functions

Sub-score algorithms used by the Matcher. Each function is pure and returns
a value in [0, 1].

Algorithms:
    - description_similarity: long-token overlap of two descriptions
    - location_similarity: exact match, else token overlap of two locations
    - date_proximity: four-step bucket on the day distance of two dates

Token Overlap Rules (both text functions):
    - Case-fold both strings, split on runs of whitespace
    - A token of `a` counts once if an equal token exists in `b`
    - The same token of `b` may satisfy several tokens of `a`
      ("wallet wallet" vs "wallet" counts two matches)
    - Divide by the token count of the LONGER text (all tokens, short ones included)
"""

from datetime import date

from src.domain.items.matching_config import (
    DATE_BUCKETS,
    DATE_SCORE_FALLBACK,
    DESCRIPTION_MIN_TOKEN_LENGTH,
    LOCATION_MIN_TOKEN_LENGTH,
)


def tokenize(text: str) -> list[str]:
    """
    Case-fold text and split it on runs of whitespace.

    Examples:
        >>> tokenize("  Black Leather\\tWallet ")
        ['black', 'leather', 'wallet']
        >>> tokenize("")
        []
    """
    return text.casefold().split()


def _token_overlap(a: str, b: str, min_token_length: int) -> float:
    tokens_a = tokenize(a)
    tokens_b = tokenize(b)

    total_tokens = max(len(tokens_a), len(tokens_b))
    if total_tokens == 0:
        return 0.0

    eligible_b = {token for token in tokens_b if len(token) > min_token_length}

    # Membership, not multiset intersection: a token of `b` is never consumed
    matches = sum(
        1
        for token in tokens_a
        if len(token) > min_token_length and token in eligible_b
    )

    return matches / total_tokens


def description_similarity(
    a: str,
    b: str,
    min_token_length: int = DESCRIPTION_MIN_TOKEN_LENGTH,
) -> float:
    """
    Share of long tokens of `a` that also appear in `b`.

    Only tokens longer than min_token_length (3) are compared, but the
    denominator is max(token_count(a), token_count(b)) over all tokens.

    Args:
        a: First description (typically the lost record's)
        b: Second description (typically the found record's)
        min_token_length: Tokens must be longer than this to be compared

    Returns:
        matches / max(len(tokens_a), len(tokens_b)), or 0.0 if both are empty

    Examples:
        >>> description_similarity(
        ...     "black leather wallet with cards",
        ...     "found a leather wallet near park",
        ... )
        0.3333333333333333
        >>> description_similarity("", "")
        0.0
    """
    return _token_overlap(a, b, min_token_length)


def location_similarity(
    a: str,
    b: str,
    min_token_length: int = LOCATION_MIN_TOKEN_LENGTH,
) -> float:
    """
    1.0 for case-insensitive equality, otherwise token overlap.

    Tokens of `a` longer than min_token_length (2) are compared against
    all tokens of `b`.

    Note:
        Equality is checked first, so two empty strings score 1.0. The 0.0
        empty case is only reachable for differing whitespace-only strings.

    Examples:
        >>> location_similarity("MAIN STREET PARK", "main street park")
        1.0
        >>> location_similarity("Central Park", "Park Avenue")
        0.5
    """
    folded_a = a.casefold()
    folded_b = b.casefold()

    if folded_a == folded_b:
        return 1.0

    return _token_overlap(folded_a, folded_b, min_token_length)


def date_proximity(
    d1: date,
    d2: date,
    buckets: tuple[tuple[int, float], ...] = DATE_BUCKETS,
    fallback: float = DATE_SCORE_FALLBACK,
) -> float:
    """
    Map the absolute day distance of two dates onto a step function.

    Default buckets (inclusive upper bounds):
        <= 7 days  -> 1.0
        <= 30 days -> 0.7
        <= 90 days -> 0.4
        otherwise  -> 0.1

    Examples:
        >>> date_proximity(date(2024, 5, 1), date(2024, 5, 8))
        1.0
        >>> date_proximity(date(2024, 5, 1), date(2024, 5, 9))
        0.7
    """
    days_apart = abs((d1 - d2).days)

    for max_days, score in buckets:
        if days_apart <= max_days:
            return score

    return fallback
