"""
Sequence analysis for existing weld numbers.

Decides which sequence value a new weld should take: the first gap in the
existing numbers when there is one, otherwise one past the highest number.
"""

import logging
from collections.abc import Iterable
from itertools import pairwise

logger = logging.getLogger(__name__)


def _has_internal_gap(ordered: list[int]) -> bool:
    return any(upper - lower > 1 for lower, upper in pairwise(ordered))


def next_value(existing_numbers: Iterable[int]) -> int:
    """
    Choose the next sequence value to assign.

    Rules:
    - No existing numbers: 1.
    - Lowest number above 1: propose 1 only if the numbers also have an
      internal gap. A single contiguous run such as 98-100 means the project
      deliberately starts above 1, so numbering continues after the maximum.
    - Otherwise: the first internal gap in ascending order.
    - No gap: maximum + 1.

    Args:
        existing_numbers: Sequence values already in use, any order,
            duplicates allowed

    Returns:
        Next sequence value

    Example:
        >>> next_value([1, 3, 5])
        2
        >>> next_value([98, 99, 100])
        101
    """
    ordered = sorted(existing_numbers)
    if not ordered:
        return 1

    lowest = ordered[0]
    if lowest > 1:
        if _has_internal_gap(ordered):
            logger.debug(f"Sequence starts at {lowest} with internal gaps, backfilling 1")
            return 1
        logger.debug(f"Contiguous run starting at {lowest}, continuing after {ordered[-1]}")
    else:
        for current, following in pairwise(ordered):
            if following - current > 1:
                logger.debug(f"Filling gap after {current}")
                return current + 1

    return ordered[-1] + 1


def find_gaps(existing_numbers: Iterable[int], limit: int | None = None) -> list[int]:
    """
    List unused sequence values between the lowest and highest number.

    Args:
        existing_numbers: Sequence values already in use
        limit: Stop after this many gaps (sparse numbering can leave huge ranges)

    Returns:
        Missing values in ascending order
    """
    ordered = sorted(set(existing_numbers))
    gaps: list[int] = []
    for current, following in pairwise(ordered):
        missing = range(current + 1, following)
        if limit is not None:
            missing = missing[: limit - len(gaps)]
        gaps.extend(missing)
        if limit is not None and len(gaps) >= limit:
            break
    return gaps
