"""Naming convention detection from existing weld numbers."""

from __future__ import annotations

import logging
import re
from collections import Counter
from collections.abc import Iterable

from weld_numbering.convention import NamingConvention, default_convention

logger = logging.getLogger(__name__)

# Lazy prefix so the trailing digit run is as long as possible.
_TRAILING_DIGITS = re.compile(r"(.*?)([0-9]+)", re.DOTALL)


def detect_single(identifier: str) -> NamingConvention | None:
    """
    Detect the naming convention of one weld number.

    The numeric portion is the trailing run of ASCII digits; everything before
    it is the prefix, including any digits embedded earlier ("P-101-W-5" has
    prefix "P-101-W-"). A digit run starting with '0' fixes the padding width
    to its length; otherwise the number is unpadded.

    Args:
        identifier: Weld number, e.g. "FW-01"

    Returns:
        Detected convention, or None when the identifier has no trailing digits
    """
    match = _TRAILING_DIGITS.fullmatch(identifier)
    if not match:
        return None

    prefix, digits = match.groups()
    padding_width = len(digits) if digits.startswith("0") else 0

    return NamingConvention(
        prefix=prefix,
        padding_width=padding_width,
        has_prefix=len(prefix) > 0,
    )


def detect_dominant(
    identifiers: Iterable[str],
    fallback: NamingConvention | None = None,
) -> NamingConvention:
    """
    Pick the convention used by most of the given weld numbers.

    Ties go to the convention that appeared first in the input.

    Args:
        identifiers: Existing weld numbers, in any order
        fallback: Convention returned when nothing is detectable
            (defaults to W-###)

    Returns:
        Majority NamingConvention
    """
    if fallback is None:
        fallback = default_convention()

    tally: Counter[NamingConvention] = Counter()
    skipped = 0
    for identifier in identifiers:
        convention = detect_single(identifier)
        if convention is None:
            skipped += 1
            continue
        tally[convention] += 1

    if skipped:
        logger.debug(f"Ignored {skipped} weld number(s) without a trailing number")

    if not tally:
        logger.info(f"No weld number convention detected, using {fallback.template}")
        return fallback

    # most_common() keeps insertion order among equal counts
    dominant, count = tally.most_common(1)[0]
    logger.debug(
        f"Detected convention {dominant.template} "
        f"({count} of {sum(tally.values())} weld numbers)"
    )
    return dominant


class PatternDetector:
    """Auto-detect weld number conventions from sample data."""

    def __init__(self, fallback: NamingConvention | None = None):
        """Initialize detector.

        Args:
            fallback: Convention used when nothing is detectable
        """
        self.fallback = fallback if fallback is not None else default_convention()

    def detect_single(self, identifier: str) -> NamingConvention | None:
        """Detect the convention of one weld number."""
        return detect_single(identifier)

    def detect_dominant(self, identifiers: Iterable[str]) -> NamingConvention:
        """Detect the majority convention of sample weld numbers."""
        return detect_dominant(identifiers, fallback=self.fallback)
