"""Weld number decoder."""

import logging
import re
from collections.abc import Iterable

from weld_numbering.convention import NamingConvention

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")


def parse(identifier: str, convention: NamingConvention) -> int | None:
    """
    Extract the sequence value of a weld number.

    Args:
        identifier: Weld number, e.g. "W-050"
        convention: Convention the weld number is expected to follow

    Returns:
        Sequence value (leading zeros ignored), or None when the weld number
        does not follow the convention

    Example:
        >>> parse("W-050", NamingConvention("W-", 3, True))
        50
    """
    remainder = identifier
    if convention.has_prefix:
        if not identifier.startswith(convention.prefix):
            return None
        remainder = identifier[len(convention.prefix) :]

    # int() alone would also accept signs, whitespace, underscores and non-ASCII digits
    if not _DIGITS.fullmatch(remainder):
        return None
    return int(remainder)


class WeldNumberDecoder:
    """Weld number decoder using a specific convention."""

    def __init__(self, convention: NamingConvention):
        """Initialize decoder.

        Args:
            convention: Convention to decode with
        """
        self.convention = convention

    def decode(self, identifier: str) -> int | None:
        """Decode one weld number into its sequence value."""
        return parse(identifier, self.convention)

    def decode_all(self, identifiers: Iterable[str]) -> list[int]:
        """Decode many weld numbers, skipping the ones that don't follow the convention.

        Args:
            identifiers: Weld numbers to decode

        Returns:
            Sequence values in input order
        """
        values = []
        skipped = 0
        for identifier in identifiers:
            value = parse(identifier, self.convention)
            if value is None:
                skipped += 1
            else:
                values.append(value)

        if skipped:
            logger.debug(
                f"Skipped {skipped} weld number(s) not matching {self.convention.template}"
            )
        return values
