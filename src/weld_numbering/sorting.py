"""Display ordering for weld numbers."""

import re
from collections.abc import Iterable

from weld_numbering.decoder import parse
from weld_numbering.detector import detect_dominant

_DIGIT_RUNS = re.compile(r"([0-9]+)")


def natural_key(identifier: str) -> tuple[tuple[int, int | str], ...]:
    """
    Sort key comparing digit runs numerically and text case-insensitively.

    "W-9" sorts before "W-10"; "fw-2" and "FW-2" compare equal.
    """
    parts = _DIGIT_RUNS.split(identifier)
    # Tag each part so digit runs and text never compare against each other
    return tuple(
        (0, int(part)) if part.isdigit() and part.isascii() else (1, part.casefold())
        for part in parts
        if part
    )


def sort_weld_numbers(identifiers: Iterable[str], reverse: bool = False) -> list[str]:
    """
    Order weld numbers for display.

    Weld numbers following the project's dominant convention are ordered by
    sequence value, so "FW-9" comes before "FW-10" and "W-010" equals "W-10"
    in rank. Everything else follows, in natural order.

    Args:
        identifiers: Weld numbers, any order
        reverse: Descending order within each group; non-matching weld numbers
            always come last

    Returns:
        New sorted list (input is not modified)
    """
    identifiers = list(identifiers)
    convention = detect_dominant(identifiers)

    matching: list[tuple[int, str]] = []
    others: list[str] = []
    for identifier in identifiers:
        value = parse(identifier, convention)
        if value is None:
            others.append(identifier)
        else:
            matching.append((value, identifier))

    matching.sort(reverse=reverse)
    others.sort(key=lambda identifier: (natural_key(identifier), identifier), reverse=reverse)
    return [identifier for _, identifier in matching] + others
