"""
Next weld number proposal.

Composes detection, decoding, sequence analysis and generation:

    detect_dominant -> parse each weld number -> next_value -> format

The caller fetches existing weld numbers (already scoped to one project) and
persists the proposal; uniqueness is enforced by the store at write time.
"""

import logging
from collections.abc import Iterable

from weld_numbering.convention import NamingConvention
from weld_numbering.decoder import WeldNumberDecoder
from weld_numbering.detector import detect_dominant
from weld_numbering.generator import format_weld_number
from weld_numbering.sequence import next_value

logger = logging.getLogger(__name__)


def propose_next_identifier(
    existing_identifiers: Iterable[str],
    fallback: NamingConvention | None = None,
) -> str:
    """
    Propose the next weld number for a project.

    Never raises for malformed weld numbers: those are left out of the
    convention vote and of the sequence.

    Args:
        existing_identifiers: Weld numbers already in the project, any order
        fallback: Convention used when nothing is detectable (defaults to W-###)

    Returns:
        Proposed weld number in the project's dominant convention

    Example:
        >>> propose_next_identifier(["FW-01", "FW-03", "FW-05"])
        'FW-02'
        >>> propose_next_identifier([])
        'W-001'
    """
    identifiers = list(existing_identifiers)
    convention = detect_dominant(identifiers, fallback=fallback)

    if not identifiers:
        return format_weld_number(1, convention)

    numbers = WeldNumberDecoder(convention).decode_all(identifiers)
    proposal = format_weld_number(next_value(numbers), convention)
    logger.debug(f"Proposing {proposal} from {len(identifiers)} existing weld number(s)")
    return proposal


def propose_next_identifiers(
    existing_identifiers: Iterable[str],
    count: int,
    fallback: NamingConvention | None = None,
) -> list[str]:
    """
    Propose several weld numbers at once.

    Each proposal is made as if the previous ones had already been saved, so
    gaps are filled in order before numbering continues after the maximum.

    Args:
        existing_identifiers: Weld numbers already in the project
        count: Number of proposals
        fallback: Convention used when nothing is detectable

    Returns:
        Distinct proposed weld numbers, in assignment order

    Raises:
        ValueError: If count < 1
    """
    if count < 1:
        msg = "count must be at least 1"
        raise ValueError(msg)

    identifiers = list(existing_identifiers)
    proposals = []
    for _ in range(count):
        proposal = propose_next_identifier(identifiers, fallback=fallback)
        proposals.append(proposal)
        identifiers.append(proposal)
    return proposals
