"""Weld number extraction from field-weld component records."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

logger = logging.getLogger(__name__)

WELD_NUMBER_KEY = "weld_number"


def weld_numbers_from_components(
    components: Iterable[Mapping[str, Any] | None],
    identity_field: str = "identity_key",
) -> list[str]:
    """
    Collect weld numbers from component records.

    Field-weld components store their weld number under
    ``identity_key["weld_number"]``. Records without an identity key, with a
    non-mapping identity key or with a non-string weld number are skipped.

    Args:
        components: Component rows as returned by the store
        identity_field: Name of the identity key column

    Returns:
        Weld numbers in input order

    Example:
        >>> weld_numbers_from_components([{"identity_key": {"weld_number": "W-051"}}])
        ['W-051']
    """
    weld_numbers = []
    skipped = 0
    for component in components:
        identity_key = component.get(identity_field) if component else None
        weld_number = (
            identity_key.get(WELD_NUMBER_KEY) if isinstance(identity_key, Mapping) else None
        )
        if isinstance(weld_number, str):
            weld_numbers.append(weld_number)
        else:
            skipped += 1

    if skipped:
        logger.debug(f"Skipped {skipped} component(s) without a weld number")
    return weld_numbers
