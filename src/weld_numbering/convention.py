"""Naming convention value type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from weld_numbering.exceptions import InvalidConventionError

if TYPE_CHECKING:
    from weld_numbering.config import NumberingConfig


@dataclass(frozen=True)
class NamingConvention:
    """
    How a set of weld numbers is written: a literal prefix plus a zero-padded number.

    Examples:
        FW-01  -> NamingConvention(prefix="FW-", padding_width=2, has_prefix=True)
        W-001  -> NamingConvention(prefix="W-", padding_width=3, has_prefix=True)
        42     -> NamingConvention(prefix="", padding_width=0, has_prefix=False)

    Frozen and hashable so conventions can be tallied as dictionary keys.
    """

    prefix: str = ""
    padding_width: int = 0
    has_prefix: bool = False

    def __post_init__(self) -> None:
        if self.padding_width < 0:
            raise InvalidConventionError(self.padding_width)

    @classmethod
    def from_prefix(cls, prefix: str, padding_width: int = 0) -> NamingConvention:
        """Build a convention, deriving has_prefix from the prefix text."""
        return cls(prefix=prefix, padding_width=padding_width, has_prefix=bool(prefix))

    @property
    def template(self) -> str:
        """Human-readable form, e.g. 'FW-##' or '#' for bare numbers."""
        digits = "#" * max(self.padding_width, 1)
        return f"{self.prefix}{digits}" if self.has_prefix else digits


DEFAULT_CONVENTION = NamingConvention(prefix="W-", padding_width=3, has_prefix=True)


def default_convention(config: NumberingConfig | None = None) -> NamingConvention:
    """
    Convention used when nothing can be detected from existing weld numbers.

    Args:
        config: Optional settings overriding the built-in W-### default

    Returns:
        Fallback NamingConvention
    """
    if config is None:
        return DEFAULT_CONVENTION
    return NamingConvention.from_prefix(config.default_prefix, config.default_padding_width)
