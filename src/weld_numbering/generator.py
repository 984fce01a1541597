"""Weld number generator."""

from weld_numbering.convention import NamingConvention
from weld_numbering.exceptions import InvalidSequenceValueError


def format_weld_number(value: int, convention: NamingConvention) -> str:
    """
    Render a sequence value as a weld number.

    The number is zero-padded to at least the convention's padding width and
    never truncated.

    Args:
        value: Non-negative sequence value
        convention: Convention to render with

    Returns:
        Weld number string

    Raises:
        InvalidSequenceValueError: If value is negative

    Example:
        >>> format_weld_number(100, NamingConvention("FW-", 2, True))
        'FW-100'
    """
    if value < 0:
        raise InvalidSequenceValueError(value)

    number = str(value).zfill(convention.padding_width)
    return f"{convention.prefix}{number}" if convention.has_prefix else number


class WeldNumberGenerator:
    """Weld number generator using a specific convention."""

    def __init__(self, convention: NamingConvention):
        """Initialize generator.

        Args:
            convention: Convention to render with
        """
        self.convention = convention

    def generate(self, value: int) -> str:
        """Generate the weld number for a sequence value."""
        return format_weld_number(value, self.convention)

    def generate_batch(self, count: int, start: int = 1) -> list[str]:
        """Generate consecutive weld numbers.

        Args:
            count: Number of weld numbers to generate
            start: First sequence value

        Returns:
            List of weld numbers
        """
        return [self.generate(start + i) for i in range(count)]
