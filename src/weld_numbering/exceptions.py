"""Custom exceptions with helpful error messages."""


class WeldNumberingError(Exception):
    """Base exception for weld-numbering errors."""

    pass


class InvalidConventionError(WeldNumberingError, ValueError):
    """Naming convention fields are inconsistent or out of range."""

    def __init__(self, padding_width: int):
        super().__init__(
            f"Invalid padding width {padding_width}: must be 0 or greater.\n\n"
            f"Suggestions:\n"
            f"1. Use 0 to render numbers without zero-padding\n"
            f"2. Use detect_dominant() to infer the convention from existing weld numbers"
        )


class InvalidSequenceValueError(WeldNumberingError, ValueError):
    """Sequence value cannot be rendered as a weld number."""

    def __init__(self, value: int):
        super().__init__(
            f"Cannot format sequence value {value}: weld numbers are non-negative.\n\n"
            f"Suggestions:\n"
            f"1. Use next_value() to pick the next free sequence value\n"
            f"2. Check that the value was parsed under the same convention"
        )


class ConfigError(WeldNumberingError):
    """Configuration could not be loaded from a file or the environment."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            f"Invalid configuration in {source}: {reason}\n\n"
            f"Suggestions:\n"
            f"1. Check key names against the [numbering] table documentation\n"
            f"2. Check WELD_NUMBERING_* environment variables\n"
            f"3. Ensure default_padding_width is a non-negative integer and\n"
            f"   log_level is one of DEBUG, INFO, WARNING, ERROR"
        )
