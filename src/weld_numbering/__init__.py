"""
weld-numbering - Weld Number Convention Detection and Sequencing

Infers how a project writes its field weld numbers (prefix, zero-padding),
parses and formats weld numbers under that convention, and proposes the next
weld number, filling gaps before continuing after the highest number.
"""

from weld_numbering.config import NumberingConfig
from weld_numbering.convention import DEFAULT_CONVENTION, NamingConvention, default_convention
from weld_numbering.decoder import WeldNumberDecoder, parse
from weld_numbering.detector import PatternDetector, detect_dominant, detect_single
from weld_numbering.generator import WeldNumberGenerator, format_weld_number
from weld_numbering.identity import weld_numbers_from_components
from weld_numbering.numbering import propose_next_identifier, propose_next_identifiers
from weld_numbering.sequence import find_gaps, next_value
from weld_numbering.sorting import sort_weld_numbers
from weld_numbering.validator import ValidationResult, WeldNumberValidator

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONVENTION",
    "NamingConvention",
    "NumberingConfig",
    "PatternDetector",
    "ValidationResult",
    "WeldNumberDecoder",
    "WeldNumberGenerator",
    "WeldNumberValidator",
    "default_convention",
    "detect_dominant",
    "detect_single",
    "find_gaps",
    "format_weld_number",
    "next_value",
    "parse",
    "propose_next_identifier",
    "propose_next_identifiers",
    "sort_weld_numbers",
    "weld_numbers_from_components",
]
