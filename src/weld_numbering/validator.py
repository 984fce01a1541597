"""Weld number validation before persistence."""

from collections.abc import Iterable
from dataclasses import dataclass

from weld_numbering.decoder import parse
from weld_numbering.detector import detect_dominant


@dataclass
class ValidationResult:
    """Weld number validation result."""

    valid: bool
    error: str | None = None
    warnings: list[str] | None = None

    def __post_init__(self) -> None:
        """Initialize warnings list."""
        if self.warnings is None:
            self.warnings = []


class WeldNumberValidator:
    """Validate a candidate weld number against a project's existing weld numbers.

    Mirrors the checks the store applies on insert (non-empty, unique within
    the project, case-sensitive) so a form can reject a value before saving.
    """

    def __init__(self, existing_identifiers: Iterable[str]):
        """Initialize validator.

        Args:
            existing_identifiers: Weld numbers already in the project
        """
        self.existing = list(existing_identifiers)
        self._taken = set(self.existing)
        self.convention = detect_dominant(self.existing)

    def validate(self, candidate: str) -> ValidationResult:
        """Validate a weld number.

        Args:
            candidate: Weld number entered by the user

        Returns:
            Validation result; a convention mismatch is only a warning
        """
        if not candidate.strip():
            return ValidationResult(valid=False, error="Weld number is required")

        if candidate != candidate.strip():
            return ValidationResult(
                valid=False,
                error=f"Weld number has leading or trailing whitespace: {candidate!r}",
            )

        if candidate in self._taken:
            return ValidationResult(
                valid=False,
                error=f"Duplicate weld number: {candidate} already exists in this project",
            )

        warnings = []
        if self.existing and parse(candidate, self.convention) is None:
            warnings.append(
                f"{candidate} does not follow the project's {self.convention.template} convention"
            )

        return ValidationResult(valid=True, warnings=warnings)
