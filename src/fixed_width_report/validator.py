"""
Output Validator - Validates fixed-width report files.

This module handles:
- Validating that every line matches the record length
- Reporting warnings for non-blank filler spans
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from fixed_width_report.exceptions import RecordLengthError
from fixed_width_report.layout import ADDRESS_LAYOUT, FieldSpec, unpack_line


class ValidationSeverity(Enum):
    """Severity levels for validation issues."""
    ERROR = "error"
    WARNING = "warning"


@dataclass
class ValidationIssue:
    """A single validation issue."""
    severity: ValidationSeverity
    message: str
    line_number: Optional[int] = None

    def __str__(self):
        parts = [f"[{self.severity.value.upper()}]"]
        if self.line_number:
            parts.append(f"line {self.line_number}:")
        parts.append(self.message)
        return " ".join(parts)


@dataclass
class ValidationResult:
    """Result of validation."""
    issues: List[ValidationIssue] = field(default_factory=list)
    lines_validated: int = 0

    @property
    def is_valid(self) -> bool:
        """Check if validation passed (no errors)."""
        return not self.errors

    @property
    def errors(self) -> List[ValidationIssue]:
        """Get all error issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> List[ValidationIssue]:
        """Get all warning issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    def add_error(self, message: str, **kwargs) -> None:
        """Add an error issue."""
        self.issues.append(ValidationIssue(ValidationSeverity.ERROR, message, **kwargs))

    def add_warning(self, message: str, **kwargs) -> None:
        """Add a warning issue."""
        self.issues.append(ValidationIssue(ValidationSeverity.WARNING, message, **kwargs))


class OutputValidator:
    """
    Validates fixed-width report lines against a layout.

    Usage:
        validator = OutputValidator()
        result = validator.validate_file(path)
    """

    def __init__(self, layout: Sequence[FieldSpec] = ADDRESS_LAYOUT):
        self.layout = tuple(layout)

    def validate_lines(self, lines: Iterable[str]) -> ValidationResult:
        """Validate lines given without their terminators."""
        result = ValidationResult()
        for line_number, line in enumerate(lines, 1):
            result.lines_validated += 1
            try:
                slots = unpack_line(line, self.layout, line_number)
            except RecordLengthError as e:
                result.add_error(
                    f"length {e.actual_length}, expected {e.expected_length}",
                    line_number=line_number,
                )
                continue

            for spec in self.layout:
                if slots[f"{spec.name}_filler"].strip():
                    result.add_warning(
                        f"filler after {spec.name} is not blank",
                        line_number=line_number,
                    )
        return result

    def validate_file(self, path: Path, encoding: str = "utf-8") -> ValidationResult:
        """Validate every line of a report file."""
        with open(path, "r", encoding=encoding, newline="") as f:
            return self.validate_lines(line.rstrip("\r\n") for line in f)
