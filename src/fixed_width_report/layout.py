"""
Fixed-width layout - Field widths and line formatting for address records.

This module handles:
- The static field/width table of the output record
- Padding or truncating field text to its slot width
- Building a 160-character output line from an AddressRecord
- Slicing an output line back into its field slots

Output record layout (160 columns):

    Field        Width  Filler
    LAST-NAME       25       5
    FIRST-NAME      15       5
    STREET          29       5
    CITY            15       5
    STATE            3       5
    ZIP             10      38
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .exceptions import RecordLengthError
from .models import AddressRecord


@dataclass(frozen=True)
class FieldSpec:
    """One slot of a fixed-width layout."""

    name: str
    width: int
    filler: int = 0  # Spaces following the field

    @property
    def span(self) -> int:
        """Return the total columns occupied by field plus filler."""
        return self.width + self.filler


ADDRESS_LAYOUT: tuple[FieldSpec, ...] = (
    FieldSpec("last_name", 25, 5),
    FieldSpec("first_name", 15, 5),
    FieldSpec("street", 29, 5),
    FieldSpec("city", 15, 5),
    FieldSpec("state", 3, 5),
    FieldSpec("zip_code", 10, 38),
)

RECORD_LENGTH = 160


def layout_length(layout: Sequence[FieldSpec]) -> int:
    """Return the total line length produced by a layout."""
    return sum(spec.span for spec in layout)


if layout_length(ADDRESS_LAYOUT) != RECORD_LENGTH:
    raise RuntimeError(
        f"Address layout spans {layout_length(ADDRESS_LAYOUT)} columns, "
        f"expected {RECORD_LENGTH}"
    )


def pad_or_truncate(text: str, width: int) -> str:
    """Fit text to exactly ``width`` characters.

    Text at least ``width`` long is cut to its first ``width`` characters;
    shorter text is right-padded with spaces.

    Args:
        text: Field text
        width: Target width

    Returns:
        String of exactly ``width`` characters
    """
    if width < 0:
        raise ValueError(f"Width must be non-negative, got {width}")
    if len(text) >= width:
        return text[:width]
    return text + " " * (width - len(text))


def format_record(
    record: AddressRecord,
    layout: Sequence[FieldSpec] = ADDRESS_LAYOUT,
) -> str:
    """Format an address record as a fixed-width line.

    Args:
        record: The record to format
        layout: Field specs in record field order

    Returns:
        The formatted line, without line terminator
    """
    parts = []
    for value, spec in zip(record.as_tuple(), layout):
        parts.append(pad_or_truncate(value, spec.width))
        parts.append(" " * spec.filler)
    return "".join(parts)


def unpack_line(
    line: str,
    layout: Sequence[FieldSpec] = ADDRESS_LAYOUT,
    line_number: int = 0,
) -> dict[str, str]:
    """Slice a fixed-width line into its field slots.

    Filler spans are returned under ``<name>_filler`` keys.

    Raises:
        RecordLengthError: If the line length differs from the layout length
    """
    expected = layout_length(layout)
    if len(line) != expected:
        raise RecordLengthError(
            actual_length=len(line),
            expected_length=expected,
            line_number=line_number,
        )

    slots: dict[str, str] = {}
    offset = 0
    for spec in layout:
        slots[spec.name] = line[offset : offset + spec.width]
        offset += spec.width
        slots[f"{spec.name}_filler"] = line[offset : offset + spec.filler]
        offset += spec.filler
    return slots
