"""Core data model for address records."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import astuple, dataclass

FIELD_COUNT = 6


@dataclass(frozen=True)
class AddressRecord:
    """A single address entry read from one input row."""

    last_name: str
    first_name: str
    street: str
    city: str
    state: str
    zip_code: str

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> AddressRecord:
        """Build a record from six raw field values, trimming whitespace.

        Raises:
            ValueError: If the number of fields is not six
        """
        if len(fields) != FIELD_COUNT:
            raise ValueError(
                f"Expected {FIELD_COUNT} fields, got {len(fields)}"
            )
        return cls(*(value.strip() for value in fields))

    def as_tuple(self) -> tuple[str, ...]:
        """Return field values in layout order."""
        return astuple(self)
