"""
Record Reader - Reads delimited address rows.

This module handles:
- Parsing comma-separated rows with strict quoting rules
- Rejecting quote characters inside unquoted fields
- Numbering rows (1-based) for diagnostics
- Skipping blank rows and an optional header row
- Building trimmed AddressRecord values
"""

from __future__ import annotations

import csv
from collections.abc import Iterable, Iterator

from .exceptions import RecordParseError
from .models import FIELD_COUNT, AddressRecord


def find_bare_quote(raw: str, delimiter: str = ",", quotechar: str = '"') -> bool:
    """Return True if a quote appears inside an unquoted field.

    Quotes are only allowed to open a field or, doubled, inside a
    quoted field.

    Args:
        raw: Raw text of one record, possibly spanning lines
        delimiter: Field delimiter
        quotechar: Quote character
    """
    in_quotes = False
    at_field_start = True
    i = 0
    while i < len(raw):
        ch = raw[i]
        if in_quotes:
            if ch == quotechar:
                if raw[i + 1 : i + 2] == quotechar:
                    i += 2
                    continue
                in_quotes = False
        elif ch == quotechar:
            if not at_field_start:
                return True
            in_quotes = True
            at_field_start = False
        elif ch == delimiter or ch in "\r\n":
            at_field_start = True
        else:
            at_field_start = False
        i += 1
    return False


class RecordReader:
    """Iterate the rows of a delimited text source.

    Usage:
        reader = RecordReader(stream)
        for row_number, fields in reader:
            ...
    """

    def __init__(
        self,
        source: Iterable[str],
        delimiter: str = ",",
        skip_header: bool = False,
    ) -> None:
        self._delimiter = delimiter
        self._raw_lines: list[str] = []
        self._reader = csv.reader(
            self._track_lines(source), delimiter=delimiter, strict=True
        )
        self._skip_header = skip_header
        self.rows_read = 0

    def _track_lines(self, source: Iterable[str]) -> Iterator[str]:
        """Keep the raw lines of the record being parsed."""
        for line in source:
            self._raw_lines.append(line)
            yield line

    def __iter__(self) -> Iterator[tuple[int, list[str]]]:
        """Yield ``(row_number, fields)`` for each non-blank data row.

        Raises:
            RecordParseError: If a row has malformed syntax
        """
        while True:
            row_number = self.rows_read + 1
            self._raw_lines.clear()
            try:
                fields = next(self._reader)
            except StopIteration:
                return
            except (csv.Error, UnicodeDecodeError) as e:
                raise RecordParseError(row_number, str(e)) from e

            raw = "".join(self._raw_lines)
            if find_bare_quote(raw, self._delimiter):
                raise RecordParseError(row_number, 'bare " in non-quoted field')

            self.rows_read = row_number
            if row_number == 1 and self._skip_header:
                continue
            if not raw.strip():
                continue
            yield row_number, fields


def build_record(fields: list[str]) -> AddressRecord | None:
    """Build a record from raw fields, or None if the count is wrong."""
    if len(fields) != FIELD_COUNT:
        return None
    return AddressRecord.from_fields(fields)
