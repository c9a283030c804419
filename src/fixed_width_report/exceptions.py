"""
Exception classes for the fixed-width report converter.

This module defines the fatal errors raised while converting delimited
address records, organized in a hierarchy for easy handling.
"""

from pathlib import Path
from typing import Optional, Union


class ReportError(Exception):
    """Base exception for all converter errors."""

    pass


class InputOpenError(ReportError):
    """Input file could not be opened for reading.

    Attributes:
        path: The input path
        reason: Description of the underlying failure
    """

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to open input file {self.path}: {reason}")


class OutputOpenError(ReportError):
    """Output file could not be created or truncated.

    Attributes:
        path: The output path
        reason: Description of the underlying failure
    """

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to create output file {self.path}: {reason}")


class RecordParseError(ReportError):
    """A delimited row could not be parsed (e.g. unbalanced quoting).

    Attributes:
        row_number: 1-based number of the offending row
        reason: Description of the parse failure
    """

    def __init__(self, row_number: int, reason: str):
        self.row_number = row_number
        self.reason = reason
        super().__init__(f"Error reading CSV at record {row_number}: {reason}")


class RecordWriteError(ReportError):
    """A formatted line could not be written to the output.

    Attributes:
        record_number: Number of the record being written
        reason: Description of the write failure
    """

    def __init__(self, record_number: int, reason: str):
        self.record_number = record_number
        self.reason = reason
        super().__init__(f"Error writing record {record_number}: {reason}")


class RecordLengthError(ReportError):
    """A fixed-width line does not match the layout length.

    Attributes:
        line_number: 1-based line number (0 when unknown)
        actual_length: The actual line length
        expected_length: The layout length
    """

    def __init__(
        self,
        actual_length: int,
        expected_length: int,
        line_number: int = 0,
        message: Optional[str] = None,
    ):
        self.line_number = line_number
        self.actual_length = actual_length
        self.expected_length = expected_length
        if message is None:
            message = (
                f"Line length {actual_length} does not match "
                f"record length {expected_length}"
            )
        if line_number:
            message = f"Line {line_number}: {message}"
        super().__init__(message)


class ConfigError(ReportError):
    """Configuration error.

    Raised when the configuration is invalid, such as a missing
    input file or an unusable delimiter.
    """

    pass
