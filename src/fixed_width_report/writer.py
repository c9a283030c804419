"""
Line Writer - Appends fixed-width lines to the output.

This module handles:
- Writing formatted lines with a single line terminator
- Preserving input order
- Reporting write failures with the record number
"""

from typing import TextIO

from fixed_width_report.exceptions import RecordWriteError


class LineWriter:
    """
    Writes formatted lines to a text sink.

    The sink should be opened with ``newline=""`` so the terminator
    is written verbatim.

    Usage:
        writer = LineWriter(stream)
        writer.write_line(line, record_number)
    """

    def __init__(self, sink: TextIO, line_ending: str = "\n"):
        self.sink = sink
        self.line_ending = line_ending
        self.lines_written = 0
        self.last_record_number = 0

    def write_line(self, line: str, record_number: int) -> None:
        """
        Write one line followed by the line terminator.

        Args:
            line: Formatted line without terminator
            record_number: Record number for error reporting

        Raises:
            RecordWriteError: If the sink rejects the write
        """
        self.last_record_number = record_number
        try:
            self.sink.write(line + self.line_ending)
        except OSError as e:
            raise RecordWriteError(record_number, str(e)) from e
        self.lines_written += 1

    def flush(self) -> None:
        """Flush the sink, reporting failures against the last record."""
        try:
            self.sink.flush()
        except OSError as e:
            raise RecordWriteError(self.last_record_number, str(e)) from e

    def close(self) -> None:
        """Close the sink, reporting failures against the last record."""
        try:
            self.sink.close()
        except OSError as e:
            raise RecordWriteError(self.last_record_number, str(e)) from e
