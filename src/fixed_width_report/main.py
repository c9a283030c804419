"""
Main entry point for the fixed-width report converter.

This module orchestrates reading, formatting and writing, and
provides a programmatic API for the conversion.
"""

import contextlib
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, TextIO

from fixed_width_report.config import Config, create_default_config
from fixed_width_report.exceptions import InputOpenError, OutputOpenError
from fixed_width_report.layout import format_record
from fixed_width_report.logging_config import get_logger
from fixed_width_report.models import FIELD_COUNT
from fixed_width_report.reader import RecordReader, build_record
from fixed_width_report.validator import OutputValidator, ValidationResult
from fixed_width_report.writer import LineWriter

logger = get_logger("main")


@dataclass(frozen=True)
class SkippedRow:
    """An input row dropped because of its field count."""
    row_number: int
    field_count: int

    def __str__(self):
        return (
            f"Record {self.row_number} has {self.field_count} fields "
            f"(expected {FIELD_COUNT}), skipping"
        )


@dataclass
class ConversionResult:
    """Result of a conversion run."""
    records_written: int = 0
    rows_read: int = 0
    skipped_rows: List[SkippedRow] = field(default_factory=list)
    input_path: Optional[Path] = None
    output_path: Optional[Path] = None
    processing_time: float = 0.0


def convert_stream(
    source: TextIO,
    sink: TextIO,
    delimiter: str = ",",
    skip_header: bool = False,
) -> ConversionResult:
    """
    Convert delimited rows from ``source`` into fixed-width lines on ``sink``.

    Rows with the wrong number of fields are logged and skipped. Parse and
    write failures propagate as RecordParseError / RecordWriteError.

    Args:
        source: Text stream of delimited rows
        sink: Text stream receiving formatted lines
        delimiter: Field delimiter
        skip_header: Drop the first row

    Returns:
        ConversionResult with counts and skipped rows
    """
    reader = RecordReader(source, delimiter=delimiter, skip_header=skip_header)
    writer = LineWriter(sink)
    result = _write_records(reader, writer)
    writer.flush()
    return result


def _write_records(reader: RecordReader, writer: LineWriter) -> ConversionResult:
    """Format and write every row of ``reader``, skipping bad field counts."""
    result = ConversionResult()
    for row_number, fields in reader:
        record = build_record(fields)
        if record is None:
            skipped = SkippedRow(row_number, len(fields))
            result.skipped_rows.append(skipped)
            logger.warning(str(skipped), extra={"record_number": row_number})
            continue

        writer.write_line(format_record(record), row_number)
        result.records_written += 1

    result.rows_read = reader.rows_read
    return result


class ConversionPipeline:
    """
    Runs a conversion between the files named in a Config.

    Usage:
        pipeline = ConversionPipeline(config)
        result = pipeline.run()
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the pipeline.

        Args:
            config: Configuration object (uses defaults if not provided)
        """
        self.config = config or create_default_config()

    def run(self) -> ConversionResult:
        """
        Convert the input file into the output file.

        The output is created or truncated before the first row is read.
        Both files are closed on success and on failure.

        Returns:
            ConversionResult with all details

        Raises:
            ReportError: On any fatal open, parse or write failure
        """
        start_time = time.time()
        input_path = self.config.input_path
        output_path = self.config.output_path

        logger.info(f"Reading from: {input_path}")
        logger.info(f"Writing to: {output_path}")

        try:
            source = open(input_path, "r", encoding=self.config.encoding, newline="")
        except OSError as e:
            raise InputOpenError(input_path, e.strerror or str(e)) from e

        with source:
            try:
                sink = open(output_path, "w", encoding=self.config.encoding, newline="")
            except OSError as e:
                raise OutputOpenError(output_path, e.strerror or str(e)) from e

            reader = RecordReader(
                source,
                delimiter=self.config.delimiter,
                skip_header=self.config.skip_header,
            )
            writer = LineWriter(sink)
            try:
                result = _write_records(reader, writer)
                writer.flush()
            except BaseException:
                # Keep the original error; a failed flush fails again on close
                with contextlib.suppress(OSError):
                    sink.close()
                raise
            writer.close()

        result.input_path = input_path
        result.output_path = output_path
        result.processing_time = time.time() - start_time

        logger.info(f"Successfully processed {result.records_written} records")
        return result


def convert_file(
    input_path: Path,
    output_path: Path,
    **kwargs,
) -> ConversionResult:
    """
    Convenience function to convert one file.

    Args:
        input_path: Delimited input file
        output_path: Fixed-width output file
        **kwargs: Additional configuration options

    Returns:
        ConversionResult with details
    """
    config = Config(
        input_path=Path(input_path),
        output_path=Path(output_path),
        **kwargs,
    )
    return ConversionPipeline(config).run()


def validate_file(path: Path, encoding: str = "utf-8") -> ValidationResult:
    """
    Validate an existing fixed-width report file.

    Args:
        path: Report file to validate
        encoding: File encoding

    Returns:
        ValidationResult with any issues
    """
    return OutputValidator().validate_file(path, encoding=encoding)
