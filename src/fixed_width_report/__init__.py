"""
Fixed-Width Report - Convert delimited address records to fixed-width lines.

This package reads comma-separated address rows (last name, first name,
street, city, state, zip) and writes one 160-column line per record, each
field padded or truncated to its slot width, for legacy downstream systems.

Basic Usage:
    from fixed_width_report import convert_file, Config

    # Simple usage
    result = convert_file(Path("info.csv"), Path("output.txt"))
    print(result.records_written)

    # With configuration
    config = Config(
        input_path=Path("info.csv"),
        output_path=Path("output.txt"),
        skip_header=True,
    )
    result = ConversionPipeline(config).run()

Command-Line Usage:
    fixed-width-report
    fixed-width-report info.csv output.txt
    fixed-width-report info.csv output.txt --validate-only
"""

__version__ = "1.0.0"

from fixed_width_report.exceptions import (
    ReportError,
    InputOpenError,
    OutputOpenError,
    RecordParseError,
    RecordWriteError,
    RecordLengthError,
    ConfigError,
)

from fixed_width_report.config import Config, create_default_config
from fixed_width_report.layout import (
    ADDRESS_LAYOUT,
    RECORD_LENGTH,
    FieldSpec,
    format_record,
    pad_or_truncate,
    unpack_line,
)
from fixed_width_report.main import (
    ConversionPipeline,
    ConversionResult,
    SkippedRow,
    convert_file,
    convert_stream,
    validate_file,
)
from fixed_width_report.models import AddressRecord

__all__ = [
    # Version
    "__version__",
    # Main API
    "convert_file",
    "convert_stream",
    "validate_file",
    "ConversionPipeline",
    "ConversionResult",
    "SkippedRow",
    # Configuration
    "Config",
    "create_default_config",
    # Data Types
    "AddressRecord",
    "FieldSpec",
    "ADDRESS_LAYOUT",
    "RECORD_LENGTH",
    "format_record",
    "pad_or_truncate",
    "unpack_line",
    # Exceptions
    "ReportError",
    "InputOpenError",
    "OutputOpenError",
    "RecordParseError",
    "RecordWriteError",
    "RecordLengthError",
    "ConfigError",
]
