"""
Command-Line Interface for the fixed-width report converter.

This module provides the command-line interface for converting
delimited address files into 160-column fixed-width reports.

Usage:
    fixed-width-report
    fixed-width-report info.csv output.txt
    fixed-width-report info.csv output.txt --skip-header --verbose
    fixed-width-report info.csv output.txt --validate-only
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from fixed_width_report import __version__
from fixed_width_report.config import Config, create_default_config, merge_configs
from fixed_width_report.exceptions import ConfigError, ReportError
from fixed_width_report.logging_config import setup_logging
from fixed_width_report.main import ConversionPipeline, validate_file


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="fixed-width-report",
        description="Convert comma-separated address records into a 160-column fixed-width report.",
        epilog="Without INPUT and OUTPUT the deployment default paths are used.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Input/Output
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="Delimited input file",
        metavar="INPUT",
    )

    parser.add_argument(
        "output",
        nargs="?",
        type=Path,
        help="Fixed-width output file",
        metavar="OUTPUT",
    )

    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Configuration file (JSON)",
        metavar="FILE",
    )

    # Format options
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="File encoding (default: utf-8)",
    )

    parser.add_argument(
        "--delimiter",
        default=",",
        help="Input field delimiter (default: ',')",
    )

    parser.add_argument(
        "--skip-header",
        action="store_true",
        help="Skip the first input row",
    )

    # Run modes
    parser.add_argument(
        "--validate-only",
        action="store_true",
        help="Only validate the existing OUTPUT file, don't convert",
    )

    # Output options
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only report warnings and errors",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write log messages to FILE",
        metavar="FILE",
    )

    return parser


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = create_parser()
    parsed = parser.parse_args(args)
    if (parsed.input is None) != (parsed.output is None):
        parser.error("INPUT and OUTPUT must be given together")
    return parsed


def args_to_config(args: argparse.Namespace) -> Config:
    """Convert parsed arguments to Config object."""
    config = create_default_config()

    if args.input is not None:
        config.input_path = args.input
        config.output_path = args.output

    config.encoding = args.encoding
    config.delimiter = args.delimiter
    config.skip_header = args.skip_header
    config.validate_only = args.validate_only
    config.verbose = args.verbose
    config.quiet = args.quiet
    config.log_file = args.log_file

    if args.verbose:
        config.log_level = "DEBUG"
    elif args.quiet:
        config.log_level = "WARNING"

    # Command-line args override file config
    if args.config and args.config.exists():
        file_config = Config.load_from_file(args.config)
        config = merge_configs(file_config, config)

    return config


def run_validation(config: Config) -> int:
    """
    Run validation only.

    Returns:
        Exit code (0 for success, 1 for errors)
    """
    result = validate_file(config.output_path, encoding=config.encoding)

    if not config.quiet:
        print(f"Validated {result.lines_validated} lines in {config.output_path}")
    for issue in result.issues[:10]:
        print(f"  {issue}", file=sys.stderr)
    if len(result.issues) > 10:
        print(f"  ... and {len(result.issues) - 10} more", file=sys.stderr)

    return 0 if result.is_valid else 1


def run_conversion(config: Config) -> int:
    """
    Run the conversion.

    Returns:
        Exit code (0 for success, 1 for errors)
    """
    logger = setup_logging(config.log_level, config.log_file, config.verbose)

    try:
        result = ConversionPipeline(config).run()
    except ReportError as e:
        record_number = getattr(e, "row_number", getattr(e, "record_number", "-"))
        logger.error(f"Error: {e}", extra={"record_number": record_number})
        return 1

    if result.skipped_rows:
        logger.info(f"Skipped {len(result.skipped_rows)} rows")
    logger.debug(f"Completed in {result.processing_time:.2f} seconds")
    logger.info("Processing complete")
    return 0


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code
    """
    parsed = parse_args(args)
    try:
        config = args_to_config(parsed)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    errors = config.validate()
    if errors:
        for error in errors:
            print(f"Configuration error: {error}", file=sys.stderr)
        return 1

    if config.validate_only:
        return run_validation(config)
    return run_conversion(config)


if __name__ == "__main__":
    sys.exit(main())
