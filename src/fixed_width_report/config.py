"""
Configuration - Handles conversion configuration.

This module handles:
- Configuration dataclass with all options
- Default deployment paths
- JSON configuration file support
- Command-line overrides
- Configuration validation
"""

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional

from fixed_width_report.exceptions import ConfigError

# Deployment paths used when no paths are given on the command line
DEFAULT_INPUT_PATH = Path("/nfs_dir/input/info.csv")
DEFAULT_OUTPUT_PATH = Path("/nfs_dir/output/output.txt")

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Config:
    """
    Configuration for a conversion run.

    Attributes:
        input_path: Delimited input file
        output_path: Fixed-width output file (created or truncated)
        encoding: Encoding of both files (default: utf-8)
        delimiter: Field delimiter of the input
        skip_header: Drop the first input row
        validate_only: Only validate an existing output file
        verbose: Enable verbose output
        quiet: Suppress informational output
        log_level: Logging level
        log_file: Optional file receiving a copy of the log
    """

    input_path: Path = field(default_factory=lambda: DEFAULT_INPUT_PATH)
    output_path: Path = field(default_factory=lambda: DEFAULT_OUTPUT_PATH)
    encoding: str = "utf-8"
    delimiter: str = ","
    skip_header: bool = False

    # Run modes
    validate_only: bool = False

    # Output options
    verbose: bool = False
    quiet: bool = False
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        data = {}
        for key, value in asdict(self).items():
            if isinstance(value, Path):
                data[key] = str(value)
            else:
                data[key] = value
        return data

    def save_to_file(self, path: Path) -> None:
        """Save configuration to JSON file."""
        path.write_text(json.dumps(self.to_dict(), indent=2))

    @classmethod
    def load_from_file(cls, path: Path) -> "Config":
        """Load configuration from JSON file.

        Raises:
            ConfigError: If the file cannot be read or is not a JSON object
        """
        try:
            data = json.loads(path.read_text())
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Cannot load configuration from {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration in {path} must be a JSON object")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        data = dict(data)
        for key in ("input_path", "output_path"):
            if key in data:
                data[key] = Path(data[key])
        if data.get("log_file"):
            data["log_file"] = Path(data["log_file"])

        # Filter only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in known_fields}

        return cls(**filtered_data)

    def validate(self) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if self.validate_only:
            if not self.output_path.is_file():
                errors.append(f"Output file does not exist: {self.output_path}")
        else:
            if not self.input_path.exists():
                errors.append(f"Input file does not exist: {self.input_path}")
            elif not self.input_path.is_file():
                errors.append(f"Input path is not a file: {self.input_path}")

            if self.output_path.is_dir():
                errors.append(f"Output path is a directory: {self.output_path}")

        if len(self.delimiter) != 1:
            errors.append(f"Delimiter must be a single character: {self.delimiter!r}")

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"Invalid log level: {self.log_level}")

        return errors

    def is_valid(self) -> bool:
        """Check if configuration is valid."""
        return len(self.validate()) == 0


def create_default_config() -> Config:
    """Create a configuration with default values."""
    return Config()


def merge_configs(base: Config, override: Config) -> Config:
    """
    Merge two configurations, with override taking precedence.

    Args:
        base: Base configuration
        override: Override configuration

    Returns:
        Merged configuration
    """
    base_dict = base.to_dict()
    override_dict = override.to_dict()
    default = create_default_config().to_dict()

    # Only override non-default values from override
    merged = {}
    for key in base_dict:
        if override_dict.get(key) != default.get(key):
            merged[key] = override_dict[key]
        else:
            merged[key] = base_dict[key]

    return Config.from_dict(merged)
