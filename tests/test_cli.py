"""
Tests for the command-line interface and configuration.
"""

import json
from pathlib import Path

import pytest

from fixed_width_report import __version__
from fixed_width_report.cli import (
    args_to_config,
    create_parser,
    main,
    parse_args,
)
from fixed_width_report.config import (
    DEFAULT_INPUT_PATH,
    DEFAULT_OUTPUT_PATH,
    Config,
    create_default_config,
    merge_configs,
)
from fixed_width_report.exceptions import ConfigError


class TestConfig:
    """Tests for Config dataclass."""

    def test_create_default_config(self):
        """Default config points at the deployment paths."""
        config = create_default_config()
        assert config.input_path == DEFAULT_INPUT_PATH
        assert config.output_path == DEFAULT_OUTPUT_PATH
        assert config.encoding == "utf-8"
        assert config.delimiter == ","
        assert config.skip_header is False

    def test_config_to_dict(self):
        """Convert config to dictionary."""
        config = Config(input_path=Path("/in.csv"), output_path=Path("/out.txt"))
        data = config.to_dict()
        assert data["input_path"] == "/in.csv"
        assert data["output_path"] == "/out.txt"

    def test_config_from_dict_ignores_unknown(self):
        """Unknown keys are dropped."""
        config = Config.from_dict({"input_path": "/in.csv", "colour": "blue"})
        assert config.input_path == Path("/in.csv")

    def test_config_save_and_load(self, tmp_path):
        """Save and load config from file."""
        config = Config(
            input_path=tmp_path / "in.csv",
            output_path=tmp_path / "out.txt",
            skip_header=True,
            log_file=tmp_path / "run.log",
        )
        config_file = tmp_path / "config.json"
        config.save_to_file(config_file)

        loaded = Config.load_from_file(config_file)
        assert loaded == config

    def test_load_invalid_json(self, tmp_path):
        """Malformed JSON raises ConfigError."""
        config_file = tmp_path / "config.json"
        config_file.write_text("{not json")
        with pytest.raises(ConfigError):
            Config.load_from_file(config_file)

    def test_load_non_object(self, tmp_path):
        """A JSON list is not a configuration."""
        config_file = tmp_path / "config.json"
        config_file.write_text("[1, 2]")
        with pytest.raises(ConfigError):
            Config.load_from_file(config_file)

    def test_validate_valid(self, input_csv, output_txt):
        """Valid config passes validation."""
        config = Config(input_path=input_csv, output_path=output_txt)
        assert config.validate() == []
        assert config.is_valid()

    def test_validate_missing_input(self, tmp_path, output_txt):
        """Missing input file fails validation."""
        config = Config(input_path=tmp_path / "missing.csv", output_path=output_txt)
        errors = config.validate()
        assert any("does not exist" in e for e in errors)

    def test_validate_output_directory(self, input_csv, tmp_path):
        """An output path naming a directory fails validation."""
        config = Config(input_path=input_csv, output_path=tmp_path)
        assert any("is a directory" in e for e in config.validate())

    def test_validate_delimiter(self, input_csv, output_txt):
        """Multi-character delimiters are rejected."""
        config = Config(input_path=input_csv, output_path=output_txt, delimiter="||")
        assert not config.is_valid()

    def test_validate_log_level(self, input_csv, output_txt):
        """Unknown log levels are rejected."""
        config = Config(input_path=input_csv, output_path=output_txt, log_level="LOUD")
        assert any("log level" in e for e in config.validate())


class TestMergeConfigs:
    """Tests for config merging."""

    def test_merge_override_wins(self):
        """Non-default override values take precedence."""
        base = Config(encoding="latin-1", delimiter=";")
        override = Config(delimiter="|")
        merged = merge_configs(base, override)
        assert merged.delimiter == "|"
        assert merged.encoding == "latin-1"

    def test_merge_keeps_base_paths(self):
        """Default paths in the override do not replace base paths."""
        base = Config(input_path=Path("/data/in.csv"))
        merged = merge_configs(base, create_default_config())
        assert merged.input_path == Path("/data/in.csv")


class TestArgumentParsing:
    """Tests for argument parsing."""

    def test_no_arguments_use_defaults(self):
        """Without positionals the default paths are used."""
        config = args_to_config(parse_args([]))
        assert config.input_path == DEFAULT_INPUT_PATH
        assert config.output_path == DEFAULT_OUTPUT_PATH

    def test_two_arguments_override_paths(self):
        """Input and output positionals replace the defaults."""
        config = args_to_config(parse_args(["in.csv", "out.txt"]))
        assert config.input_path == Path("in.csv")
        assert config.output_path == Path("out.txt")

    def test_single_argument_rejected(self):
        """Exactly one positional is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["in.csv"])
        assert exc_info.value.code == 2

    def test_options(self):
        """Options map onto the config."""
        config = args_to_config(
            parse_args(["a.csv", "b.txt", "--skip-header", "--delimiter", ";", "-v"])
        )
        assert config.skip_header is True
        assert config.delimiter == ";"
        assert config.verbose is True
        assert config.log_level == "DEBUG"

    def test_quiet_sets_warning_level(self):
        """Quiet mode only logs warnings and errors."""
        config = args_to_config(parse_args(["a.csv", "b.txt", "-q"]))
        assert config.log_level == "WARNING"

    def test_config_file_merged(self, tmp_path):
        """Command-line options override the config file."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"encoding": "latin-1", "delimiter": ";"}))
        config = args_to_config(
            parse_args(["a.csv", "b.txt", "-c", str(config_file), "--delimiter", "|"])
        )
        assert config.encoding == "latin-1"
        assert config.delimiter == "|"
        assert config.input_path == Path("a.csv")

    def test_version(self, capsys):
        """--version prints the package version."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--version"])
        assert __version__ in capsys.readouterr().out


class TestMain:
    """Tests for the main entry point."""

    def test_successful_run(self, input_csv, output_txt, capsys):
        """A good run exits 0 and reports the count on stderr."""
        exit_code = main([str(input_csv), str(output_txt)])
        assert exit_code == 0
        err = capsys.readouterr().err
        assert "Successfully processed 2 records" in err
        assert "Processing complete" in err
        assert len(output_txt.read_text().splitlines()) == 2

    def test_skipped_row_warning(self, tmp_path, output_txt, capsys):
        """Skipped rows are reported on stderr and the run still succeeds."""
        source = tmp_path / "in.csv"
        source.write_text("a,b,c,d,e\nSmith,John,1 Main,Springfield,IL,62701\n")
        assert main([str(source), str(output_txt)]) == 0
        err = capsys.readouterr().err
        assert "Record 1 has 5 fields" in err
        assert "Successfully processed 1 records" in err

    def test_missing_input(self, tmp_path, output_txt, capsys):
        """A missing input file exits 1."""
        assert main([str(tmp_path / "missing.csv"), str(output_txt)]) == 1
        assert "does not exist" in capsys.readouterr().err

    def test_parse_error_exits_1(self, tmp_path, output_txt, capsys):
        """A malformed row exits 1 naming the row."""
        source = tmp_path / "in.csv"
        source.write_text('a,b,c,d,e,f\nSmith,"John"x,S,C,IL,1\n')
        assert main([str(source), str(output_txt)]) == 1
        assert "record 2" in capsys.readouterr().err

    def test_bad_config_file(self, tmp_path, input_csv, output_txt, capsys):
        """An unreadable config file exits 1."""
        config_file = tmp_path / "config.json"
        config_file.write_text("{")
        assert main([str(input_csv), str(output_txt), "-c", str(config_file)]) == 1
        assert "Configuration error" in capsys.readouterr().err

    def test_log_file(self, input_csv, output_txt, tmp_path):
        """--log-file receives a copy of the log."""
        log_file = tmp_path / "run.log"
        assert main([str(input_csv), str(output_txt), "--log-file", str(log_file)]) == 0
        assert "Successfully processed 2 records" in log_file.read_text()

    def test_validate_only_valid(self, input_csv, output_txt, capsys):
        """--validate-only passes on converted output."""
        assert main([str(input_csv), str(output_txt)]) == 0
        capsys.readouterr()
        assert main([str(input_csv), str(output_txt), "--validate-only"]) == 0
        assert "Validated 2 lines" in capsys.readouterr().out

    def test_validate_only_invalid(self, input_csv, output_txt, capsys):
        """--validate-only fails on a malformed report."""
        output_txt.write_text("short line\n")
        assert main([str(input_csv), str(output_txt), "--validate-only"]) == 1
        assert "[ERROR] line 1" in capsys.readouterr().err

    def test_bare_quote_exits_1(self, tmp_path, output_txt, capsys):
        """A quote inside an unquoted field exits 1 naming the row."""
        source = tmp_path / "in.csv"
        source.write_text('Smith,John,1 Main,Springfield,IL,62701\nSm"ith,J,S,C,IL,1\n')
        assert main([str(source), str(output_txt)]) == 1
        assert "record 2" in capsys.readouterr().err

    @pytest.mark.skipif(not Path("/dev/full").exists(), reason="requires /dev/full")
    def test_full_device_exits_1(self, input_csv, capsys):
        """A write failure on a real file exits 1 with a diagnostic, not a traceback."""
        assert main([str(input_csv), "/dev/full"]) == 1
        err = capsys.readouterr().err
        assert "Error writing record 2" in err
        assert "Traceback" not in err

    def test_log_file_marks_skipped_record(self, tmp_path, output_txt):
        """The log file tags row warnings with their record number."""
        source = tmp_path / "in.csv"
        source.write_text("Smith,John,1 Main,Springfield,IL,62701\na,b,c\n")
        log_file = tmp_path / "run.log"
        assert main([str(source), str(output_txt), "--log-file", str(log_file)]) == 0
        lines = log_file.read_text().splitlines()
        [warning] = [line for line in lines if "WARNING" in line]
        assert "record=2 Record 2 has 3 fields" in warning
        assert any("record=- Successfully processed 1 records" in line for line in lines)

    def test_quiet_log_file_keeps_summary(self, input_csv, output_txt, tmp_path, capsys):
        """Quiet mode silences the console but the log file keeps the summary."""
        log_file = tmp_path / "run.log"
        args = [str(input_csv), str(output_txt), "-q", "--log-file", str(log_file)]
        assert main(args) == 0
        assert "Successfully processed" not in capsys.readouterr().err
        assert "Successfully processed 2 records" in log_file.read_text()
