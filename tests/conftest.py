"""
Pytest configuration and fixtures for fixed-width report tests.
"""

import logging

import pytest

from fixed_width_report.logging_config import LOGGER_NAME


SAMPLE_ROWS = (
    "Smith,John,123 Main Street,Springfield,IL,62701\n"
    "Doe,Jane,456 Oak Avenue,Portland,OR,97201\n"
)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handler setup done by CLI runs so caplog sees records."""
    logger = logging.getLogger(LOGGER_NAME)
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def smith_row():
    """The reference input row."""
    return "Smith,John,123 Main Street,Springfield,IL,62701"


@pytest.fixture
def smith_line():
    """The expected 160-column line for the reference row."""
    return (
        "Smith" + " " * 20 + " " * 5
        + "John" + " " * 11 + " " * 5
        + "123 Main Street" + " " * 14 + " " * 5
        + "Springfield" + " " * 4 + " " * 5
        + "IL" + " " * 1 + " " * 5
        + "62701" + " " * 5 + " " * 38
    )


@pytest.fixture
def input_csv(tmp_path):
    """Create a sample delimited input file."""
    path = tmp_path / "info.csv"
    path.write_text(SAMPLE_ROWS, encoding="utf-8")
    return path


@pytest.fixture
def output_txt(tmp_path):
    """Path for the fixed-width output file."""
    return tmp_path / "output.txt"
