"""
Pytest configuration and fixtures for cron-expand tests.
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from cron_expand.config import FieldSpec


@pytest.fixture
def project_dir():
    """Root directory of the project, for running the CLI as a module."""
    return project_root


@pytest.fixture
def zero_to_nine():
    """Bounds 0-9."""
    return FieldSpec("test", 0, 9)


@pytest.fixture
def one_to_ten():
    """Bounds 1-10."""
    return FieldSpec("test", 1, 10)


@pytest.fixture
def sample_line():
    """A schedule line touching every term form."""
    return "*/15 0 1,15 * 1-5 /usr/bin/find"


@pytest.fixture
def sample_report():
    """Expected report for sample_line."""
    return [
        "minute        0 15 30 45 ",
        "hour          0 ",
        "day of month  1 15 ",
        "month         1 2 3 4 5 6 7 8 9 10 11 12 ",
        "day of week   1 2 3 4 5 ",
        "command       /usr/bin/find",
    ]
