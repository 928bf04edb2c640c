import sys

import pytest
from click.testing import CliRunner

# t-string literals are a syntax error before Python 3.14.
collect_ignore = [] if sys.version_info >= (3, 14) else ["test_tstring_literals.py"]


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()
