"""
Shared test fixtures and constants for cl-tools tests.

Sample enums and the pinned clock are defined here as module-level
constants so every test module uses the same values.
"""

from datetime import datetime
from enum import Enum

import pytest

from cl_tools.enums import describe

# ---------------------------------------------------------------------------
# Pinned clock -- pass as now= wherever "now" matters
# ---------------------------------------------------------------------------
FIXED_NOW = datetime(2026, 6, 15, 12, 0, 0)


# ---------------------------------------------------------------------------
# Sample enums
# ---------------------------------------------------------------------------
@describe(RED="Red", GREEN="Green", BLUE="Blue")
class Color(Enum):
    RED = 1
    GREEN = 2
    BLUE = 3


class Plain(Enum):
    """An enum with no descriptions attached."""
    ONE = 1
    TWO = 2


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (reads/writes real files)",
    )
