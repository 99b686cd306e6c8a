"""
Date column transform for cl-tools.

Runs every cell of one DataFrame column through ``validate_date_string``
and stores the result as ``datetime64``.  Cells that match no layout
become ``NaT``; non-string cells (``NaN`` from an empty CSV field, numbers)
are treated like empty strings.

Returns:
  The converted DataFrame plus counts of parsed/unparsed cells, so a
  caller can decide whether too many rows failed.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import pandas as pd

from cl_tools.dates import validate_date_string
from cl_tools.exceptions import InvalidArgumentError
from cl_tools.format_registry import DATE_FORMATS

logger = logging.getLogger(__name__)


@dataclass
class DateColumnResult:
    """Result of the date-column parsing step."""
    df: pd.DataFrame
    parsed: int
    unparsed: int


def parse_date_column(
    df: pd.DataFrame,
    column: str,
    formats: Sequence[str] = DATE_FORMATS,
) -> DateColumnResult:
    """Parse a column of date strings.

    Args:
        df: Input DataFrame; left unmodified.
        column: Name of the column holding the raw strings.
        formats: Ordered layout patterns passed to ``validate_date_string``.

    Returns:
        DateColumnResult whose ``df`` has *column* as ``datetime64``.

    Raises:
        InvalidArgumentError: If *column* is not in *df*.
    """
    if column not in df.columns:
        raise InvalidArgumentError(
            f"Column '{column}' not found. Available: {list(df.columns)}"
        )

    values = [
        validate_date_string(v, formats) if isinstance(v, str) else None
        for v in df[column]
    ]
    parsed = sum(v is not None for v in values)

    df = df.copy()
    df[column] = pd.to_datetime(pd.Series(values, index=df.index, dtype="object"))

    logger.info(
        "Parsed %d/%d dates in column '%s'", parsed, len(values), column
    )
    return DateColumnResult(df=df, parsed=parsed, unparsed=len(values) - parsed)
