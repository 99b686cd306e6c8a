"""
Enum column transform for cl-tools.

Replaces each cell of one DataFrame column with the Enum member whose
name matches it (ignoring case), or with a fallback member.  The result
column has ``object`` dtype and holds Enum members.
"""

from __future__ import annotations

import logging
from enum import Enum

import pandas as pd

from cl_tools.enums import parse_or_default, require_enum
from cl_tools.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


def parse_enum_column(
    df: pd.DataFrame,
    column: str,
    enum_type: type[Enum],
    default: Enum,
) -> pd.DataFrame:
    """Parse a column of member names into *enum_type* members.

    Non-string cells fall back to *default* like any other failed parse.

    Raises:
        InvalidArgumentError: If *column* is not in *df*.
        TypeConstraintError: If *enum_type* is not an Enum subclass.
    """
    require_enum(enum_type)
    if column not in df.columns:
        raise InvalidArgumentError(
            f"Column '{column}' not found. Available: {list(df.columns)}"
        )

    # Parse with a None fallback first so misses can be counted
    members = [
        parse_or_default(enum_type, v if isinstance(v, str) else None, None)
        for v in df[column]
    ]
    fallbacks = sum(m is None for m in members)

    df = df.copy()
    df[column] = pd.Series(
        [default if m is None else m for m in members],
        index=df.index,
        dtype="object",
    )

    logger.info(
        "Parsed column '%s' as %s: %d cell(s) fell back to %s",
        column, enum_type.__name__, fallbacks, default,
    )
    return df
