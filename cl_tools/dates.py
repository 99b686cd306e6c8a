"""
Date normalization for cl-tools.

Best-effort parsing of date strings against the ordered layout list in
``DATE_FORMATS``, plus durations and ages derived from the result.

Matching is strict: the whole string must match one layout exactly, with
no whitespace trimming and no partial fields.  Layouts are tried in list
order and the first match wins, so an ambiguous string like
``03/04/2024`` resolves through ``dd/MM/yyyy`` to 3 April 2024.

Anything that does not parse comes back as ``None`` (or ``False`` for
year validation).  Nothing in this module raises on bad input data.

"Now" is read from ``datetime.now()`` at call time unless a ``now=``
value is passed in, which is how tests pin the clock.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date, datetime, timedelta

from cl_tools.exceptions import InvalidArgumentError
from cl_tools.format_registry import DATE_FORMATS
from cl_tools.patterns import CompiledLayout, compile_layout

logger = logging.getLogger(__name__)

_DEFAULT_LAYOUTS: tuple[CompiledLayout, ...] = tuple(
    compile_layout(pattern) for pattern in DATE_FORMATS
)

_YEAR_LAYOUT = compile_layout("yyyy")

# Marks "no second date given" in diff_dates(), as opposed to None
_UNSET = object()


def validate_date_string(
    value: str | None,
    formats: Sequence[str] = DATE_FORMATS,
) -> datetime | None:
    """Parse *value* with the first layout that matches it exactly.

    Args:
        value: The raw string.  ``None``, empty and whitespace-only
            strings are rejected without trying any layout.
        formats: Ordered layout patterns.  Defaults to ``DATE_FORMATS``.

    Returns:
        The parsed ``datetime``, or ``None`` if no layout matched.
    """
    if not value or value.isspace():
        return None

    if formats is DATE_FORMATS:
        layouts = _DEFAULT_LAYOUTS
    else:
        layouts = tuple(compile_layout(pattern) for pattern in formats)

    for layout in layouts:
        parsed = layout.match(value)
        if parsed is not None:
            logger.debug("Parsed %r with layout %r", value, layout.pattern)
            return parsed

    logger.debug("No layout matched %r", value)
    return None


def validate_year_string(value: str | None) -> bool:
    """Return True if *value* is exactly a four-digit year (0001-9999)."""
    if not value:
        return False
    return _YEAR_LAYOUT.match(value) is not None


def diff_dates(
    from_string: str | None,
    to_string: str | None | object = _UNSET,
    *,
    now: datetime | None = None,
) -> timedelta | None:
    """Return the time elapsed between two date strings.

    With one argument, returns ``now - from``.  With two, returns
    ``to - from``.  Either end failing to parse gives ``None``; in the
    two-argument form that includes an explicit ``to_string=None``.

    Args:
        from_string: Start of the interval.
        to_string: End of the interval.  Omit it to measure up to now.
        now: Clock override for the one-argument form.

    Raises:
        InvalidArgumentError: If both *to_string* and *now* are given.
    """
    if to_string is not _UNSET and now is not None:
        raise InvalidArgumentError(
            "now= only applies when to_string is omitted"
        )

    start = validate_date_string(from_string)
    if start is None:
        return None

    if to_string is _UNSET:
        end = now if now is not None else datetime.now()
    else:
        end = validate_date_string(to_string)
        if end is None:
            return None

    return end - start


def age_from_date(
    given: date | datetime | None,
    now: date | datetime | None = None,
) -> int:
    """Return the number of whole years between *given* and now.

    One year is subtracted when this year's month/day has not yet
    reached the month/day of *given*.

    Returns:
        The age in years, or ``-1`` when *given* is ``None``.
    """
    if given is None:
        return -1

    today = now if now is not None else datetime.now()
    age = today.year - given.year
    if (today.month, today.day) < (given.month, given.day):
        age -= 1
    return age
