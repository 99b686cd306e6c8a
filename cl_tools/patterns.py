"""
Layout compiler for cl-tools.

Turns a date layout written in custom date-format notation
(e.g. ``"M/d/yyyy h:mm:ss tt"``) into an anchored regular expression and
builds a ``datetime`` from the captured fields.

``datetime.strptime`` is deliberately not used: it accepts one or two
digits for every numeric directive and so cannot tell ``MM`` from ``M``.
Here a doubled token means exactly two digits and a single token means
one or two, so each layout accepts exactly what it spells out.

Supported tokens (invariant-culture conventions):

  yyyy        four-digit year
  yy          two-digit year, pivoting at TWO_DIGIT_YEAR_MAX
  MMMM / MMM  full / abbreviated English month name (case-insensitive)
  MM / M      month number
  dd / d      day of month
  HH / H      hour, 0-23
  hh / h      hour, 0-12; AM unless a PM designator follows
  mm / m      minute
  ss / s      second
  tt          AM / PM designator (case-insensitive), needs hh or h

Text between single quotes is literal, as is any non-letter character.
Any other letter run is rejected with ``LayoutError``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime

from cl_tools.exceptions import LayoutError

logger = logging.getLogger(__name__)

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
MONTH_ABBREVIATIONS = tuple(name[:3] for name in MONTH_NAMES)

# Two-digit years at or below this map into the 2000s, the rest into the 1900s
TWO_DIGIT_YEAR_MAX = 2049

# Maps token -> (captured field, regex body)
_TOKENS: dict[str, tuple[str, str]] = {
    "yyyy": ("year", r"\d{4}"),
    "yy": ("year2", r"\d{2}"),
    "MMMM": ("month_name", "(?i:" + "|".join(MONTH_NAMES) + ")"),
    "MMM": ("month_abbr", "(?i:" + "|".join(MONTH_ABBREVIATIONS) + ")"),
    "MM": ("month", r"\d{2}"),
    "M": ("month", r"\d{1,2}"),
    "dd": ("day", r"\d{2}"),
    "d": ("day", r"\d{1,2}"),
    "HH": ("hour", r"\d{2}"),
    "H": ("hour", r"\d{1,2}"),
    "hh": ("hour12", r"\d{2}"),
    "h": ("hour12", r"\d{1,2}"),
    "mm": ("minute", r"\d{2}"),
    "m": ("minute", r"\d{1,2}"),
    "ss": ("second", r"\d{2}"),
    "s": ("second", r"\d{1,2}"),
    "tt": ("designator", "(?i:AM|PM)"),
}

_MONTH_LOOKUP = {name.lower(): i for i, name in enumerate(MONTH_NAMES, start=1)}
_MONTH_LOOKUP.update(
    {abbr.lower(): i for i, abbr in enumerate(MONTH_ABBREVIATIONS, start=1)}
)


@dataclass(frozen=True)
class CompiledLayout:
    """A layout pattern compiled into a strict matcher.

    Attributes:
        pattern: The source layout, e.g. ``"dd/MM/yyyy"``.
        regex: Anchored expression with one named group per field.
        fields: Captured field names, in pattern order.
    """
    pattern: str
    regex: re.Pattern
    fields: tuple[str, ...]

    def match(self, text: str) -> datetime | None:
        """Return the ``datetime`` spelled by *text*, or ``None``.

        The whole string must match: no surrounding whitespace, no
        trailing characters.  Values outside the calendar (month 13,
        Feb 30, hour 24) are a non-match rather than an error.
        """
        m = self.regex.fullmatch(text)
        if m is None:
            return None
        return _build_datetime(m.groupdict())


def compile_layout(pattern: str) -> CompiledLayout:
    """Compile a layout pattern.

    Raises:
        LayoutError: If the pattern is empty, contains an unsupported
            token, repeats a field, has an unterminated quote, has
            no year token, or has a designator without a 12-hour token.
    """
    if not pattern:
        raise LayoutError("Layout pattern is empty")

    parts: list[str] = []
    fields: list[str] = []
    raw_fields: set[str] = set()
    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if ch == "'":
            end = pattern.find("'", i + 1)
            if end == -1:
                raise LayoutError(f"Unterminated quote in layout {pattern!r}")
            parts.append(re.escape(pattern[i + 1:end]))
            i = end + 1
            continue
        if ch.isalpha():
            j = i
            while j < len(pattern) and pattern[j] == ch:
                j += 1
            token = pattern[i:j]
            if token not in _TOKENS:
                raise LayoutError(
                    f"Unsupported token {token!r} in layout {pattern!r}"
                )
            field, body = _TOKENS[token]
            group = _group_name(field)
            if group in fields:
                raise LayoutError(
                    f"Field '{group}' appears twice in layout {pattern!r}"
                )
            fields.append(group)
            raw_fields.add(field)
            parts.append(f"(?P<{field}>{body})")
            i = j
            continue
        parts.append(re.escape(ch))
        i += 1

    if "year" not in fields:
        raise LayoutError(f"Layout {pattern!r} has no year token")
    if "designator" in raw_fields and "hour12" not in raw_fields:
        raise LayoutError(
            f"Layout {pattern!r} has an AM/PM designator without hh or h"
        )

    regex = re.compile("".join(parts), re.ASCII)
    logger.debug("Compiled layout %r -> %s", pattern, regex.pattern)
    return CompiledLayout(pattern=pattern, regex=regex, fields=tuple(fields))


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _group_name(field: str) -> str:
    """Collapse alternate spellings of one field (``yy`` / ``yyyy``)."""
    if field in ("year", "year2"):
        return "year"
    if field in ("month", "month_name", "month_abbr"):
        return "month"
    if field in ("hour", "hour12"):
        return "hour"
    return field


def _build_datetime(parts: dict[str, str]) -> datetime | None:
    """Assemble captured fields into a ``datetime``; ``None`` if impossible."""
    if "year" in parts:
        year = int(parts["year"])
    else:
        year = 2000 + int(parts["year2"])
        if year > TWO_DIGIT_YEAR_MAX:
            year -= 100

    if "month" in parts:
        month = int(parts["month"])
    elif "month_name" in parts:
        month = _MONTH_LOOKUP[parts["month_name"].lower()]
    elif "month_abbr" in parts:
        month = _MONTH_LOOKUP[parts["month_abbr"].lower()]
    else:
        month = 1

    day = int(parts.get("day", 1))

    if "hour12" in parts:
        hour = int(parts["hour12"])
        if hour > 12:
            return None
        # No designator reads as AM
        if parts.get("designator", "AM").upper() == "PM":
            if hour != 12:
                hour += 12
        elif hour == 12:
            hour = 0
    else:
        hour = int(parts.get("hour", 0))

    minute = int(parts.get("minute", 0))
    second = int(parts.get("second", 0))

    try:
        return datetime(year, month, day, hour, minute, second)
    except ValueError:
        return None
