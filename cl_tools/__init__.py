"""
cl-tools: stateless helpers for date strings and described enums.

Public API surface:

- ``validate_date_string(value)`` -- strict parse against the ordered
  layout list ``DATE_FORMATS``; first match wins, ``None`` otherwise.
- ``validate_year_string(value)`` -- is *value* exactly a four-digit year?
- ``diff_dates(from_string[, to_string])`` -- ``timedelta`` between two
  date strings, or between one and now.
- ``age_from_date(given)`` -- whole years elapsed since *given*.

- ``describe(**tags)`` -- class decorator attaching descriptions to
  Enum members.
- ``enum_value_by_description(enum_type, description)`` -- member by tag.
- ``all_values(enum_type)`` -- members in declaration order.
- ``parse_or_default(enum_type, raw, default)`` -- case-insensitive
  name parse with fallback.
- ``description_of(member)`` -- the member's tag, or ``""``.

DataFrame wrappers live in ``cl_tools.transforms``.
"""

from __future__ import annotations

from cl_tools.dates import (
    age_from_date,
    diff_dates,
    validate_date_string,
    validate_year_string,
)
from cl_tools.enums import (
    all_values,
    describe,
    description_of,
    enum_value_by_description,
    parse_or_default,
)
from cl_tools.exceptions import (
    ClToolsError,
    DescriptionNotFoundError,
    FormatConfigError,
    InvalidArgumentError,
    LayoutError,
    TypeConstraintError,
)
from cl_tools.format_registry import DATE_FORMATS, load_formats

__all__ = [
    "DATE_FORMATS",
    "load_formats",
    "validate_date_string",
    "validate_year_string",
    "diff_dates",
    "age_from_date",
    "describe",
    "description_of",
    "enum_value_by_description",
    "all_values",
    "parse_or_default",
    "ClToolsError",
    "DescriptionNotFoundError",
    "FormatConfigError",
    "InvalidArgumentError",
    "LayoutError",
    "TypeConstraintError",
]
