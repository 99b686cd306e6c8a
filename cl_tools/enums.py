"""
Enum helpers for cl-tools.

Bridges human-readable labels and raw strings to ``enum.Enum`` members
without hand-written lookup tables.

Description tags are declared next to the enum with the ``describe``
class decorator and stored on the class as a read-only mapping from
member name to tag::

    @describe(RED="Red", GREEN="Green", BLUE="Blue")
    class Color(Enum):
        RED = 1
        GREEN = 2
        BLUE = 3

    enum_value_by_description(Color, "Green")    # Color.GREEN
    parse_or_default(Color, "green", Color.BLUE)  # Color.GREEN
    description_of(Color.RED)                     # "Red"

Error policy:
- A type argument that is not an Enum subclass is a caller bug and
  always raises ``TypeConstraintError``.
- ``parse_or_default()`` never raises on bad data; it returns the default.
- ``enum_value_by_description()`` raises ``DescriptionNotFoundError``
  when no member carries the description, so a miss can never be
  mistaken for a real member.
"""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import TypeVar

from cl_tools.exceptions import (
    DescriptionNotFoundError,
    InvalidArgumentError,
    TypeConstraintError,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

# Class attribute holding the member-name -> description mapping
_DESCRIPTIONS_ATTR = "__enum_descriptions__"


def require_enum(enum_type: object) -> None:
    """Raise TypeConstraintError unless *enum_type* is an Enum subclass."""
    if not (isinstance(enum_type, type) and issubclass(enum_type, Enum)):
        raise TypeConstraintError(
            f"Expected an Enum subclass, got {enum_type!r}"
        )


def describe(**tags: str):
    """Class decorator attaching description tags to enum members.

    Keyword names are member names; values are their descriptions.
    Members left out have no description (``""``).

    Raises:
        TypeConstraintError: If the decorated class is not an Enum.
        InvalidArgumentError: If a keyword names no member of the enum.
    """

    def decorator(enum_type: type[E]) -> type[E]:
        require_enum(enum_type)
        unknown = [name for name in tags if name not in enum_type.__members__]
        if unknown:
            raise InvalidArgumentError(
                f"{enum_type.__name__} has no member(s) named {unknown}. "
                f"Available: {list(enum_type.__members__)}"
            )
        setattr(enum_type, _DESCRIPTIONS_ATTR, MappingProxyType(dict(tags)))
        return enum_type

    return decorator


def description_of(member: Enum | None) -> str:
    """Return the description attached to *member*, or ``""``."""
    if member is None:
        return ""
    descriptions = getattr(type(member), _DESCRIPTIONS_ATTR, {})
    return descriptions.get(member.name, "")


def enum_value_by_description(enum_type: type[E], description: str) -> E:
    """Return the first member of *enum_type* tagged with *description*.

    Members are scanned in declaration order and compared with exact,
    case-sensitive string equality, so when two members share a tag the
    first one declared wins.

    Raises:
        InvalidArgumentError: If *description* is ``None`` or empty.
        TypeConstraintError: If *enum_type* is not an Enum subclass.
        DescriptionNotFoundError: If no member carries *description*.
    """
    if not description:
        raise InvalidArgumentError("description must be a non-empty string")
    require_enum(enum_type)

    for member in enum_type:
        if description_of(member) == description:
            return member

    raise DescriptionNotFoundError(
        f"No {enum_type.__name__} member is described as {description!r}"
    )


def all_values(enum_type: type[E]) -> list[E]:
    """Return every member of *enum_type* in declaration order.

    A new list is built on each call.  Aliases are not repeated.

    Raises:
        TypeConstraintError: If *enum_type* is not an Enum subclass.
    """
    require_enum(enum_type)
    return list(enum_type)


def parse_or_default(enum_type: type[E], raw: str | None, default: E) -> E:
    """Parse *raw* as a member name, ignoring case; fall back to *default*.

    Only member names are accepted: values, surrounding whitespace and
    partial names all count as a failed parse.

    Raises:
        TypeConstraintError: If *enum_type* is not an Enum subclass.
            This is checked before *raw*, so it is raised even for
            empty input.
    """
    require_enum(enum_type)
    if not raw:
        return default

    wanted = raw.casefold()
    for name, member in enum_type.__members__.items():
        if name.casefold() == wanted:
            return member

    logger.debug(
        "%r is not a %s member name; using default %s",
        raw, enum_type.__name__, default,
    )
    return default
