"""
Custom exception hierarchy for cl-tools.

Soft "no match" outcomes (a date string no layout accepts, an unknown
enum name) are never raised: they come back as ``None``, ``False`` or
the caller's default.  The exceptions below cover caller mistakes and
broken configuration only.

The argument and type errors also derive from the matching builtin, so
callers that already catch ``ValueError`` / ``TypeError`` keep working.
"""


class ClToolsError(Exception):
    """Base exception for all cl-tools errors."""


class InvalidArgumentError(ClToolsError, ValueError):
    """Raised when a required argument is empty or refers to nothing.

    For example an empty description passed to
    ``enum_value_by_description()``, or a ``describe()`` tag naming a
    member the enum does not have.
    """


class TypeConstraintError(ClToolsError, TypeError):
    """Raised when a type argument is not an ``enum.Enum`` subclass."""


class DescriptionNotFoundError(ClToolsError, LookupError):
    """Raised when no enum member carries the requested description."""


class LayoutError(ClToolsError, ValueError):
    """Raised when a date layout pattern cannot be compiled.

    Typically an unsupported token such as ``ddd`` or ``fff``, or a
    layout without any year token.
    """


class FormatConfigError(ClToolsError):
    """Raised when a format YAML file is empty or fails validation."""
