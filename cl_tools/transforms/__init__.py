"""
Transforms sub-package for cl-tools.

Column-level wrappers that apply the scalar helpers to a pandas
DataFrame.  Each transform takes a DataFrame and a column name and
returns a transformed copy; the input frame is never modified.

  - dates.py: Parse a column of date strings into datetime64 (NaT on miss).
  - enums.py: Parse a column of member names into Enum members.

Why separate modules:
- Each step is independently testable.
- The scalar helpers stay free of any pandas dependency.
"""

from cl_tools.transforms.dates import DateColumnResult, parse_date_column
from cl_tools.transforms.enums import parse_enum_column

__all__ = ["DateColumnResult", "parse_date_column", "parse_enum_column"]
