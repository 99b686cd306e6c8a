"""
Format list loader for cl-tools.

Loads the ordered list of accepted date layouts from a YAML file and
validates it with Pydantic.  Each file defines:
- name: identifier of the list (e.g., "default")
- description: free-form note for humans
- formats: layout patterns, tried in file order

Why YAML instead of a hardcoded list:
- The order of the list is the parsing contract, and a flat file makes
  that order easy to read and review.
- Callers with other conventions can ship their own file and pass the
  loaded tuple as ``formats=`` without touching the package.

``DATE_FORMATS`` is the packaged default, loaded once at import time and
exposed as a tuple so it cannot be mutated.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from cl_tools.exceptions import FormatConfigError, LayoutError
from cl_tools.patterns import compile_layout

logger = logging.getLogger(__name__)

# Directory containing format YAML files (sibling package)
_FORMATS_DIR = Path(__file__).parent / "formats"

DEFAULT_FORMAT_FILE = _FORMATS_DIR / "default.yaml"


class FormatFile(BaseModel):
    """A format list loaded from YAML."""

    name: str = "custom"
    description: str = ""
    formats: list[str] = Field(
        ..., min_length=1, description="Layout patterns, first match wins"
    )

    @field_validator("formats")
    @classmethod
    def _check_layouts_compile(cls, formats: list[str]) -> list[str]:
        """Reject the file if any layout uses an unsupported token."""
        for pattern in formats:
            try:
                compile_layout(pattern)
            except LayoutError as e:
                raise ValueError(str(e)) from e
        return formats


def load_format_file(path: str | Path) -> FormatFile:
    """Load and validate a format YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        FormatConfigError: If the file is empty or fails validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Format file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise FormatConfigError(f"Format file is empty: {path}")
    if not isinstance(raw, dict):
        raise FormatConfigError(
            f"Format file must contain a mapping, got {type(raw).__name__}: {path}"
        )
    try:
        format_file = FormatFile.model_validate(raw)
    except ValidationError as e:
        raise FormatConfigError(f"Invalid format file {path}:\n{e}") from e
    logger.debug(
        "Loaded format list '%s' (%d layouts) from %s",
        format_file.name, len(format_file.formats), path,
    )
    return format_file


def load_formats(path: str | Path | None = None) -> tuple[str, ...]:
    """Load an ordered layout tuple, defaulting to the packaged list.

    Args:
        path: YAML file to read.  Defaults to ``formats/default.yaml``.

    Returns:
        The layouts in file order, duplicates included.
    """
    format_file = load_format_file(path or DEFAULT_FORMAT_FILE)
    return tuple(format_file.formats)


DATE_FORMATS: tuple[str, ...] = load_formats()
