"""
Unit tests for the format list loader (cl_tools.format_registry).

Tests the packaged default list, loading custom YAML files and the
validation errors for broken ones.
"""

import pytest
from pydantic import ValidationError

from cl_tools.exceptions import FormatConfigError
from cl_tools.format_registry import (
    DATE_FORMATS,
    DEFAULT_FORMAT_FILE,
    FormatFile,
    load_format_file,
    load_formats,
)


# ---------------------------------------------------------------------------
# Packaged default
# ---------------------------------------------------------------------------

class TestDefaultFormats:
    """Tests for the built-in DATE_FORMATS list."""

    def test_twelve_layouts_in_order(self):
        assert len(DATE_FORMATS) == 12
        assert DATE_FORMATS[0] == "M/d/yyyy h:mm:ss tt"
        assert DATE_FORMATS[-2:] == ("dd/MM/yyyy", "d/M/yyyy")

    def test_duplicate_entry_kept(self):
        assert DATE_FORMATS[6] == DATE_FORMATS[7] == "M/d/yyyy h:mm"

    def test_is_immutable(self):
        assert isinstance(DATE_FORMATS, tuple)
        with pytest.raises(AttributeError):
            DATE_FORMATS.append("yyyy")

    def test_load_formats_defaults_to_packaged_file(self):
        assert load_formats() == DATE_FORMATS

    def test_default_file_metadata(self):
        format_file = load_format_file(DEFAULT_FORMAT_FILE)
        assert format_file.name == "default"
        assert format_file.description


# ---------------------------------------------------------------------------
# Custom files
# ---------------------------------------------------------------------------

class TestLoadFormats:
    """Tests for load_formats() / load_format_file() with tmp files."""

    def test_custom_file(self, tmp_path):
        f = tmp_path / "iso.yaml"
        f.write_text(
            "name: iso\nformats:\n  - \"yyyy-MM-dd HH:mm\"\n  - \"yyyy-MM-dd\"\n",
            encoding="utf-8",
        )
        assert load_formats(f) == ("yyyy-MM-dd HH:mm", "yyyy-MM-dd")

    def test_accepts_str_path(self, tmp_path):
        f = tmp_path / "iso.yaml"
        f.write_text("formats: [\"yyyy\"]\n", encoding="utf-8")
        assert load_formats(str(f)) == ("yyyy",)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Format file not found"):
            load_formats(tmp_path / "nope.yaml")

    def test_empty_file(self, tmp_path):
        f = tmp_path / "empty.yaml"
        f.write_text("", encoding="utf-8")
        with pytest.raises(FormatConfigError, match="empty"):
            load_formats(f)

    def test_top_level_list_rejected(self, tmp_path):
        f = tmp_path / "list.yaml"
        f.write_text("- \"yyyy\"\n", encoding="utf-8")
        with pytest.raises(FormatConfigError, match="mapping"):
            load_formats(f)

    def test_missing_formats_key(self, tmp_path):
        f = tmp_path / "nokey.yaml"
        f.write_text("name: broken\n", encoding="utf-8")
        with pytest.raises(FormatConfigError, match="formats"):
            load_formats(f)

    def test_empty_formats_list(self, tmp_path):
        f = tmp_path / "nolayouts.yaml"
        f.write_text("formats: []\n", encoding="utf-8")
        with pytest.raises(FormatConfigError):
            load_formats(f)

    def test_bad_layout_token(self, tmp_path):
        f = tmp_path / "bad.yaml"
        f.write_text("formats: [\"ddd/MM/yyyy\"]\n", encoding="utf-8")
        with pytest.raises(FormatConfigError, match="Unsupported token"):
            load_formats(f)


# ---------------------------------------------------------------------------
# FormatFile model
# ---------------------------------------------------------------------------

class TestFormatFile:
    """Tests for the FormatFile Pydantic model."""

    def test_defaults(self):
        model = FormatFile(formats=["dd/MM/yyyy"])
        assert model.name == "custom"
        assert model.description == ""

    def test_invalid_layout(self):
        with pytest.raises(ValidationError, match="no year"):
            FormatFile(formats=["dd/MM"])
