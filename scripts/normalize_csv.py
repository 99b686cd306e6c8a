"""
Demo script: normalize a date column of a CSV file.

Usage:
    uv run python scripts/normalize_csv.py INPUT.csv COLUMN [OUTPUT.csv]
    uv run python scripts/normalize_csv.py INPUT.csv COLUMN --formats my_formats.yaml

Every cell of COLUMN is parsed against the ordered layout list (the
packaged default, or the YAML file given with --formats) and rewritten as
ISO-8601.  Cells that match no layout are left empty.  OUTPUT defaults to
INPUT with a ``.normalized.csv`` suffix.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pandas as pd

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("normalize_csv")


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------

def _pop_option(args: list[str], flag: str) -> str | None:
    """Remove ``flag VALUE`` from *args* and return VALUE."""
    if flag not in args:
        return None
    idx = args.index(flag)
    if idx + 1 >= len(args):
        raise SystemExit(f"{flag} needs a value")
    value = args[idx + 1]
    del args[idx:idx + 2]
    return value


def normalize_csv(
    input_path: Path,
    column: str,
    output_path: Path,
    formats_path: str | None = None,
) -> int:
    """Rewrite *column* of *input_path* as ISO dates; return unparsed count."""
    from cl_tools import DATE_FORMATS, load_formats
    from cl_tools.transforms import parse_date_column

    formats = load_formats(formats_path) if formats_path else DATE_FORMATS
    df = pd.read_csv(input_path, dtype=str, keep_default_na=False)

    result = parse_date_column(df, column, formats=formats)
    result.df.to_csv(output_path, index=False, date_format="%Y-%m-%dT%H:%M:%S")

    log.info("  parsed   : %d", result.parsed)
    log.info("  unparsed : %d", result.unparsed)
    log.info("  written  : %s", output_path)
    return result.unparsed


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> None:
    args = sys.argv[1:]
    formats_path = _pop_option(args, "--formats")
    if len(args) not in (2, 3):
        raise SystemExit(__doc__)

    input_path = Path(args[0])
    column = args[1]
    if len(args) == 3:
        output_path = Path(args[2])
    else:
        output_path = input_path.with_suffix(".normalized.csv")

    if not input_path.exists():
        log.error("Input file not found: %s", input_path)
        raise SystemExit(1)

    log.info("=" * 70)
    log.info("Normalizing column '%s' of %s", column, input_path)
    log.info("=" * 70)

    normalize_csv(input_path, column, output_path, formats_path)
    log.info("Done.")


if __name__ == "__main__":
    main()
