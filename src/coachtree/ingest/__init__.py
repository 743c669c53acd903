"""Input adapters that turn coaching CSV text into rows."""

from .rows import REQUIRED_HEADERS, load_rows_csv, parse_rows
from .sample import SAMPLE_CSV, sample_rows

__all__ = [
    "REQUIRED_HEADERS",
    "load_rows_csv",
    "parse_rows",
    "SAMPLE_CSV",
    "sample_rows",
]
