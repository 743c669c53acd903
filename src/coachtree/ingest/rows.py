"""Helpers to load coaching assignment CSVs into rows."""

from __future__ import annotations

import csv
import logging
from io import StringIO
from pathlib import Path
from typing import Dict, List, Mapping

from pydantic import ValidationError

from coachtree.errors import MalformedRowError
from coachtree.models import Row


logger = logging.getLogger(__name__)

REQUIRED_HEADERS = ("Season", "head_coach", "coordinator", "role", "team", "wins", "losses", "ties")

_HEADER_FIELDS: Dict[str, str] = {
    "Season": "season",
    "head_coach": "head_coach",
    "coordinator": "coordinator",
    "role": "role",
    "team": "team",
    "wins": "wins",
    "losses": "losses",
    "ties": "ties",
}


def _to_row(values: Mapping[str, str], line_no: int) -> Row:
    data = {field: values[header] for header, field in _HEADER_FIELDS.items()}
    empty = [header for header, field in _HEADER_FIELDS.items() if not data[field]]
    if empty:
        raise MalformedRowError(f"line {line_no}: missing value for {', '.join(empty)}")
    try:
        return Row.model_validate(data)
    except ValidationError as exc:
        problems = "; ".join(
            f"{err['loc'][0]}: {err['msg']}" for err in exc.errors() if err.get("loc")
        )
        raise MalformedRowError(f"line {line_no}: {problems}") from exc


def parse_rows(text: str) -> List[Row]:
    """Parse CSV ``text`` with a header line into rows.

    Lines whose field count does not match the header are skipped. Missing
    headers, empty required values or non-numeric counts raise
    :class:`MalformedRowError`.
    """

    reader = csv.reader(StringIO(text.strip()))
    header = next(reader, None)
    if not header:
        return []

    headers = [column.strip() for column in header]
    missing = [column for column in REQUIRED_HEADERS if column not in headers]
    if missing:
        raise MalformedRowError(f"Missing required headers: {', '.join(missing)}")

    rows: List[Row] = []
    skipped = 0
    for line_no, values in enumerate(reader, start=2):
        if not values:
            continue
        if len(values) != len(headers):
            logger.warning(
                "Skipping line %d: expected %d fields, got %d", line_no, len(headers), len(values)
            )
            skipped += 1
            continue
        record = {column: value.strip() for column, value in zip(headers, values)}
        rows.append(_to_row(record, line_no))

    logger.debug("Parsed %d rows (%d skipped)", len(rows), skipped)
    return rows


def load_rows_csv(path: Path) -> List[Row]:
    return parse_rows(path.read_text(encoding="utf-8-sig"))
