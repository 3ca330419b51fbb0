"""Readers turning import file text into row dicts."""

import csv
import io
import json
from enum import Enum


class ImportFormat(str, Enum):
    """Supported import file formats."""

    JSON = "json"
    CSV = "csv"


class ImportFormatError(ValueError):
    """Raised when import text cannot be read as a list of records."""


def _decode_cell(value: str) -> object:
    """Decode CSV cells that hold a JSON array or object."""
    stripped = value.strip()
    if (stripped.startswith("[") and stripped.endswith("]")) or (
        stripped.startswith("{") and stripped.endswith("}")
    ):
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            return stripped
    return stripped


def parse_records(text: str, fmt: ImportFormat | str) -> list[dict]:
    """Parse import text into a list of row dicts.

    JSON input must be an array of objects. CSV input uses its first row
    as headers; cells are trimmed and cells holding JSON arrays/objects
    (e.g. ``dateRanges``) are decoded.

    Args:
        text: Raw file contents
        fmt: "json" or "csv"

    Returns:
        One dict per record

    Raises:
        ImportFormatError: If the format is unsupported or the text is not
            a list of records
    """
    try:
        fmt = ImportFormat(fmt)
    except ValueError as e:
        raise ImportFormatError(f"Unsupported import format: {fmt}") from e

    if fmt == ImportFormat.JSON:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ImportFormatError(f"Invalid JSON: {e.msg}") from e
        if not isinstance(data, list) or not all(isinstance(row, dict) for row in data):
            raise ImportFormatError("Invalid data format. Expected an array of records.")
        return data

    reader = csv.DictReader(io.StringIO(text.strip()))
    if reader.fieldnames is None:
        return []

    rows: list[dict] = []
    for row in reader:
        if not any((value or "").strip() for value in row.values() if isinstance(value, str)):
            continue
        rows.append(
            {
                key.strip(): _decode_cell(value or "")
                for key, value in row.items()
                if key is not None
            }
        )
    return rows
