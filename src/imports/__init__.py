"""Record import module for bulk task and risk uploads.

This module provides:
- parse_records: JSON/CSV text -> row dicts
- normalize_import_date: lenient date reading via dateparser
- import_tasks / import_risks: row validation into model records
"""

from src.imports.date_normalizer import normalize_import_date
from src.imports.importer import ImportResult, import_risks, import_tasks
from src.imports.parsers import ImportFormat, ImportFormatError, parse_records

__all__ = [
    "ImportFormat",
    "ImportFormatError",
    "ImportResult",
    "import_risks",
    "import_tasks",
    "normalize_import_date",
    "parse_records",
]
