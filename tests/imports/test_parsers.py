"""Tests for import file readers."""

import pytest

from src.imports import ImportFormat, ImportFormatError, parse_records


class TestParseJson:
    """Tests for JSON import text."""

    def test_array_of_objects(self):
        """A JSON array of objects becomes row dicts."""
        rows = parse_records('[{"title": "Dig"}, {"title": "Pour"}]', ImportFormat.JSON)
        assert [row["title"] for row in rows] == ["Dig", "Pour"]

    def test_format_given_as_string(self):
        """Formats can be named by their value."""
        assert parse_records("[]", "json") == []

    def test_object_rejected(self):
        """A single object is not a list of records."""
        with pytest.raises(ImportFormatError, match="Expected an array"):
            parse_records('{"title": "Dig"}', ImportFormat.JSON)

    def test_non_object_items_rejected(self):
        """Every item must be an object."""
        with pytest.raises(ImportFormatError):
            parse_records('[{"title": "Dig"}, 3]', ImportFormat.JSON)

    def test_malformed_json(self):
        """Malformed text raises ImportFormatError."""
        with pytest.raises(ImportFormatError, match="Invalid JSON"):
            parse_records("[{", ImportFormat.JSON)


class TestParseCsv:
    """Tests for CSV import text."""

    def test_header_row(self):
        """The first row names the fields and cells are trimmed."""
        text = "title,status\n Dig , Not Started\nPour,Completed\n"

        rows = parse_records(text, ImportFormat.CSV)

        assert rows == [
            {"title": "Dig", "status": "Not Started"},
            {"title": "Pour", "status": "Completed"},
        ]

    def test_blank_rows_skipped(self):
        """Rows with no content are dropped."""
        text = "title,status\nDig,Completed\n,\nPour,Completed\n"

        rows = parse_records(text, ImportFormat.CSV)

        assert [row["title"] for row in rows] == ["Dig", "Pour"]

    def test_json_cells_decoded(self):
        """Cells holding JSON arrays become lists."""
        text = 'name,associatedActivities\nRain,"[""Survey"", ""Construction""]"\n'

        rows = parse_records(text, ImportFormat.CSV)

        assert rows[0]["associatedActivities"] == ["Survey", "Construction"]

    def test_empty_text(self):
        """Empty text has no rows."""
        assert parse_records("", ImportFormat.CSV) == []


class TestUnsupportedFormat:
    """Tests for unknown formats."""

    def test_raises(self):
        """Unknown formats raise ImportFormatError."""
        with pytest.raises(ImportFormatError, match="Unsupported import format"):
            parse_records("", "xlsx")
