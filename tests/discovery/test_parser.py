"""Tests for edition filename and date parsing."""

from datetime import date, datetime

import pytest

from edition_mirror.discovery.parser import normalize_date, parse_edition
from edition_mirror.models.edition import RemoteFile


class TestParseEdition:
    """Test parse_edition."""

    def test_parses_valid_filename(self) -> None:
        """Verify a DD-MM-YYYY.pdf name becomes an edition keyed by date."""
        edition = parse_edition(RemoteFile(id="abc", name="05-02-2026.pdf"))

        assert edition is not None
        assert edition.date == date(2026, 2, 5)
        assert edition.display_date == "05-02-2026"
        assert edition.iso_date == "2026-02-05"
        assert edition.file_id == "abc"
        assert edition.pdf_url == "https://drive.google.com/uc?export=download&id=abc"

    @pytest.mark.parametrize(
        "name",
        ["01-01-2026.pdf", "29-02-2024.pdf", "31-12-1999.pdf", "15-06-2030.pdf"],
    )
    def test_display_date_round_trips_to_filename(self, name: str) -> None:
        """Verify every valid name round-trips through display_date."""
        edition = parse_edition(RemoteFile(id="x", name=name))

        assert edition is not None
        assert edition.filename == name

    @pytest.mark.parametrize(
        "name",
        [
            "notes.txt",
            "32-01-2026.pdf",
            "29-02-2025.pdf",
            "00-01-2026.pdf",
            "01-13-2026.pdf",
            "1-1-2026.pdf",
            "2026-01-01.pdf",
            "01-01-2026.PDF",
            "01-01-2026.pdf.bak",
            "copy of 01-01-2026.pdf",
            "01-01-2026.pdf\n",
            "",
        ],
    )
    def test_rejects_non_matching_names(self, name: str) -> None:
        """Verify malformed or foreign names are dropped without raising."""
        assert parse_edition(RemoteFile(id="x", name=name)) is None


class TestNormalizeDate:
    """Test normalize_date."""

    def test_iso_and_display_forms_agree(self) -> None:
        """Verify both accepted representations map to the same date."""
        assert normalize_date("2026-02-05") == normalize_date("05-02-2026") == date(2026, 2, 5)

    def test_passes_dates_through(self) -> None:
        """Verify date objects are returned unchanged."""
        assert normalize_date(date(2026, 1, 7)) == date(2026, 1, 7)

    def test_datetime_is_reduced_to_date(self) -> None:
        """Verify datetimes compare by calendar date."""
        assert normalize_date(datetime(2026, 1, 7, 13, 0)) == date(2026, 1, 7)

    def test_strips_whitespace(self) -> None:
        """Verify surrounding whitespace is ignored."""
        assert normalize_date(" 2026-01-07 ") == date(2026, 1, 7)

    @pytest.mark.parametrize(
        "value",
        ["2026/02/05", "05/02/2026", "2026-2-5", "20260205", "2026-02-30", "31-04-2026", "today", ""],
    )
    def test_rejects_other_formats(self, value: str) -> None:
        """Verify anything but the two strict formats is rejected."""
        assert normalize_date(value) is None
