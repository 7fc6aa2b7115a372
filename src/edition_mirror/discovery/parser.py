"""Filename and date parsing for discovered editions.

Editions are named ``DD-MM-YYYY.pdf``. The filename is the only source of an
edition's date; the file's creation time is ignored.
"""

from __future__ import annotations

import datetime
import re

from edition_mirror.models.edition import Edition, RemoteFile

_FILENAME_RE = re.compile(r"(\d{2})-(\d{2})-(\d{4})\.pdf", re.ASCII)
_ISO_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)
_DISPLAY_RE = re.compile(r"(\d{2})-(\d{2})-(\d{4})", re.ASCII)


def _make_date(year: str, month: str, day: str) -> datetime.date | None:
    try:
        return datetime.date(int(year), int(month), int(day))
    except ValueError:
        return None


def parse_edition(file: RemoteFile) -> Edition | None:
    """Build an Edition from a Drive file, or return None if the name doesn't qualify.

    Foreign files (``notes.txt``) and impossible dates (``32-01-2026.pdf``)
    both return None.
    """
    match = _FILENAME_RE.fullmatch(file.name)
    if not match:
        return None
    day, month, year = match.groups()
    edition_date = _make_date(year, month, day)
    if edition_date is None:
        return None
    return Edition.from_file(file.id, edition_date)


def normalize_date(value: str | datetime.date) -> datetime.date | None:
    """Parse ``YYYY-MM-DD`` or ``DD-MM-YYYY`` into a date; None for anything else."""
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value

    text = value.strip()
    if match := _ISO_RE.fullmatch(text):
        year, month, day = match.groups()
        return _make_date(year, month, day)
    if match := _DISPLAY_RE.fullmatch(text):
        day, month, year = match.groups()
        return _make_date(year, month, day)
    return None
