"""Discovery helpers — filename parsing and retention."""

from edition_mirror.discovery.parser import normalize_date, parse_edition
from edition_mirror.discovery.retention import (
    DeletionReport,
    RetentionSplit,
    delete_excess,
    sort_editions,
    split_retained,
)

__all__ = [
    "DeletionReport",
    "RetentionSplit",
    "delete_excess",
    "normalize_date",
    "parse_edition",
    "sort_editions",
    "split_retained",
]
