"""Service layer over the edition cache."""

from edition_mirror.services.editions import DEFAULT_PAGE_SIZE, EditionQueries

__all__ = ["DEFAULT_PAGE_SIZE", "EditionQueries"]
