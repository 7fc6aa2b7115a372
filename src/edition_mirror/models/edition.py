"""Edition model — one dated PDF discovered in the Drive folder."""

from __future__ import annotations

import datetime

from pydantic import BaseModel, ConfigDict

_DOWNLOAD_URL = "https://drive.google.com/uc?export=download&id={file_id}"
_THUMBNAIL_URL = "https://drive.google.com/thumbnail?id={file_id}&sz=w{width}"

PREVIEW_WIDTH = 1200
THUMBNAIL_WIDTH = 300


class RemoteFile(BaseModel):
    """An ``{id, name}`` pair as returned by a Drive folder listing."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class Edition(BaseModel):
    """A single dated edition, identified by ``date``.

    ``display_date`` keeps the ``DD-MM-YYYY`` form of the filename so the
    original name can be rebuilt for downloads.
    """

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    display_date: str
    file_id: str
    pdf_url: str

    @classmethod
    def from_file(cls, file_id: str, edition_date: datetime.date) -> Edition:
        return cls(
            date=edition_date,
            display_date=f"{edition_date.day:02d}-{edition_date.month:02d}-{edition_date.year:04d}",
            file_id=file_id,
            pdf_url=_DOWNLOAD_URL.format(file_id=file_id),
        )

    @property
    def iso_date(self) -> str:
        return self.date.isoformat()

    @property
    def filename(self) -> str:
        return f"{self.display_date}.pdf"

    @property
    def preview_url(self) -> str:
        return _THUMBNAIL_URL.format(file_id=self.file_id, width=PREVIEW_WIDTH)

    @property
    def thumbnail_url(self) -> str:
        return _THUMBNAIL_URL.format(file_id=self.file_id, width=THUMBNAIL_WIDTH)
