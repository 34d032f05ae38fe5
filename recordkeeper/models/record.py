"""Flat input records, before they are linked into an object graph."""

from dataclasses import dataclass
from datetime import date
from typing import Any

from ..utils.identifiers import parse_publishing_date


def _require_title(data: dict[str, Any]) -> str:
    title = data.get("title")
    if not isinstance(title, str) or not title.strip():
        raise ValueError(f"Record is missing a title: {data!r}")
    return title.strip()


def optional_str(data: dict[str, Any], key: str) -> str | None:
    """Read a field as a stripped string, treating blanks as missing."""
    value = data.get(key)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


@dataclass
class SongRecord:
    """One song as read from a records file or from audio tags."""

    title: str
    artist: str | None = None
    album: str | None = None
    genre: str | None = None
    publishing_date: date | None = None
    track_number: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SongRecord":
        """Build a record from a mapping, raising ValueError without a title."""
        track_number = data.get("track_number")
        if isinstance(track_number, str):
            track_number = int(track_number) if track_number.isdecimal() else None
        elif not isinstance(track_number, int) or isinstance(track_number, bool):
            track_number = None

        return cls(
            title=_require_title(data),
            artist=optional_str(data, "artist"),
            album=optional_str(data, "album"),
            genre=optional_str(data, "genre"),
            publishing_date=parse_publishing_date(data.get("publishing_date")),
            track_number=track_number,
        )


@dataclass
class BookRecord:
    """One book entry of a library listing."""

    title: str
    author: str | None = None
    genre: str | None = None
    publishing_date: date | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BookRecord":
        """Build a record from a mapping, raising ValueError without a title."""
        return cls(
            title=_require_title(data),
            author=optional_str(data, "author"),
            genre=optional_str(data, "genre"),
            publishing_date=parse_publishing_date(data.get("publishing_date")),
        )
