"""Loading song and book records from a JSON file."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from .models.record import BookRecord, SongRecord, optional_str

logger = logging.getLogger(__name__)


@dataclass
class LibrarySource:
    """The library section of a records file."""

    name: str
    books: list[BookRecord] = field(default_factory=list)


def _parse_entries(entries, record_cls, kind: str) -> list:
    if not isinstance(entries, list):
        logger.warning(f"Expected a list of {kind}s, got {type(entries).__name__}")
        return []

    records = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            logger.warning(f"Skipping {kind} #{index}: not an object")
            continue
        try:
            records.append(record_cls.from_dict(entry))
        except ValueError as e:
            logger.warning(f"Skipping {kind} #{index}: {e}")
    return records


def load_records(
    path: Path, default_library_name: str = "Library"
) -> tuple[list[SongRecord], LibrarySource | None]:
    """Read songs and an optional library from a records file.

    Expected layout::

        {
          "songs": [{"title": ..., "artist": ..., "album": ...}, ...],
          "library": {"name": ..., "books": [{"title": ..., "author": ...}]}
        }

    Raises:
        ValueError: If the file is not valid JSON or its top level is not
            an object.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object at the top of {path}")

    songs = _parse_entries(data.get("songs", []), SongRecord, "song")

    library = None
    library_data = data.get("library")
    if isinstance(library_data, dict):
        library = LibrarySource(
            name=optional_str(library_data, "name") or default_library_name,
            books=_parse_entries(library_data.get("books", []), BookRecord, "book"),
        )
    elif library_data is not None:
        logger.warning(f"Ignoring library section in {path}: not an object")

    logger.info(
        f"Loaded {len(songs)} songs"
        + (f" and {len(library.books)} books" if library else "")
        + f" from {path}"
    )
    return songs, library
