"""Song records from audio file tags using TinyTag."""

import logging
import re
from pathlib import Path

from tinytag import TinyTag

from ..config import SUPPORTED_FORMATS
from ..models.record import SongRecord
from ..utils.identifiers import parse_publishing_date

logger = logging.getLogger(__name__)


def scan_directory(music_dir: Path) -> list[Path]:
    """Return all supported audio files under a directory, sorted."""
    audio_files = [
        path
        for path in music_dir.rglob("*")
        if path.is_file() and path.suffix.lower() in SUPPORTED_FORMATS
    ]
    return sorted(audio_files)


def _parse_number(value) -> int | None:
    """Parse a tag number that may be "3", "3/12" or an int."""
    if value is None:
        return None
    if isinstance(value, int):
        return value
    head = str(value).split("/")[0].strip()
    return int(head) if head.isdecimal() else None


class MetadataExtractor:
    """Builds SongRecords from audio tags, falling back to the file layout."""

    def __init__(self, music_dir: Path) -> None:
        self._music_dir = music_dir

    def extract(self, file_path: Path) -> SongRecord:
        """Read tags from an audio file."""
        try:
            tag = TinyTag.get(str(file_path))
            record = SongRecord(
                title=tag.title or file_path.stem,
                artist=tag.albumartist or tag.artist,
                album=tag.album,
                genre=tag.genre,
                publishing_date=parse_publishing_date(tag.year),
                track_number=_parse_number(tag.track),
            )
        except Exception as e:
            logger.warning(f"Could not read metadata from {file_path}: {e}")
            record = SongRecord(title=file_path.stem)

        return self._apply_fallbacks(record, file_path)

    def _apply_fallbacks(self, record: SongRecord, file_path: Path) -> SongRecord:
        """Fill gaps from the filename and the Artist/Album/Track layout."""
        if record.track_number is None:
            match = re.match(r"^(\d+)\s+(.*)$", file_path.stem)
            if match:
                record.track_number = int(match.group(1))
                if record.title == file_path.stem and match.group(2):
                    record.title = match.group(2)

        try:
            parts = file_path.relative_to(self._music_dir).parts
        except ValueError:
            return record

        if len(parts) >= 3:
            if record.artist is None:
                record.artist = parts[0]
            if record.album is None:
                record.album = parts[1]
        return record
