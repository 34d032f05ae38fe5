"""Builds each relationship design from flat song and book records."""

from __future__ import annotations

import logging
from collections import defaultdict

from tqdm import tqdm

from ..models import one_way, two_way
from ..models.container import RecordContainer
from ..models.entities import Album, Artist, Song
from ..models.library import Author, Book, Catalog, Genre
from ..models.record import BookRecord, SongRecord
from ..utils.identifiers import get_artist_grouping_key, normalize_artist_name

logger = logging.getLogger(__name__)

UNKNOWN_ARTIST = "Unknown Artist"
UNKNOWN_ALBUM = "Unknown Album"


def _track_sort_key(record: SongRecord) -> tuple[int, str]:
    return (record.track_number or 999, record.title)


class RecordBuilder:
    """Groups song records by artist and album and links them into objects."""

    def __init__(self, show_progress: bool = True) -> None:
        self._show_progress = show_progress

    def group(self, records: list[SongRecord]) -> dict[str, dict[str, list[SongRecord]]]:
        """Group records as artist name -> album title -> sorted records.

        Artists are matched case-insensitively; the first spelling seen is
        kept for display.
        """
        display_names: dict[str, str] = {}
        grouped: dict[str, dict[str, list[SongRecord]]] = defaultdict(
            lambda: defaultdict(list)
        )

        for record in records:
            artist_name = normalize_artist_name(record.artist) or UNKNOWN_ARTIST
            key = get_artist_grouping_key(artist_name)
            display = display_names.setdefault(key, artist_name)
            album = record.album or UNKNOWN_ALBUM
            grouped[display][album].append(record)

        result = {}
        for artist_name in sorted(grouped):
            albums = grouped[artist_name]
            result[artist_name] = {
                title: sorted(albums[title], key=_track_sort_key)
                for title in sorted(albums)
            }
        return result

    def build_one_way(self, records: list[SongRecord]) -> list[one_way.Artist]:
        """Artists own albums and albums own songs; no back-references."""
        artists = []
        for artist_name, albums in self._iter_artists(records, "Building one-way"):
            artist = one_way.Artist(name=artist_name)
            for album_title, album_records in albums.items():
                album = one_way.Album(title=album_title)
                for record in album_records:
                    album.add_song(one_way.Song(title=record.title))
                artist.add_album(album)
            artists.append(artist)
        return artists

    def build_two_way(self, records: list[SongRecord]) -> list[two_way.Artist]:
        """One Artist per name, songs attached through Artist.add_song."""
        artists = []
        for artist_name, albums in self._iter_artists(records, "Building two-way"):
            artist = two_way.Artist(artist_name)
            for album_records in albums.values():
                for record in album_records:
                    artist.add_song(
                        two_way.Song(
                            record.title,
                            genre=record.genre,
                            publishing_date=record.publishing_date,
                        )
                    )
            artists.append(artist)
        return artists

    def build_containers(self, records: list[SongRecord]) -> list[RecordContainer]:
        """One container per artist and album, sharing the Artist entity."""
        containers = []
        for artist_name, albums in self._iter_artists(records, "Building containers"):
            artist = Artist(name=artist_name)
            for album_title, album_records in albums.items():
                containers.append(
                    RecordContainer(
                        artist=artist,
                        album=Album(title=album_title),
                        songs=[Song(title=record.title) for record in album_records],
                    )
                )
        return containers

    def build_catalog(self, library_name: str, records: list[BookRecord]) -> Catalog:
        """Build a catalog, interning authors and genres and skipping duplicates."""
        authors: dict[str, Author] = {}
        genres: dict[str, Genre] = {}
        catalog = Catalog(library_name=library_name)

        for record in records:
            author_name = record.author or "Unknown Author"
            author = authors.setdefault(author_name, Author(author_name))
            genre = None
            if record.genre:
                genre = genres.setdefault(record.genre, Genre(record.genre))

            book = Book(
                title=record.title,
                author=author,
                genre=genre,
                publishing_date=record.publishing_date,
            )
            try:
                catalog.add_book(book)
            except ValueError as e:
                logger.warning(f"Skipping duplicate book: {e}")

        return catalog

    def _iter_artists(self, records: list[SongRecord], desc: str):
        grouped = self.group(records)
        return tqdm(
            grouped.items(),
            total=len(grouped),
            desc=desc,
            unit="artist",
            disable=not self._show_progress,
        )
