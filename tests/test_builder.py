"""Tests for recordkeeper/processors/builder.py."""

import sys
from datetime import date
from pathlib import Path

import pytest

# Add parent dir to path so recordkeeper is importable as a package
sys.path.insert(0, str(Path(__file__).parent.parent))

from recordkeeper.models.entities import Album, Artist, Song
from recordkeeper.models.library import Author, Genre
from recordkeeper.models.record import BookRecord, SongRecord
from recordkeeper.processors.builder import RecordBuilder
from recordkeeper.processors.consistency import find_inconsistencies


@pytest.fixture
def builder():
    """Builder with progress bars disabled."""
    return RecordBuilder(show_progress=False)


@pytest.fixture
def records():
    return [
        SongRecord("Lucky", artist="Radiohead", album="OK Computer", track_number=11),
        SongRecord("Airbag", artist="Radiohead", album="OK Computer", track_number=1),
        SongRecord("Idioteque", artist="radiohead", album="Kid A", genre="Electronic"),
        SongRecord("Roads", artist="Portishead/Beth Gibbons", album="Dummy",
                   publishing_date=date(1994, 8, 22)),
        SongRecord("Untitled"),
    ]


class TestGroup:
    """Tests for RecordBuilder.group()."""

    def test_artists_sorted_and_case_insensitive(self, builder, records):
        grouped = builder.group(records)
        assert list(grouped) == ["Portishead", "Radiohead", "Unknown Artist"]

    def test_albums_sorted(self, builder, records):
        grouped = builder.group(records)
        assert list(grouped["Radiohead"]) == ["Kid A", "OK Computer"]

    def test_tracks_sorted_by_number(self, builder, records):
        grouped = builder.group(records)
        titles = [r.title for r in grouped["Radiohead"]["OK Computer"]]
        assert titles == ["Airbag", "Lucky"]

    def test_unknown_album(self, builder, records):
        grouped = builder.group(records)
        assert list(grouped["Unknown Artist"]) == ["Unknown Album"]

    def test_empty(self, builder):
        assert builder.group([]) == {}


class TestBuildOneWay:
    """Tests for RecordBuilder.build_one_way()."""

    def test_structure(self, builder, records):
        artists = builder.build_one_way(records)
        radiohead = artists[1]

        assert radiohead.name == "Radiohead"
        assert [a.title for a in radiohead.albums] == ["Kid A", "OK Computer"]
        assert [s.title for s in radiohead.songs()] == ["Idioteque", "Airbag", "Lucky"]


class TestBuildTwoWay:
    """Tests for RecordBuilder.build_two_way()."""

    def test_back_references(self, builder, records):
        artists = builder.build_two_way(records)
        for artist in artists:
            for song in artist.songs:
                assert song.artist is artist

    def test_song_fields_carried(self, builder, records):
        artists = builder.build_two_way(records)
        portishead = artists[0]
        assert portishead.songs[0].publishing_date == date(1994, 8, 22)

    def test_consistent(self, builder, records):
        assert find_inconsistencies(builder.build_two_way(records)) == []


class TestBuildContainers:
    """Tests for RecordBuilder.build_containers()."""

    def test_one_container_per_album(self, builder, records):
        containers = builder.build_containers(records)
        pairs = [(c.artist.name, c.album.title) for c in containers]
        assert pairs == [
            ("Portishead", "Dummy"),
            ("Radiohead", "Kid A"),
            ("Radiohead", "OK Computer"),
            ("Unknown Artist", "Unknown Album"),
        ]

    def test_artist_shared_between_containers(self, builder, records):
        containers = builder.build_containers(records)
        assert containers[1].artist is containers[2].artist

    def test_songs(self, builder, records):
        containers = builder.build_containers(records)
        assert containers[2].artist == Artist("Radiohead")
        assert containers[2].album == Album("OK Computer")
        assert containers[2].songs == [Song("Airbag"), Song("Lucky")]


class TestBuildCatalog:
    """Tests for RecordBuilder.build_catalog()."""

    def test_authors_and_genres_interned(self, builder):
        catalog = builder.build_catalog("City Library", [
            BookRecord("Mort", author="Terry Pratchett", genre="Fantasy"),
            BookRecord("Small Gods", author="Terry Pratchett", genre="Fantasy"),
        ])
        first, second = catalog.books
        assert first.author is second.author
        assert first.genre is second.genre
        assert catalog.books_by(Author("Terry Pratchett")) == catalog.books
        assert catalog.genres() == [Genre("Fantasy")]

    def test_duplicates_skipped(self, builder, caplog):
        catalog = builder.build_catalog("City Library", [
            BookRecord("Mort", author="Terry Pratchett"),
            BookRecord("Mort", author="Terry Pratchett"),
        ])
        assert len(catalog.books) == 1
        assert "Skipping duplicate book" in caplog.text

    def test_missing_author(self, builder):
        catalog = builder.build_catalog("City Library", [BookRecord("Anonymous Poems")])
        assert catalog.books[0].author == Author("Unknown Author")
