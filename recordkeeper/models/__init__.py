"""Data models for the three relationship designs and the library catalog."""

from . import one_way, two_way
from .container import RecordContainer
from .entities import Album, Artist, Song
from .library import Author, Book, Catalog, Genre
from .record import BookRecord, SongRecord

__all__ = [
    "one_way",
    "two_way",
    "RecordContainer",
    "Album",
    "Artist",
    "Song",
    "Author",
    "Book",
    "Catalog",
    "Genre",
    "BookRecord",
    "SongRecord",
]
