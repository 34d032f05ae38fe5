"""Mediator entity relating an Artist, an Album and its Songs."""

from dataclasses import dataclass, field

from .entities import Album, Artist, Song


@dataclass
class RecordContainer:
    """Holds the relationship between one artist, one album and its songs.

    Artist, Album and Song stay independent of one another. The container is
    the only place where the relationship is recorded.
    """

    artist: Artist
    album: Album
    songs: list[Song] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.songs = list(self.songs)

    @property
    def track_count(self) -> int:
        return len(self.songs)

    def add_song(self, song: Song) -> None:
        self.songs.append(song)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dictionary."""
        return {
            "artist": self.artist.name,
            "album": self.album.title,
            "songs": [song.title for song in self.songs],
        }
