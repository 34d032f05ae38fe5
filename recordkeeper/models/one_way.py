"""Artist, Album and Song linked by one-way references.

Ownership points downward only: an Artist lists its Albums and an Album
lists its Songs. Nothing points back up, so every relationship is recorded
on exactly one side and there is nothing to keep in sync.
"""

from dataclasses import dataclass, field


@dataclass
class Song:
    """A song. It does not know which album or artist it belongs to."""

    title: str

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dictionary."""
        return {"title": self.title}


@dataclass
class Album:
    """Album with songs."""

    title: str
    songs: list[Song] = field(default_factory=list)

    def add_song(self, song: Song) -> None:
        self.songs.append(song)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dictionary."""
        return {
            "title": self.title,
            "songs": [song.to_dict() for song in self.songs],
        }


@dataclass
class Artist:
    """Artist with albums."""

    name: str
    albums: list[Album] = field(default_factory=list)

    def add_album(self, album: Album) -> None:
        self.albums.append(album)

    def songs(self) -> list[Song]:
        """All songs across this artist's albums, in album order."""
        return [song for album in self.albums for song in album.songs]

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dictionary."""
        return {
            "name": self.name,
            "albums": [album.to_dict() for album in self.albums],
        }
