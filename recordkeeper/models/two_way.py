"""Artist and Song linked by a two-way association.

Each Song points at its Artist and each Artist lists its Songs. Both sides
must change together, so every mutation goes through Artist.add_song and
Artist.remove_song. The Song.artist setter delegates to them.
"""

from __future__ import annotations

from datetime import date


class Song:
    """A song that knows its artist."""

    def __init__(
        self,
        title: str,
        genre: str | None = None,
        publishing_date: date | None = None,
    ) -> None:
        self.title = title
        self.genre = genre
        self.publishing_date = publishing_date
        self._artist: Artist | None = None

    @property
    def artist(self) -> Artist | None:
        return self._artist

    @artist.setter
    def artist(self, artist: Artist | None) -> None:
        if artist is self._artist:
            return
        if artist is None:
            self._artist.remove_song(self)
        else:
            artist.add_song(self)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dictionary.

        The artist is written by name; writing the object would recurse
        back into this song.
        """
        return {
            "title": self.title,
            "genre": self.genre,
            "publishing_date": (
                self.publishing_date.isoformat() if self.publishing_date else None
            ),
            "artist": self._artist.name if self._artist else None,
        }

    def __repr__(self) -> str:
        artist = self._artist.name if self._artist else None
        return f"Song(title={self.title!r}, artist={artist!r})"


class Artist:
    """An artist that lists its songs."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._songs: list[Song] = []

    @property
    def songs(self) -> tuple[Song, ...]:
        return tuple(self._songs)

    def add_song(self, song: Song) -> None:
        """Attach a song, detaching it from its previous artist first."""
        if song._artist is self:
            return
        if song._artist is not None:
            song._artist.remove_song(song)
        self._songs.append(song)
        song._artist = self

    def remove_song(self, song: Song) -> None:
        """Detach a song from this artist.

        Raises:
            ValueError: If the song is not one of this artist's songs.
        """
        if song._artist is not self or song not in self._songs:
            raise ValueError(f"{song.title!r} is not a song of {self.name!r}")
        self._songs = [listed for listed in self._songs if listed is not song]
        song._artist = None

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dictionary."""
        return {
            "name": self.name,
            "songs": [song.to_dict() for song in self._songs],
        }

    def __repr__(self) -> str:
        return f"Artist(name={self.name!r}, songs={len(self._songs)})"
