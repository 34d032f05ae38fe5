"""Consistency checks for two-way artist/song graphs."""

import logging

from ..models import two_way

logger = logging.getLogger(__name__)


def find_inconsistencies(artists: list[two_way.Artist]) -> list[str]:
    """Report places where the two sides of the association disagree.

    Returns a list of human-readable problems; an empty list means every
    song listed by an artist points back at that artist and no song is
    listed twice, under the same artist or under different ones.
    """
    problems = []
    owners: dict[int, two_way.Artist] = {}

    for artist in artists:
        listed: set[int] = set()
        for song in artist.songs:
            if id(song) in listed:
                problems.append(f"{song.title!r} is listed twice under {artist.name!r}")
                continue
            listed.add(id(song))

            previous = owners.setdefault(id(song), artist)
            if previous is not artist:
                problems.append(
                    f"{song.title!r} is listed under both {previous.name!r} "
                    f"and {artist.name!r}"
                )

            if song.artist is None:
                problems.append(
                    f"{song.title!r} is listed under {artist.name!r} "
                    f"but has no artist"
                )
            elif song.artist is not artist:
                problems.append(
                    f"{song.title!r} is listed under {artist.name!r} "
                    f"but points at {song.artist.name!r}"
                )

    for problem in problems:
        logger.debug(problem)
    return problems
