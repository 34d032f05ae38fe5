"""Independent music entities with no references to one another."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Song:
    title: str


@dataclass(frozen=True)
class Album:
    title: str


@dataclass(frozen=True)
class Artist:
    name: str
