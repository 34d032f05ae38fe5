"""Utility modules for names and dates."""

from .identifiers import (
    get_artist_grouping_key,
    normalize_artist_name,
    parse_publishing_date,
)

__all__ = [
    "get_artist_grouping_key",
    "normalize_artist_name",
    "parse_publishing_date",
]
