"""Name normalization and date parsing helpers."""

import re
from datetime import date

_DATE_PATTERN = re.compile(r"^(\d{4})(?:-(\d{1,2}))?(?:-(\d{1,2}))?$")


def parse_publishing_date(value: str | int | date | None) -> date | None:
    """Parse a publishing date.

    Partial dates are padded to the first day of the period:
    "1999" -> 1999-01-01, "1999-06" -> 1999-06-01.
    Anything unparseable yields None.
    """
    if value is None:
        return None

    if isinstance(value, date):
        return value

    if isinstance(value, int):
        return date(value, 1, 1) if 1 <= value <= 9999 else None

    if not isinstance(value, str):
        return None

    match = _DATE_PATTERN.match(value.strip())
    if not match:
        return None

    year, month, day = match.groups()
    try:
        return date(int(year), int(month or 1), int(day or 1))
    except ValueError:
        return None


def normalize_artist_name(name: str | None) -> str | None:
    """Normalize artist name by extracting first artist from multi-artist strings.

    Splits by "/" and returns the first artist, stripped of whitespace.
    Example: "Justin Timberlake/50 Cent" -> "Justin Timberlake"
    """
    if name is None:
        return None
    if not name:
        return name
    if "/" in name:
        name = name.split("/")[0]
    return name.strip()


def get_artist_grouping_key(name: str) -> str:
    """Get case-insensitive key for artist grouping.

    Example: "Afrojack" and "afrojack" -> "afrojack"
    """
    normalized = normalize_artist_name(name)
    return normalized.lower() if normalized else ""
