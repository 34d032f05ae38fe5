"""Processor modules for building and checking relationship graphs."""

from .builder import RecordBuilder
from .consistency import find_inconsistencies

__all__ = ["RecordBuilder", "find_inconsistencies"]
