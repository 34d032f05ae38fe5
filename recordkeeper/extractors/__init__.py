"""Extractor modules for audio file metadata."""

from .metadata import MetadataExtractor, scan_directory

__all__ = ["MetadataExtractor", "scan_directory"]
