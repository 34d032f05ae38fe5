"""Configuration management for recordkeeper."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


# Audio formats readable by the metadata extractor
SUPPORTED_FORMATS = {".mp3", ".m4a", ".flac", ".wav", ".aac"}

DEFAULT_OUTPUT = "relationships.json"


@dataclass
class PathConfig:
    """File path configuration."""

    output_file: Path
    music_dir: Path | None = None

    def validate(self) -> None:
        """Validate that configured paths exist."""
        if self.music_dir is not None and not self.music_dir.is_dir():
            raise ValueError(f"Music directory not found: {self.music_dir}")


@dataclass
class Config:
    """Main configuration container."""

    paths: PathConfig
    library_name: str = "Library"
    max_workers: int = 4

    @classmethod
    def from_environment(cls, env_path: Path | None = None) -> "Config":
        """Load configuration from environment variables."""
        if env_path:
            load_dotenv(env_path)
        else:
            load_dotenv()

        workers_value = os.getenv("RECORDKEEPER_WORKERS", "4")
        try:
            max_workers = int(workers_value)
        except ValueError:
            raise ValueError(
                f"RECORDKEEPER_WORKERS must be an integer, got {workers_value!r}"
            ) from None

        music_dir = os.getenv("RECORDKEEPER_MUSIC_DIR")

        config = cls(
            paths=PathConfig(
                output_file=Path(os.getenv("RECORDKEEPER_OUTPUT", DEFAULT_OUTPUT)),
                music_dir=Path(music_dir) if music_dir else None,
            ),
            library_name=os.getenv("RECORDKEEPER_LIBRARY_NAME", "Library"),
            max_workers=max_workers,
        )
        config._validate_workers()
        return config

    def validate(self) -> None:
        """Validate the configuration."""
        self.paths.validate()
        self._validate_workers()

    def _validate_workers(self) -> None:
        if self.max_workers < 1:
            raise ValueError(f"Worker count must be at least 1, got {self.max_workers}")


def configure_logging(verbose: bool = False) -> None:
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
