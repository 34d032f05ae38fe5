#!/usr/bin/env python3
"""
Relationship Design Explorer

Reads song and book records, builds the one-way, two-way and container
designs from them, optionally checks the two-way graph for divergence,
and writes a JSON snapshot of every design.
"""

import argparse
import json
import logging
import sys
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from tqdm import tqdm

from .config import Config, configure_logging
from .extractors.metadata import MetadataExtractor, scan_directory
from .models.record import SongRecord
from .processors.builder import RecordBuilder
from .processors.consistency import find_inconsistencies
from .records import load_records

logger = logging.getLogger(__name__)

DESIGNS = ("one-way", "two-way", "container")


class RelationshipExplorer:
    """Orchestrates loading records and building each design."""

    def __init__(self, config: Config, show_progress: bool = True) -> None:
        self._config = config
        self._show_progress = show_progress
        self._builder = RecordBuilder(show_progress=show_progress)

    def run(
        self,
        records_file: Path | None = None,
        designs: tuple[str, ...] = DESIGNS,
        check: bool = False,
    ) -> int:
        """Run the workflow and return a process exit code."""
        songs: list[SongRecord] = []
        library = None

        if records_file is not None:
            songs, library = load_records(records_file, self._config.library_name)

        if self._config.paths.music_dir is not None:
            songs.extend(self.scan_music_dir(self._config.paths.music_dir))

        if not songs and library is None:
            print("No records found.")
            return 0

        snapshot: dict = {}
        summary: list[str] = []

        if "one-way" in designs:
            artists = self._builder.build_one_way(songs)
            snapshot["one_way"] = [artist.to_dict() for artist in artists]
            album_count = sum(len(artist.albums) for artist in artists)
            summary.append(f"  One-way: {len(artists)} artists, {album_count} albums")

        two_way_artists = None
        if "two-way" in designs or check:
            two_way_artists = self._builder.build_two_way(songs)
        if "two-way" in designs:
            snapshot["two_way"] = [artist.to_dict() for artist in two_way_artists]
            song_count = sum(len(artist.songs) for artist in two_way_artists)
            summary.append(f"  Two-way: {len(two_way_artists)} artists, {song_count} songs")

        if "container" in designs:
            containers = self._builder.build_containers(songs)
            snapshot["containers"] = [container.to_dict() for container in containers]
            summary.append(f"  Containers: {len(containers)}")

        if library is not None:
            catalog = self._builder.build_catalog(library.name, library.books)
            snapshot["catalog"] = catalog.to_dict()
            summary.append(
                f"  Catalog '{catalog.library_name}': {len(catalog.books)} books, "
                f"{len(catalog.authors())} authors"
            )

        output_file = self._config.paths.output_file
        self._write_snapshot(snapshot, output_file)

        print(f"\nComplete!")
        print(f"  Songs: {len(songs)}")
        for line in summary:
            print(line)
        print(f"  Snapshot saved to: {output_file}")

        if check:
            problems = find_inconsistencies(two_way_artists)
            if problems:
                print(f"\nFound {len(problems)} inconsistencies:")
                for problem in problems:
                    print(f"  {problem}")
                return 1
            print("\nTwo-way graph is consistent.")

        return 0

    def scan_music_dir(self, music_dir: Path) -> list[SongRecord]:
        """Extract song records from every audio file under a directory."""
        audio_files = scan_directory(music_dir)
        logger.info(f"Found {len(audio_files)} audio files in {music_dir}")
        if not audio_files:
            return []

        extractor = MetadataExtractor(music_dir)
        records = []
        with ThreadPoolExecutor(max_workers=self._config.max_workers) as executor:
            futures = {executor.submit(extractor.extract, f): f for f in audio_files}
            for future in tqdm(
                as_completed(futures),
                total=len(audio_files),
                desc="Reading tags",
                unit="file",
                disable=not self._show_progress,
            ):
                file_path = futures[future]
                try:
                    records.append(future.result())
                except Exception as e:
                    logger.error(f"Error reading {file_path.name}: {e}")

        # as_completed yields in finish order
        records.sort(key=lambda r: (r.artist or "", r.album or "", r.track_number or 999, r.title))
        return records

    def _write_snapshot(self, snapshot: dict, output_file: Path) -> None:
        try:
            json_str = json.dumps(snapshot, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.error(f"Failed to serialize snapshot to JSON: {e}")
            raise
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(json_str)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Build one-way, two-way and container relationship designs"
    )
    parser.add_argument(
        "--records",
        type=Path,
        help="JSON file with songs and an optional library",
    )
    parser.add_argument(
        "--music-dir",
        type=Path,
        help="Directory of audio files to read tags from",
    )
    parser.add_argument(
        "--design",
        choices=[*DESIGNS, "all"],
        default="all",
        help="Which design to build (default: all)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Where to write the JSON snapshot",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Check the two-way graph for inconsistencies",
    )
    parser.add_argument(
        "--workers",
        type=int,
        help="Number of parallel tag readers (default: 4)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    configure_logging(verbose=args.verbose)

    try:
        config = Config.from_environment()
        if args.music_dir is not None:
            config.paths.music_dir = args.music_dir
        if args.output is not None:
            config.paths.output_file = args.output
        if args.workers is not None:
            config.max_workers = args.workers
        config.validate()

        if args.records is None and config.paths.music_dir is None:
            raise ValueError("Nothing to read. Pass --records and/or --music-dir")
        if args.records is not None and not args.records.is_file():
            raise ValueError(f"Records file not found: {args.records}")

        designs = DESIGNS if args.design == "all" else (args.design,)
        explorer = RelationshipExplorer(config)
        return explorer.run(records_file=args.records, designs=designs, check=args.check)
    except ValueError as e:
        print(f"Error: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
