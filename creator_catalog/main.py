#!/usr/bin/env python3
"""
Creator Catalog command line tool

Validates catalog JSON files, filters creator-friendly songs and groups
songs into albums. Results are printed as JSON to stdout.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from tqdm import tqdm

from . import __version__
from .config import Config, configure_logging
from .models.results import InputError
from .processors.classifier import creator_friendly_reason, filter_creator_friendly
from .processors.grouping import group_by_album
from .processors.validation import batch_validate, check_catalog
from .utils.display import (
    content_id_description,
    format_release_type,
    should_display_streaming_link,
    sort_songs,
    streaming_link_text,
)
from .utils.payload import PayloadError, decode_payload, decode_song_list, to_json

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def read_payload(source: str) -> str | bytes:
    """Read a JSON payload from a file path, or stdin for ``-``.

    Files are read as raw bytes and decoded by decode_payload. Undecodable
    input raises PayloadError.
    """
    if source == "-":
        try:
            return sys.stdin.read()
        except UnicodeDecodeError as e:
            raise PayloadError(f"Invalid JSON: {e}") from e
    return Path(source).read_bytes()


def songs_from(payload: str | bytes) -> Any:
    """Accept either a song array or a catalog object and return the songs."""
    data = decode_payload(payload)
    if isinstance(data, dict) and "songs" in data:
        return data["songs"]
    return data


class CatalogCLI:
    """Runs one subcommand against the configured inputs."""

    def __init__(self, config: Config) -> None:
        self._config = config

    def _sources(self, files: list[str] | None) -> list[str]:
        return files or [str(self._config.catalog_file)]

    def _emit(self, value: Any) -> None:
        print(to_json(value, indent=self._config.json_indent or None))

    def validate(self, files: list[str] | None) -> int:
        sources = self._sources(files)
        results = []
        for source in tqdm(
            sources,
            desc="Validating",
            unit="file",
            disable=len(sources) < 2,
        ):
            results.append((source, check_catalog(read_payload(source))))

        exit_code = EXIT_OK
        for source, result in results:
            if result:
                print(f"{source}: OK")
            else:
                print(f"{source}: {result.reason}")
                exit_code = EXIT_INVALID
        return exit_code

    def batch(self, source: str | None) -> int:
        results = batch_validate(self._songs(source))
        self._emit(results)
        if isinstance(results, InputError):
            return EXIT_INVALID
        return EXIT_OK if all(item.valid for item in results) else EXIT_INVALID

    def filter(self, source: str | None) -> int:
        return self._emit_result(filter_creator_friendly(self._songs(source)))

    def group(self, source: str | None) -> int:
        return self._emit_result(group_by_album(self._songs(source)))

    def explain(self, source: str | None, sort_by: str | None = None) -> int:
        songs = decode_song_list(self._songs(source))
        if sort_by:
            songs = sort_songs(songs, sort_by)
        for song in songs:
            if should_display_streaming_link(song.streaming_link):
                link = streaming_link_text(song.streaming_link)
            else:
                link = "-"
            reason = creator_friendly_reason(song) or "not creator-friendly"
            print(
                "\t".join(
                    [
                        song.id,
                        song.title,
                        format_release_type(song.release_type.value),
                        link,
                        content_id_description(song.has_content_id),
                        reason,
                    ]
                )
            )
        return EXIT_OK

    def _songs(self, source: str | None) -> Any:
        return songs_from(read_payload(source or str(self._config.catalog_file)))

    def _emit_result(self, result: Any) -> int:
        self._emit(result)
        return EXIT_INVALID if isinstance(result, InputError) else EXIT_OK


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Validate, classify and group creator-friendly song catalogs"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="JSON indentation for output (default: CATALOG_JSON_INDENT or 2)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Validate catalog files")
    validate.add_argument("files", nargs="*", help="Catalog JSON files, '-' for stdin")

    for name, help_text in (
        ("batch", "Validate every song and report all problems per song"),
        ("filter", "Print only creator-friendly songs"),
        ("group", "Print songs grouped into albums"),
        ("explain", "Explain why each song is or is not creator-friendly"),
    ):
        command = subparsers.add_parser(name, help=help_text)
        command.add_argument(
            "file", nargs="?", help="Song array or catalog JSON file, '-' for stdin"
        )
        if name == "explain":
            command.add_argument(
                "--sort",
                choices=["title", "album", "release_type"],
                help="Sort songs before explaining (default: input order)",
            )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = Config.from_environment()
        if args.indent is not None:
            config.json_indent = args.indent
        config.validate()
    except ValueError as e:
        print(f"Error: {e}")
        return EXIT_ERROR

    configure_logging(verbose=args.verbose, level=config.log_level)

    cli = CatalogCLI(config)
    try:
        if args.command == "validate":
            return cli.validate(args.files)
        if args.command == "explain":
            return cli.explain(args.file, args.sort)
        return getattr(cli, args.command)(args.file)
    except (OSError, PayloadError) as e:
        logger.debug(f"{args.command} failed: {e}")
        print(f"Error: {e}")
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
