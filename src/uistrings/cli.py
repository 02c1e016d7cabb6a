"""
Command-line interface for collecting UIStrings into locale documents.

Running the collector without arguments scans the ``lighthouse-core``
directory of this checkout and rewrites ``lighthouse-core/lib/locales/en-US.json``
and the ``en-XA`` pseudo-locale next to it.

Usage Examples:
    Collect and write both locale documents:
        uv run collect-strings

    Verify the committed documents are up to date (CI):
        uv run collect-strings --check

    Use a different layout:
        uv run collect-strings --config i18n.yml
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NamedTuple

from .collector import collect_all_strings_in_dir
from .config import CollectorConfig, load_config
from .exceptions import ConfigurationError, UIStringsError
from .locale_writer import locale_file_is_current, write_strings_to_locale_format
from .pseudo_locale import create_pseudo_locale_strings
from .types import StringTable
from .version import get_version

logger = logging.getLogger(__name__)


class CollectArgs(NamedTuple):
    """Type-safe container for command-line arguments."""

    config: Path | None
    check: bool
    verbose: bool


def _below_error(record: logging.LogRecord) -> bool:
    return record.levelno < logging.ERROR


def create_log_handlers() -> list[logging.Handler]:
    """
    Create the console handlers: progress on stdout, errors on stderr.

    Returns:
        Handlers for ``logging.basicConfig``
    """
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.addFilter(_below_error)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.ERROR)

    return [stdout_handler, stderr_handler]


def setup_logging(verbose: bool = False) -> None:
    """
    Set up logging configuration.

    Progress lines go to stdout as bare messages and errors go to stderr;
    verbose mode adds timestamps, logger names and debug output.

    Args:
        verbose: Enable verbose logging
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            handlers=create_log_handlers(),
        )
    else:
        logging.basicConfig(
            level=logging.INFO, format="%(message)s", handlers=create_log_handlers()
        )


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the collector.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="collect-strings",
        description="Collect UIStrings from source files into en-US and en-XA locale documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                     # Collect and write both locale documents
  %(prog)s --check             # Fail if the documents on disk are stale
  %(prog)s --config i18n.yml   # Override the default layout
  %(prog)s --verbose           # Enable verbose logging
        """,
    )

    _ = parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file overriding the collector settings",
        metavar="PATH",
    )

    _ = parser.add_argument(
        "--check",
        action="store_true",
        help="Compare the generated documents with the files on disk without writing",
    )

    _ = parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    _ = parser.add_argument(
        "--version", action="version", version=f"%(prog)s {get_version()}"
    )

    return parser


def parse_arguments(args: list[str] | None = None) -> CollectArgs:
    """
    Parse command-line arguments.

    Args:
        args: List of arguments to parse (defaults to sys.argv[1:])

    Returns:
        Parsed arguments in a type-safe container
    """
    parsed = create_argument_parser().parse_args(args)

    return CollectArgs(
        config=parsed.config,  # pyright: ignore[reportAny]
        check=parsed.check,  # pyright: ignore[reportAny]
        verbose=parsed.verbose,  # pyright: ignore[reportAny]
    )


def build_locale_tables(config: CollectorConfig) -> tuple[StringTable, StringTable]:
    """
    Collect the source-locale table and derive the pseudo-locale from it.

    Args:
        config: Collector settings

    Returns:
        Tuple of (source-locale table, pseudo-locale table)
    """
    strings = collect_all_strings_in_dir(config.source_path, config)
    pseudo_localized_strings = create_pseudo_locale_strings(strings)
    logger.info("Collected!")
    return strings, pseudo_localized_strings


def handle_check_mode(
    config: CollectorConfig, strings: StringTable, pseudo_localized_strings: StringTable
) -> int:
    """
    Compare the generated documents with the ones on disk.

    Args:
        config: Collector settings
        strings: Source-locale table
        pseudo_localized_strings: Pseudo-locale table

    Returns:
        Exit code (0 if both documents are current, 1 otherwise)
    """
    stale = [
        locale
        for locale, table in (
            (config.source_locale, strings),
            (config.pseudo_locale, pseudo_localized_strings),
        )
        if not locale_file_is_current(locale, table, config.locales_path)
    ]

    if stale:
        logger.error(f"Locale documents need update: {', '.join(stale)}")
        return 1

    logger.info("Locale documents are up to date")
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the collector.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    try:
        config = load_config(args.config) if args.config is not None else CollectorConfig()

        if not config.source_path.is_dir():
            logger.error(f"Source directory does not exist: {config.source_path}")
            return 1

        strings, pseudo_localized_strings = build_locale_tables(config)

        if args.check:
            return handle_check_mode(config, strings, pseudo_localized_strings)

        _ = write_strings_to_locale_format(config.source_locale, strings, config.locales_path)
        _ = write_strings_to_locale_format(
            config.pseudo_locale, pseudo_localized_strings, config.locales_path
        )
        logger.info("Written to disk!")
        return 0

    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        return 1
    except (UIStringsError, ConfigurationError, OSError, UnicodeDecodeError) as e:
        if args.verbose:
            logger.exception(f"Error during string collection: {e}")
        else:
            logger.error(f"Error during string collection: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
