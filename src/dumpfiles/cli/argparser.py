"""Command-line argument parsing for dumpfiles."""

import argparse
from pathlib import Path
from typing import List, Optional

from dumpfiles import __version__
from dumpfiles.dumpfiles import DEFAULT_IGNORE_FILE, DEFAULT_IGNORE_PATTERNS, DEFAULT_OUTPUT_FILE
from dumpfiles.exclusion_rules.glob_translation import normalize_cli_pattern
from dumpfiles.logging import logger


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with dumpfiles' options.
    """
    description = """
    dumpfiles: write a directory's structure and text contents to a single file.

    The output starts with a <tree> section listing every entry, indented four
    spaces per level, followed by nested <dirname> / <filename> blocks holding
    each text file's lines. Files that are not valid UTF-8 or cannot be read are
    replaced by a single placeholder line.
    """

    epilog = """
    Examples:
      # Dump the current directory to output.txt, honouring ./.gitignore
      dumpfiles .

      # Write somewhere else and ignore extra patterns
      dumpfiles -o dump.txt -i "*.log" -i "node_modules/" /path/to/project

      # Use a different ignore file, or none at all
      dumpfiles -g .dockerignore /path/to/project
      dumpfiles --no-gitignore /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="dumpfiles",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"dumpfiles {__version__}", help="Show the version and exit"
    )
    parser.add_argument("directory", type=Path, help="The directory to dump.")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        default=Path(DEFAULT_OUTPUT_FILE),
        help=f"Output file path (default: {DEFAULT_OUTPUT_FILE}). It is always left out of its own dump.",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action="append",
        help=(
            "Gitignore-style pattern to exclude. Can be specified multiple times; "
            f"defaults to {' '.join(DEFAULT_IGNORE_PATTERNS)} when not given."
        ),
    )
    parser.add_argument(
        "-g",
        "--gitignore",
        type=Path,
        metavar="FILE",
        help=f"Ignore file whose patterns are merged in (default: {DEFAULT_IGNORE_FILE} inside DIRECTORY).",
    )
    parser.add_argument(
        "--no-gitignore",
        action="store_true",
        help="Do not read any ignore file, even when --gitignore is given.",
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log debug details.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors.")
    parser.add_argument("--log-file", type=Path, metavar="FILE", help="Write log records to FILE instead of stderr.")

    return parser


def resolve_ignore_patterns(args: argparse.Namespace) -> List[str]:
    """Return the explicit patterns with separators normalized.

    Example:
        >>> args = argparse.Namespace(ignore=["build\\\\", "docs/"])
        >>> resolve_ignore_patterns(args)
        ['build', 'docs']
        >>> resolve_ignore_patterns(argparse.Namespace(ignore=None))
        ['.git*']
    """
    patterns = args.ignore if args.ignore else list(DEFAULT_IGNORE_PATTERNS)
    return [normalize_cli_pattern(pattern) for pattern in patterns]


def resolve_ignore_file(args: argparse.Namespace) -> Optional[Path]:
    """Work out which ignore file, if any, to merge in.

    An explicit ``--gitignore`` is returned as given so that a missing file is
    reported when it is read. The default ``.gitignore`` inside the directory
    is only used when it exists.
    """
    if args.no_gitignore:
        return None
    if args.gitignore is not None:
        return Path(args.gitignore)
    default = Path(args.directory) / DEFAULT_IGNORE_FILE
    if not default.is_file():
        logger.debug("ignore_file_missing", path=str(default))
        return None
    return default
