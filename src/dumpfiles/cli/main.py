"""Command-line interface for dumpfiles.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)

Example:
    # Dump a project, skipping .git and whatever its .gitignore lists
    $ dumpfiles /path/to/project -o project.txt
"""

import logging
import sys
from typing import List, Optional

from dumpfiles.cli.argparser import create_parser, resolve_ignore_file, resolve_ignore_patterns
from dumpfiles.cli.safe_writer import SafeWriter
from dumpfiles.cli.signal_handler import setup_signal_handling, signal_handler
from dumpfiles.dumpfiles import DumpFiles
from dumpfiles.exceptions import OperationInterruptedError
from dumpfiles.logging import logger, setup_logging


def format_error(error: BaseException) -> str:
    """Render an error with its underlying cause, if any.

    Example:
        >>> try:
        ...     raise RuntimeError("outer") from OSError("inner")
        ... except RuntimeError as e:
        ...     format_error(e)
        'outer: inner'
    """
    if error.__cause__ is not None:
        return f"{error}: {error.__cause__}"
    return str(error)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the dumpfiles command-line interface.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.
    """
    setup_signal_handling()
    parser = create_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    setup_logging(level, args.log_file)

    try:
        output = args.output.absolute()
        dump = DumpFiles(
            args.directory,
            output_file=output,
            ignore_patterns=resolve_ignore_patterns(args),
            ignore_file=resolve_ignore_file(args),
        )
        logger.info(
            "processing_started",
            directory=str(dump.directory),
            output=str(dump.output_file),
            excluded=len(dump.exclusion_rules),
        )

        with SafeWriter(dump.output_file) as writer:
            for chunk in dump.stream():
                writer.write(chunk)

        logger.info(
            "processing_finished",
            output=str(dump.output_file),
            directories=dump.directory_count,
            files=dump.file_count,
            symlinks=dump.symlink_count,
            unreadable=dump.unreadable_count,
            lines=dump.line_count,
        )
    except OperationInterruptedError as e:
        print(f"Error: {format_error(e)}", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        print(f"Error: {format_error(e)}", file=sys.stderr)
        sys.exit(1)

    if signal_handler.sigint_received.is_set():
        sys.exit(130)


if __name__ == "__main__":
    main()
