"""Reading of .gitignore-style ignore files."""

from pathlib import Path
from typing import List

from dumpfiles.exceptions import IgnoreFileError
from dumpfiles.logging import logger
from dumpfiles.types import PathType

from .glob_translation import gitignore_to_glob

COMMENT_PREFIX = "#"


def parse_ignore_file(ignore_file: PathType) -> List[str]:
    """Read an ignore file and translate each rule into a glob expression.

    Lines are trimmed; blank lines and lines starting with ``#`` are skipped.
    Order is preserved and duplicates are kept, since later negations depend
    on the position of the rules they override.

    Args:
        ignore_file: Path to the ignore file.

    Returns:
        The translated glob expressions, in file order.

    Raises:
        IgnoreFileError: If the file cannot be opened or is not valid UTF-8.

    Example:
        >>> import tempfile, os
        >>> with tempfile.NamedTemporaryFile("w", suffix=".gitignore", delete=False) as f:
        ...     _ = f.write("# build output\\n\\nbuild/\\n*.pyc\\n")
        >>> parse_ignore_file(f.name)
        ['**/build/**', '**/*.pyc']
        >>> os.unlink(f.name)
    """
    path = Path(ignore_file)
    try:
        with path.open("r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise IgnoreFileError(str(path)) from e

    patterns: List[str] = []
    for line in lines:
        trimmed = line.strip()
        if not trimmed or trimmed.startswith(COMMENT_PREFIX):
            continue
        glob_pattern = gitignore_to_glob(trimmed)
        logger.debug("ignore_pattern_translated", pattern=trimmed, glob=glob_pattern, ignore_file=str(path))
        patterns.append(glob_pattern)

    return patterns
