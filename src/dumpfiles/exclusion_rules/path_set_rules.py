"""Exclusion rules backed by a concrete set of filesystem paths.

Ignore patterns are resolved against the filesystem exactly once, before any
output is produced. The walk then only asks "is this path, or one of its
ancestors, in the set?", so every exclusion decision within a run is made
against the same snapshot of the filesystem.
"""

import os
import re
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, List, Optional, Sequence, Set, Tuple

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from dumpfiles.logging import logger
from dumpfiles.types import PathType

from .base_rules import BaseExclusionRules
from .glob_translation import NEGATION_PREFIX, gitignore_to_glob, is_negated
from .ignore_file import parse_ignore_file


class PathSetExclusionRules(BaseExclusionRules):
    """Exclusion rules that match against a fixed set of absolute paths.

    A path is excluded when it is in the set or when any of its ancestors is,
    which makes excluding a directory implicitly exclude its whole subtree.

    Attributes:
        excluded_paths (FrozenSet[Path]): The absolute paths to exclude.

    Example:
        >>> rules = PathSetExclusionRules(["/project/build", "/project/output.txt"])
        >>> rules.exclude("/project/build")
        True
        >>> rules.exclude("/project/build/lib/module.py")
        True
        >>> rules.exclude("/project/builder.py")
        False
        >>> len(rules)
        2
    """

    def __init__(self, excluded_paths: Iterable[PathType] = ()) -> None:
        self.excluded_paths: FrozenSet[Path] = frozenset(Path(p) for p in excluded_paths)

    @classmethod
    def from_patterns(
        cls,
        directory: PathType,
        ignore_patterns: Sequence[str],
        output_file: PathType,
        ignore_file: Optional[PathType] = None,
    ) -> "PathSetExclusionRules":
        """Build rules by expanding ignore patterns against the filesystem.

        See :func:`generate_exclusion_set` for the arguments.
        """
        return cls(generate_exclusion_set(directory, ignore_patterns, output_file, ignore_file))

    def exclude(self, path: PathType) -> bool:
        """Check whether a path or any of its ancestors is in the exclusion set.

        Args:
            path: Absolute path of the entry being visited.

        Returns:
            bool: True if the entry must be skipped.
        """
        candidate = Path(path)
        if candidate in self.excluded_paths:
            return True
        return any(parent in self.excluded_paths for parent in candidate.parents)

    def has_rules(self) -> bool:
        return bool(self.excluded_paths)

    def __len__(self) -> int:
        return len(self.excluded_paths)


def resolve_output_path(directory: PathType, output_file: PathType) -> Path:
    """Return the absolute path of the output artifact.

    A relative output path is taken relative to ``directory``. The path is
    normalized without following symbolic links, so a link named as the
    output stays the path that is written and excluded.

    Example:
        >>> str(resolve_output_path("/project", "/project/dump.txt"))
        '/project/dump.txt'
    """
    output = Path(output_file)
    if not output.is_absolute():
        output = Path(directory) / output
    return Path(os.path.abspath(output))


def generate_exclusion_set(
    directory: PathType,
    ignore_patterns: Sequence[str],
    output_file: PathType,
    ignore_file: Optional[PathType] = None,
) -> FrozenSet[Path]:
    """Expand ignore patterns against the filesystem into a set of absolute paths.

    Explicit patterns come first, followed by the rules read from
    ``ignore_file``. Every pattern goes through
    :func:`~dumpfiles.exclusion_rules.glob_translation.gitignore_to_glob` (ignore
    file lines already have). Patterns are applied in order: a plain pattern
    adds every path it matches, a ``!`` pattern removes the paths it matches
    from what has been added so far. The output artifact, and the file it
    points to when it is a symbolic link, is always in the result and can
    never be re-included.

    A pattern that fails to compile is logged and skipped; the remaining
    patterns still apply.

    Args:
        directory: Absolute, canonical root directory being scanned.
        ignore_patterns: Explicit gitignore-style patterns.
        output_file: Path of the output artifact (relative paths are taken
            relative to ``directory``).
        ignore_file: Optional .gitignore-style file to merge in.

    Returns:
        The absolute paths to exclude.

    Raises:
        IgnoreFileError: If ``ignore_file`` is given but cannot be read.

    Example:
        >>> import tempfile
        >>> from pathlib import Path
        >>> with tempfile.TemporaryDirectory() as tmp:  # doctest: +SKIP
        ...     root = Path(tmp).resolve()
        ...     (root / "build").mkdir()
        ...     excluded = generate_exclusion_set(root, ["build/"], "out.txt")
        ...     sorted(p.name for p in excluded)
        ['build', 'out.txt']
    """
    root = Path(directory)

    all_patterns: List[str] = [gitignore_to_glob(pattern) for pattern in ignore_patterns if pattern]
    if ignore_file is not None:
        all_patterns.extend(parse_ignore_file(ignore_file))

    output = resolve_output_path(root, output_file)
    protected = {output, output.resolve()}
    excluded: Set[Path] = set(protected)
    logger.debug("output_excluded", path=str(output))

    compiled = _compile_patterns(all_patterns)
    if not compiled:
        return frozenset(excluded)

    entries = list(_iter_match_entries(root))
    for glob_pattern, spec in compiled:
        logger.debug("pattern_expanding", glob=glob_pattern, directory=str(root))
        matches = [path for path, match_path in entries if spec.match_file(match_path)]
        if is_negated(glob_pattern):
            for path in matches:
                if path not in protected and path in excluded:
                    excluded.discard(path)
                    logger.debug("pattern_reincluded", glob=glob_pattern, path=str(path))
        else:
            for path in matches:
                logger.debug("path_excluded", glob=glob_pattern, path=str(path))
            excluded.update(matches)

    return frozenset(excluded)


def _compile_patterns(glob_patterns: Sequence[str]) -> List[Tuple[str, PathSpec]]:
    """Compile each glob on its own so one bad pattern cannot sink the others."""
    compiled: List[Tuple[str, PathSpec]] = []
    for glob_pattern in glob_patterns:
        positive = glob_pattern[len(NEGATION_PREFIX) :] if is_negated(glob_pattern) else glob_pattern  # noqa: E203
        if not positive:
            logger.warning("pattern_invalid", glob=glob_pattern, error="empty pattern")
            continue
        try:
            compiled.append((glob_pattern, PathSpec.from_lines(GitWildMatchPattern, [positive])))
        except (ValueError, re.error) as e:
            logger.warning("pattern_invalid", glob=glob_pattern, error=str(e))
    return compiled


def _iter_match_entries(root: Path) -> Iterator[Tuple[Path, str]]:
    """Yield every entry under ``root`` with the root-relative path used for matching.

    Directories are matched with a trailing ``/`` so that directory-only
    globs (``name/**``) select them. Symbolic links are not followed.
    Directories that cannot be listed are logged and skipped: expansion only
    decides what to leave out, the tree walk reports unreadable directories.
    """
    pending = [root]
    while pending:
        current = pending.pop()
        try:
            with os.scandir(current) as it:
                children = list(it)
        except OSError as e:
            logger.warning("pattern_expansion_skipped_directory", path=str(current), error=str(e))
            continue
        for child in children:
            path = Path(child.path)
            relative = path.relative_to(root).as_posix()
            try:
                is_dir = child.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False
            if is_dir:
                pending.append(path)
                yield path, relative + "/"
            else:
                yield path, relative
