"""Directory to text dumping.

This module ties the pieces together: it canonicalizes the root directory,
resolves the ignore patterns into an exclusion set, walks the directory once
and streams the two sections of the output artifact, the ``<tree>`` listing
followed by the nested file contents.
"""

from pathlib import Path
from typing import Iterator, Optional, Sequence

from dumpfiles.exceptions import OutputFileError, RootDirectoryError
from dumpfiles.exclusion_rules.path_set_rules import PathSetExclusionRules, resolve_output_path
from dumpfiles.file_content_printer import FileContentPrinter
from dumpfiles.file_system_tree.file_system_tree import FileSystemTree
from dumpfiles.output_strategies.base_strategy import OutputStrategy
from dumpfiles.types import PathType

DEFAULT_OUTPUT_FILE = "output.txt"
DEFAULT_IGNORE_PATTERNS = (".git*",)
DEFAULT_IGNORE_FILE = ".gitignore"

TREE_START = "<tree>\n"
TREE_END = "</tree>\n\n"


def canonicalize_directory(directory: PathType) -> Path:
    """Resolve the directory to dump to an absolute path without symlinks.

    Raises:
        RootDirectoryError: If the directory does not exist, is not a
            directory, or cannot be resolved.
    """
    path = Path(directory)
    try:
        resolved = path.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise RootDirectoryError(str(path)) from e
    if not resolved.is_dir():
        raise RootDirectoryError(str(path), "Not a directory")
    return resolved


class DumpFiles:
    """Streams the text artifact for one directory.

    Construction does the one-shot work: the root is canonicalized and the
    ignore patterns are expanded into an exclusion set that always contains the
    output artifact. The directory itself is walked lazily, once, the first
    time either section is streamed; both sections then iterate over that same
    walk.

    Attributes:
        directory (Path): Canonical root directory.
        output_file (Path): Canonical path of the output artifact.
        exclusion_rules (PathSetExclusionRules): Paths left out of both sections.

    Example:
        >>> dump = DumpFiles("/path/to/project", ignore_patterns=[".git*"])  # doctest: +SKIP
        >>> for chunk in dump.stream_tree():  # doctest: +SKIP
        ...     print(chunk, end="")
        <tree>
        project/
            a/
                b.txt
        </tree>
        <BLANKLINE>

    Raises:
        RootDirectoryError: If the directory cannot be canonicalized.
        IgnoreFileError: If ``ignore_file`` is given but cannot be read.
    """

    def __init__(
        self,
        directory: PathType,
        *,
        output_file: PathType = DEFAULT_OUTPUT_FILE,
        ignore_patterns: Sequence[str] = DEFAULT_IGNORE_PATTERNS,
        ignore_file: Optional[PathType] = None,
        strategy: Optional[OutputStrategy] = None,
    ) -> None:
        """Prepare a dump of ``directory``.

        Args:
            directory: Directory to dump.
            output_file: Where the artifact will be written. A relative path is
                taken relative to ``directory``.
            ignore_patterns: Explicit gitignore-style patterns, applied before
                the rules of ``ignore_file``.
            ignore_file: Optional .gitignore-style file to merge in.
            strategy: Formatting for the content section. Defaults to
                ``<name>`` tags.
        """
        self.directory = canonicalize_directory(directory)
        self.output_file = resolve_output_path(self.directory, output_file)
        self.exclusion_rules = PathSetExclusionRules.from_patterns(
            self.directory, ignore_patterns, self.output_file, ignore_file
        )
        self._fs_tree = FileSystemTree(self.directory, self.exclusion_rules)
        self._content_printer = FileContentPrinter(self._fs_tree, strategy)

    @property
    def fs_tree(self) -> FileSystemTree:
        return self._fs_tree

    @property
    def directory_count(self) -> int:
        """Number of directories listed, excluding the root."""
        return self._fs_tree.get_directory_count()

    @property
    def file_count(self) -> int:
        """Number of non-directory entries listed."""
        return self._fs_tree.get_file_count()

    @property
    def symlink_count(self) -> int:
        return self._fs_tree.get_symlink_count()

    @property
    def unreadable_count(self) -> int:
        """Files replaced by a placeholder in the content section streamed so far."""
        return self._content_printer.unreadable_count

    @property
    def line_count(self) -> int:
        """Content lines written in the content section streamed so far."""
        return self._content_printer.line_count

    def stream_tree(self) -> Iterator[str]:
        """Stream the ``<tree>`` section.

        Yields:
            The opening delimiter, one line per entry, then the closing
            delimiter followed by a blank line.
        """
        yield TREE_START
        yield from self._fs_tree.stream_tree_representation()
        yield TREE_END

    def stream_contents(self) -> Iterator[str]:
        """Stream the nested content section."""
        yield from self._content_printer.yield_file_contents()

    def stream(self) -> Iterator[str]:
        """Stream the complete artifact: tree section, then content section."""
        yield from self.stream_tree()
        yield from self.stream_contents()


def write_directory_contents(
    directory: PathType,
    output: PathType,
    ignore_patterns: Sequence[str] = DEFAULT_IGNORE_PATTERNS,
    ignore_file: Optional[PathType] = None,
) -> DumpFiles:
    """Write the text artifact for ``directory`` to ``output``.

    The output file is created or truncated once, kept open while both
    sections are written, and flushed when it is closed.

    Args:
        directory: Directory to dump.
        output: Path of the artifact. A relative path is taken relative to
            ``directory``.
        ignore_patterns: Explicit gitignore-style patterns.
        ignore_file: Optional .gitignore-style file to merge in.

    Returns:
        The finished dump, for its counters.

    Raises:
        RootDirectoryError: If the directory cannot be canonicalized.
        IgnoreFileError: If ``ignore_file`` cannot be read.
        OutputFileError: If the output file cannot be created or truncated.
        TraversalError: If a directory cannot be listed during the walk.
    """
    dump = DumpFiles(directory, output_file=output, ignore_patterns=ignore_patterns, ignore_file=ignore_file)
    try:
        out = dump.output_file.open("w", encoding="utf-8", newline="")
    except OSError as e:
        raise OutputFileError(str(dump.output_file)) from e
    with out:
        for chunk in dump.stream():
            out.write(chunk)
    return dump
