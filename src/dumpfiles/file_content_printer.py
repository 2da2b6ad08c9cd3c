"""Nested content section writer.

This module walks the filtered file system tree and emits one nested block per
directory and one block per file, with the file's text inlined line by line.
Directory blocks are opened lazily, when the first entry inside them is
reached, and closed as soon as the walk leaves them.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from .file_system_tree.file_system_node import FileSystemNode, display_name
from .file_system_tree.file_system_tree import FileSystemTree
from .logging import logger
from .output_strategies.base_strategy import OutputStrategy
from .output_strategies.tag_strategy import TagOutputStrategy


@dataclass(frozen=True)
class DirectoryFrame:
    """A directory block that is currently open in the output.

    Attributes:
        parts: Path components of the directory relative to the root.
    """

    parts: Tuple[str, ...]

    @property
    def name(self) -> str:
        return self.parts[-1]

    @property
    def depth(self) -> int:
        return len(self.parts) - 1

    def contains(self, parts: Tuple[str, ...]) -> bool:
        """Return True if ``parts`` is this directory or lies beneath it."""
        return parts[: len(self.parts)] == self.parts


def split_lines(text: str) -> List[str]:
    """Split file content into lines the way the content section lays them out.

    Lines end at ``\\n``; a ``\\r`` immediately before it is dropped. A
    trailing newline does not produce an extra empty line, and a ``\\r`` that
    is not followed by ``\\n`` stays part of its line.

    Example:
        >>> split_lines("first\\r\\nsecond\\n")
        ['first', 'second']
        >>> split_lines("no newline\\r")
        ['no newline\\r']
        >>> split_lines("")
        []
    """
    if not text:
        return []
    lines = text.split("\n")
    last = lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if last:
        lines.append(last)
    return lines


def read_text(path: Path) -> Optional[str]:
    """Read a file as UTF-8 text.

    Returns:
        The decoded content, or None if the file cannot be read or is not
        valid UTF-8.
    """
    try:
        return path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("unreadable_file", path=str(path), error=str(e))
        return None


class FileContentPrinter:
    """Streams the nested content section for a file system tree.

    The printer keeps a stack of the directory blocks currently open. Before an
    entry is handled, every open block that does not contain the entry is
    closed; then a block is opened for each of the entry's ancestor directories
    not yet on the stack. Regular files are written as a block containing their
    text, or a single placeholder line when they cannot be read as UTF-8.
    Whatever is still open once the walk ends is closed, so every opening
    marker has a matching closing marker.

    Directories with no visible entries never get a block.

    Attributes:
        fs_tree (FileSystemTree): The tree whose entries are printed.
        strategy (OutputStrategy): Formatting for markers and content lines.
        file_count (int): Files written so far.
        unreadable_count (int): Files replaced by a placeholder so far.
        line_count (int): Content lines written so far.

    Example:
        >>> tree = FileSystemTree("/path/to/project")  # doctest: +SKIP
        >>> printer = FileContentPrinter(tree)  # doctest: +SKIP
        >>> print("".join(printer.yield_file_contents()), end="")  # doctest: +SKIP
        <a>
            <b.txt>
            hi
            </b.txt>
        </a>
        <BLANKLINE>
    """

    def __init__(self, fs_tree: FileSystemTree, strategy: Optional[OutputStrategy] = None) -> None:
        self.fs_tree = fs_tree
        self.strategy = strategy if strategy is not None else TagOutputStrategy()
        self.file_count = 0
        self.unreadable_count = 0
        self.line_count = 0

    def yield_file_contents(self) -> Iterator[str]:
        """Yield the content section chunk by chunk.

        Yields:
            Formatted markers and content lines, each ending with a newline.
        """
        stack: List[DirectoryFrame] = []

        for node in self.fs_tree.iterate_nodes():
            parts = node.relative_parts
            if not parts:
                continue
            parent_parts = parts[:-1]

            while stack and not stack[-1].contains(parent_parts):
                closing = stack.pop()
                yield self.strategy.format_directory_end(display_name(closing.name), closing.depth)

            for end in range(len(stack) + 1, len(parent_parts) + 1):
                frame = DirectoryFrame(parent_parts[:end])
                stack.append(frame)
                yield self.strategy.format_directory_start(display_name(frame.name), frame.depth)

            if node.is_file:
                yield from self._yield_file(node, len(parent_parts))

        while stack:
            closing = stack.pop()
            yield self.strategy.format_directory_end(display_name(closing.name), closing.depth)

    def _yield_file(self, node: FileSystemNode, depth: int) -> Iterator[str]:
        yield self.strategy.format_file_start(node.display_name, depth)
        content = read_text(node.abs_path)
        if content is None:
            self.unreadable_count += 1
            yield self.strategy.format_unreadable(display_name(str(node.abs_path)), depth)
        else:
            for line in split_lines(content):
                self.line_count += 1
                yield self.strategy.format_file_line(line, depth)
        self.file_count += 1
        yield self.strategy.format_file_end(node.display_name, depth)
