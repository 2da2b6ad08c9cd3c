"""Filtered file system tree shared by the tree and content sections.

The directory is walked once. Both output sections iterate over the resulting
tree, so they always list the same entries in the same order.
"""

import os
from pathlib import Path
from typing import Iterator, List, Optional

from dumpfiles.exceptions import TraversalError
from dumpfiles.exclusion_rules.base_rules import BaseExclusionRules
from dumpfiles.file_system_tree.file_system_node import FileSystemNode
from dumpfiles.types import PathType

INDENT = "    "


class FileSystemTree:
    """A tree representation of a directory structure with exclusion rules applied.

    The tree is built lazily on first access. Exclusion rules are applied as a
    descent predicate: an excluded directory is neither listed nor entered,
    so nothing beneath it is ever visited. Siblings are ordered by name and
    symbolic links are listed but never followed.

    Attributes:
        root_path (Path): The directory the tree is rooted at.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for excluding entries.

    Example:
        >>> tree = FileSystemTree("/path/to/project")  # doctest: +SKIP
        >>> for line in tree.stream_tree_representation():  # doctest: +SKIP
        ...     print(line, end="")
        project/
            src/
                main.py
            README.md
    """

    def __init__(self, root_path: PathType, exclusion_rules: Optional[BaseExclusionRules] = None) -> None:
        self.root_path = Path(root_path)
        self.exclusion_rules = exclusion_rules
        self._tree: Optional[FileSystemNode] = None
        self._file_count = 0
        self._directory_count = 0
        self._symlink_count = 0

    def get_tree(self) -> Optional[FileSystemNode]:
        """Get the root node of the filtered tree, building it if needed.

        Returns:
            The root node, or None if the root itself is excluded.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            TraversalError: If a directory cannot be listed or an entry cannot be inspected.
        """
        if self._tree is None:
            self._build_tree()
        return self._tree

    def _build_tree(self) -> None:
        if not self.root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")

        self._file_count = 0
        self._directory_count = 0
        self._symlink_count = 0

        if self._is_excluded(self.root_path):
            self._tree = None
            return

        root = FileSystemNode(self.root_path.name or str(self.root_path), abs_path=self.root_path, is_dir=True)
        pending = [root]
        while pending:
            pending.extend(self._add_children(pending.pop()))
        self._tree = root

    def _is_excluded(self, path: Path) -> bool:
        if self.exclusion_rules is None or not self.exclusion_rules.has_rules():
            return False
        return self.exclusion_rules.exclude(path)

    def _add_children(self, node: FileSystemNode) -> List[FileSystemNode]:
        """Attach the visible entries of a directory and return its subdirectories."""
        try:
            with os.scandir(node.abs_path) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            raise TraversalError(str(node.abs_path)) from e

        subdirectories: List[FileSystemNode] = []
        for entry in entries:
            path = Path(entry.path)
            if self._is_excluded(path):
                continue
            try:
                is_symlink = entry.is_symlink()
                is_dir = not is_symlink and entry.is_dir(follow_symlinks=False)
                is_file = not is_symlink and entry.is_file(follow_symlinks=False)
            except OSError as e:
                raise TraversalError(str(path)) from e

            child = FileSystemNode(
                entry.name, parent=node, abs_path=path, is_dir=is_dir, is_symlink=is_symlink, is_file=is_file
            )
            if is_dir:
                self._directory_count += 1
                subdirectories.append(child)
            elif is_symlink:
                self._symlink_count += 1
            else:
                self._file_count += 1

        return subdirectories

    def iterate_nodes(self) -> Iterator[FileSystemNode]:
        """Iterate over every visited entry, parents before children, root first.

        Yields:
            The tree's nodes in pre-order, i.e. the order a top-down directory
            walk visits them.
        """
        tree = self.get_tree()
        if tree is None:
            return
        pending = [tree]
        while pending:
            node = pending.pop()
            yield node
            pending.extend(reversed(node.children))

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the indented name listing one line at a time.

        Each entry is indented by four spaces per level below the root and
        directories carry a trailing ``/``. The root itself is the first line.

        Yields:
            Lines of the listing, each ending with a newline.

        Example:
            >>> tree = FileSystemTree("/path/to/project")  # doctest: +SKIP
            >>> print("".join(tree.stream_tree_representation()), end="")  # doctest: +SKIP
            project/
                a/
                    b.txt
        """
        for node in self.iterate_nodes():
            suffix = "/" if node.is_dir else ""
            yield f"{INDENT * node.depth}{node.display_name}{suffix}\n"

    def get_tree_representation(self) -> str:
        """Get the complete indented name listing as a single string."""
        return "".join(self.stream_tree_representation())

    def get_file_count(self) -> int:
        """Number of non-directory, non-symlink entries in the tree."""
        self.get_tree()
        return self._file_count

    def get_directory_count(self) -> int:
        """Number of directories in the tree, excluding the root."""
        self.get_tree()
        return self._directory_count

    def get_symlink_count(self) -> int:
        """Number of symbolic links listed in the tree."""
        self.get_tree()
        return self._symlink_count

