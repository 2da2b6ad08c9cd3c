"""Node representation for file system elements in the tree."""

import os
from pathlib import Path
from typing import Any, Optional, Tuple

from anytree import Node


def display_name(name: str) -> str:
    """Render a file name for output, replacing bytes that are not valid UTF-8.

    Names that the OS could not decode reach Python with surrogate escapes,
    which a UTF-8 writer refuses. They are written with U+FFFD instead.

    Example:
        >>> display_name("caf\\udce9") == "caf\\ufffd"
        True
        >>> display_name("main.py")
        'main.py'
    """
    return os.fsencode(name).decode("utf-8", "replace")


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file, directory or symlink in the filesystem tree.

    Extends anytree.Node with the entry's absolute path and its kind. Tree
    traversal (``depth``, ``children``, ``path``) is inherited from anytree.

    Attributes:
        name (str): The base name of the entry.
        abs_path (Path): Absolute path of the entry on disk.
        is_dir (bool): True if this node represents a directory.
        is_symlink (bool): True if this node represents a symbolic link.
        is_file (bool): True if this node is a regular file whose contents can be dumped.
        parent (Optional[FileSystemNode]): The parent node in the tree.

    Example:
        >>> root = FileSystemNode("project", abs_path=Path("/project"), is_dir=True)
        >>> child = FileSystemNode("main.py", parent=root, abs_path=Path("/project/main.py"))
        >>> child.depth
        1
        >>> child.relative_parts
        ('main.py',)
        >>> child.is_file
        True
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        abs_path: Optional[Path] = None,
        is_dir: bool = False,
        is_symlink: bool = False,
        is_file: Optional[bool] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.abs_path = abs_path if abs_path is not None else Path(name)
        self.is_dir = is_dir
        self.is_symlink = is_symlink
        # Regular files only; FIFOs, sockets and devices are listed but never read.
        self.is_file = (not is_dir and not is_symlink) if is_file is None else is_file

    @property
    def relative_parts(self) -> Tuple[str, ...]:
        """Names of the entry and its ancestors, excluding the root, from the top down."""
        return tuple(node.name for node in self.path[1:])

    @property
    def display_name(self) -> str:
        """The entry's name as it is written to the output."""
        return display_name(self.name)
