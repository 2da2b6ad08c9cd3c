"""Unit tests for the FileSystemNode class."""

from pathlib import Path

from dumpfiles.file_system_tree.file_system_node import FileSystemNode


def test_file_system_node_initialization():
    """Test basic initialization of FileSystemNode."""
    file_node = FileSystemNode("test_file.txt", abs_path=Path("/p/test_file.txt"))
    assert file_node.name == "test_file.txt"
    assert file_node.abs_path == Path("/p/test_file.txt")
    assert not file_node.is_dir
    assert not file_node.is_symlink
    assert file_node.is_file

    dir_node = FileSystemNode("test_dir", is_dir=True)
    assert dir_node.is_dir
    assert not dir_node.is_file
    assert dir_node.abs_path == Path("test_dir")

    symlink_node = FileSystemNode("test_link", is_symlink=True)
    assert symlink_node.is_symlink
    assert not symlink_node.is_file


def test_special_file_is_not_readable():
    """Entries that are neither directories nor regular files are never read."""
    fifo = FileSystemNode("pipe", is_file=False)
    assert not fifo.is_dir
    assert not fifo.is_file


def test_file_system_node_parent_child():
    """Test parent-child relationships and derived paths."""
    root = FileSystemNode("project", is_dir=True)
    src = FileSystemNode("src", parent=root, is_dir=True)
    main = FileSystemNode("main.py", parent=src)

    assert main.parent is src
    assert src.children == (main,)
    assert root.depth == 0
    assert main.depth == 2
    assert root.relative_parts == ()
    assert main.relative_parts == ("src", "main.py")
