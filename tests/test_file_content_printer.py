"""Unit tests for the FileContentPrinter class."""

import logging
import re
from pathlib import Path
from unittest.mock import patch

import pytest

from dumpfiles.exclusion_rules.path_set_rules import PathSetExclusionRules
from dumpfiles.file_content_printer import DirectoryFrame, FileContentPrinter, read_text, split_lines
from dumpfiles.file_system_tree.file_system_tree import FileSystemTree


def render(root: Path, excluded=()) -> str:
    tree = FileSystemTree(root, PathSetExclusionRules(excluded))
    return "".join(FileContentPrinter(tree).yield_file_contents())


def test_nested_blocks(tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "b.txt").write_text("hi")

    assert render(tmp_path) == "<a>\n    <b.txt>\n    hi\n    </b.txt>\n</a>\n\n"


def test_root_files_and_sibling_directories(tmp_path):
    (tmp_path / "top.txt").write_text("one\ntwo\n")
    (tmp_path / "x" / "y").mkdir(parents=True)
    (tmp_path / "x" / "y" / "deep.txt").write_text("deep")
    (tmp_path / "z").mkdir()
    (tmp_path / "z" / "last.txt").write_text("")

    assert render(tmp_path) == (
        "<top.txt>\n"
        "one\n"
        "two\n"
        "</top.txt>\n"
        "<x>\n"
        "    <y>\n"
        "        <deep.txt>\n"
        "        deep\n"
        "        </deep.txt>\n"
        "    </y>\n"
        "\n"
        "</x>\n"
        "\n"
        "<z>\n"
        "    <last.txt>\n"
        "    </last.txt>\n"
        "</z>\n"
        "\n"
    )


def test_empty_directories_get_no_block(tmp_path):
    (tmp_path / "empty").mkdir()
    (tmp_path / "file.txt").write_text("x")

    assert render(tmp_path) == "<file.txt>\nx\n</file.txt>\n"


def test_markers_are_balanced(project_dir):
    output = render(project_dir)

    opens = re.findall(r"^\s*<([^/][^>]*)>$", output, flags=re.MULTILINE)
    closes = re.findall(r"^\s*</([^>]+)>$", output, flags=re.MULTILINE)
    assert sorted(opens) == sorted(closes)


def test_invalid_utf8_gets_placeholder(project_dir):
    output = render(project_dir)

    expected = f"    <out.bin>\n    Binary or inaccessible file: {project_dir / 'build' / 'out.bin'}\n    </out.bin>\n"
    assert expected in output


def test_unreadable_file_does_not_abort(project_dir):
    real_read_bytes = Path.read_bytes

    def read_bytes(path):
        if path.name == "b.txt":
            raise PermissionError(13, "Permission denied")
        return real_read_bytes(path)

    tree = FileSystemTree(project_dir)
    printer = FileContentPrinter(tree)
    with patch.object(Path, "read_bytes", read_bytes):
        output = "".join(printer.yield_file_contents())

    assert f"Binary or inaccessible file: {project_dir / 'a' / 'b.txt'}" in output
    assert "print('bye')" in output
    assert printer.unreadable_count == 2
    assert printer.file_count == 5


def test_symlinks_produce_no_block(tmp_path):
    (tmp_path / "real.txt").write_text("real")
    try:
        (tmp_path / "alias.txt").symlink_to(tmp_path / "real.txt")
    except (OSError, NotImplementedError):
        pytest.skip("Symlinks not supported")

    assert render(tmp_path) == "<real.txt>\nreal\n</real.txt>\n"


def test_excluded_entries_are_skipped(project_dir):
    output = render(project_dir, [project_dir / "build", project_dir / "a" / ".git"])

    assert "out.bin" not in output
    assert "config" not in output
    assert "<a>\n    <b.txt>\n    hi\n    </b.txt>\n</a>\n\n" in output


def test_counters(project_dir):
    tree = FileSystemTree(project_dir, PathSetExclusionRules([project_dir / "build"]))
    printer = FileContentPrinter(tree)
    "".join(printer.yield_file_contents())

    assert printer.file_count == 4
    assert printer.unreadable_count == 0
    assert printer.line_count == 5


def test_crlf_content(tmp_path):
    (tmp_path / "win.txt").write_bytes(b"first\r\nsecond\r\n")

    assert render(tmp_path) == "<win.txt>\nfirst\nsecond\n</win.txt>\n"


def test_split_lines_keeps_blank_lines():
    assert split_lines("a\n\nb") == ["a", "", "b"]
    assert split_lines("\n") == [""]
    assert split_lines("lone\r") == ["lone\r"]


def test_read_text_logs_failures(tmp_path, caplog):
    bad = tmp_path / "bad.bin"
    bad.write_bytes(b"\x80")

    with caplog.at_level(logging.DEBUG, logger="dumpfiles"):
        assert read_text(bad) is None
    assert "unreadable_file" in caplog.text
    assert read_text(tmp_path / "missing") is None


def test_directory_frame():
    frame = DirectoryFrame(("a", "b"))

    assert frame.name == "b"
    assert frame.depth == 1
    assert frame.contains(("a", "b"))
    assert frame.contains(("a", "b", "c"))
    assert not frame.contains(("a",))
    assert not frame.contains(("a", "bc"))
