"""Test configuration and fixtures for dumpfiles."""

import logging
from pathlib import Path

import pytest

from dumpfiles.cli.signal_handler import signal_handler
from dumpfiles.logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_cli_state():
    """Undo what a CLI run leaves behind: log handlers, log level and the SIGINT flag."""
    yield
    stdlib_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(stdlib_logger.handlers):
        stdlib_logger.removeHandler(handler)
        handler.close()
    stdlib_logger.setLevel(logging.NOTSET)
    signal_handler.sigint_received.clear()


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create a small project tree.

    project/
        README.md        "# Demo\\n"
        a/
            .git/
                config   "[core]\\n"
            b.txt        "hi"
        build/
            out.bin      not valid UTF-8
        src/
            main.py      two lines
    """
    root = tmp_path / "project"
    (root / "a" / ".git").mkdir(parents=True)
    (root / "a" / "b.txt").write_text("hi", encoding="utf-8")
    (root / "a" / ".git" / "config").write_text("[core]\n", encoding="utf-8")
    (root / "build").mkdir()
    (root / "build" / "out.bin").write_bytes(b"\xff\xfe\x00\x81")
    (root / "src").mkdir()
    (root / "src" / "main.py").write_text("print('hello')\nprint('bye')\n", encoding="utf-8")
    (root / "README.md").write_text("# Demo\n", encoding="utf-8")
    return root.resolve()
