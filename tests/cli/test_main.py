"""Unit tests for the CLI main module."""

import json
import os
from unittest.mock import patch

import pytest

from dumpfiles.cli.main import format_error, main
from dumpfiles.cli.signal_handler import signal_handler
from dumpfiles.exceptions import IgnoreFileError


@pytest.fixture(autouse=True)
def no_signal_handlers():
    """Keep the test process' own SIGINT handler in place."""
    with patch("dumpfiles.cli.main.setup_signal_handling"):
        yield


def test_main_writes_output(project_dir, tmp_path):
    output = tmp_path / "dump.txt"

    main([str(project_dir), "-o", str(output)])

    content = output.read_text(encoding="utf-8")
    assert content.startswith("<tree>\nproject/\n")
    assert ".git" not in content
    assert "<main.py>\n    print('hello')\n" in content


def test_default_output_is_relative_to_cwd(project_dir, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    main([str(project_dir)])

    assert (tmp_path / "output.txt").is_file()
    assert not (project_dir / "output.txt").exists()


def test_output_inside_directory_is_excluded(project_dir, monkeypatch):
    monkeypatch.chdir(project_dir)

    main(["."])

    content = (project_dir / "output.txt").read_text(encoding="utf-8")
    assert "output.txt" not in content


def test_default_gitignore_is_used(project_dir, tmp_path):
    (project_dir / ".gitignore").write_text("build/\n")
    output = tmp_path / "dump.txt"

    main([str(project_dir), "-o", str(output)])

    assert "out.bin" not in output.read_text(encoding="utf-8")


def test_no_gitignore_flag(project_dir, tmp_path):
    (project_dir / ".gitignore").write_text("build/\n")
    output = tmp_path / "dump.txt"

    main([str(project_dir), "-o", str(output), "--no-gitignore", "-g", str(project_dir / ".gitignore")])

    assert "out.bin" in output.read_text(encoding="utf-8")


def test_explicit_ignore_replaces_default(project_dir, tmp_path):
    output = tmp_path / "dump.txt"

    main([str(project_dir), "-o", str(output), "-i", "src\\"])

    content = output.read_text(encoding="utf-8")
    assert "main.py" not in content
    assert ".git/" in content


def test_missing_explicit_gitignore_fails(project_dir, tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([str(project_dir), "-o", str(tmp_path / "dump.txt"), "-g", str(tmp_path / "missing")])

    assert exc_info.value.code == 1
    stderr = capsys.readouterr().err
    assert f"Error: Failed to open ignore file: {tmp_path / 'missing'}" in stderr


def test_missing_directory_fails(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([str(tmp_path / "missing"), "-o", str(tmp_path / "dump.txt")])

    assert exc_info.value.code == 1
    assert "Error: Failed to get absolute path of directory" in capsys.readouterr().err


def test_unwritable_output_fails(project_dir, tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([str(project_dir), "-o", str(tmp_path / "no" / "dir" / "dump.txt")])

    assert exc_info.value.code == 1
    assert "Error: Failed to create or truncate output file" in capsys.readouterr().err


def test_bad_arguments_exit_with_2(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--no-such-option"])

    assert exc_info.value.code == 2


def test_interrupt_exits_with_130(project_dir, tmp_path, capsys):
    signal_handler.sigint_received.set()

    with pytest.raises(SystemExit) as exc_info:
        main([str(project_dir), "-o", str(tmp_path / "dump.txt")])

    assert exc_info.value.code == 130
    assert "Interrupted while writing output file" in capsys.readouterr().err


def test_logs_start_and_finish(project_dir, tmp_path):
    log_file = tmp_path / "run.log"

    main([str(project_dir), "-o", str(tmp_path / "dump.txt"), "--log-file", str(log_file)])

    records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    events = [record["event"] for record in records]
    assert events == ["processing_started", "processing_finished"]
    finished = records[-1]
    assert finished["files"] == 4
    assert finished["directories"] == 3
    assert finished["unreadable"] == 1


def test_verbose_logs_exclusions(project_dir, tmp_path):
    log_file = tmp_path / "run.log"

    main([str(project_dir), "-o", str(tmp_path / "dump.txt"), "-v", "--log-file", str(log_file)])

    events = {json.loads(line)["event"] for line in log_file.read_text(encoding="utf-8").splitlines()}
    assert {"output_excluded", "pattern_expanding", "path_excluded"} <= events


def test_quiet_suppresses_info(project_dir, tmp_path):
    log_file = tmp_path / "run.log"

    main([str(project_dir), "-o", str(tmp_path / "dump.txt"), "-q", "--log-file", str(log_file)])

    assert log_file.read_text(encoding="utf-8") == ""


def test_format_error_includes_cause():
    try:
        raise IgnoreFileError("/x/.gitignore") from FileNotFoundError(2, "No such file or directory")
    except IgnoreFileError as e:
        message = format_error(e)

    assert message == "Failed to open ignore file: /x/.gitignore: [Errno 2] No such file or directory"


def test_undecodable_file_name(project_dir, tmp_path):
    try:
        with open(os.fsencode(project_dir) + b"/bad\xff.txt", "w") as f:
            f.write("fine")
    except (OSError, UnicodeError):
        pytest.skip("File system does not accept names that are not valid UTF-8")
    output = tmp_path / "dump.txt"

    main([str(project_dir), "-o", str(output)])

    assert "<bad�.txt>\nfine\n</bad�.txt>\n" in output.read_text(encoding="utf-8")
