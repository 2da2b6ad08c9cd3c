"""Tests for custom exceptions."""

import pytest

from dumpfiles.exceptions import (
    DumpFilesError,
    IgnoreFileError,
    OperationInterruptedError,
    OutputFileError,
    RootDirectoryError,
    TraversalError,
)


@pytest.mark.parametrize(
    "error_class, expected_message",
    [
        (RootDirectoryError, "Failed to get absolute path of directory"),
        (OutputFileError, "Failed to create or truncate output file"),
        (IgnoreFileError, "Failed to open ignore file"),
        (TraversalError, "Failed to read directory entry"),
        (OperationInterruptedError, "Interrupted while writing output file"),
    ],
)
def test_default_messages(error_class, expected_message):
    """Each error names the failed operation and the path it was working on."""
    error = error_class("/some/path")

    assert isinstance(error, DumpFilesError)
    assert error.path == "/some/path"
    assert error.message == expected_message
    assert str(error) == f"{expected_message}: /some/path"


def test_custom_message():
    """A custom message replaces the default."""
    error = RootDirectoryError("/tmp/file.txt", "Not a directory")
    assert str(error) == "Not a directory: /tmp/file.txt"


def test_cause_is_chained():
    """Errors raised from an OSError keep it as their cause."""
    with pytest.raises(IgnoreFileError) as exc_info:
        try:
            raise FileNotFoundError(2, "No such file or directory")
        except OSError as e:
            raise IgnoreFileError("/missing/.gitignore") from e

    assert isinstance(exc_info.value.__cause__, FileNotFoundError)
