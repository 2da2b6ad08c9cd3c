class DumpFilesError(Exception):
    """
    Base class for all unrecoverable errors raised while dumping a directory.

    Every subclass carries the path that caused the failure so that callers can
    report it without parsing the message.

    Attributes:
        path (str): The path the failing operation was working on.

    Example:
        >>> error = DumpFilesError("/tmp/project", "Something went wrong")
        >>> str(error)
        'Something went wrong: /tmp/project'
        >>> error.path
        '/tmp/project'
    """

    def __init__(self, path: str, message: str) -> None:
        """
        Initialize the exception with the failing path and a contextual message.

        Args:
            path (str): The path the failing operation was working on.
            message (str): Short description of the operation that failed.
        """
        self.path = str(path)
        self.message = message
        super().__init__(f"{message}: {self.path}")


class RootDirectoryError(DumpFilesError):
    """
    Exception raised when the directory to dump cannot be canonicalized.

    This covers a root that does not exist, a root that is not a directory, and
    any OS error raised while resolving it to an absolute path.

    Example:
        >>> str(RootDirectoryError("/missing"))
        'Failed to get absolute path of directory: /missing'
    """

    def __init__(self, path: str, message: str = "Failed to get absolute path of directory") -> None:
        super().__init__(path, message)


class OutputFileError(DumpFilesError):
    """
    Exception raised when the output artifact cannot be created or truncated.

    Example:
        >>> str(OutputFileError("/read-only/output.txt"))
        'Failed to create or truncate output file: /read-only/output.txt'
    """

    def __init__(self, path: str, message: str = "Failed to create or truncate output file") -> None:
        super().__init__(path, message)


class IgnoreFileError(DumpFilesError):
    """
    Exception raised when an ignore file cannot be opened or decoded.

    Example:
        >>> str(IgnoreFileError(".gitignore"))
        'Failed to open ignore file: .gitignore'
    """

    def __init__(self, path: str, message: str = "Failed to open ignore file") -> None:
        super().__init__(path, message)


class TraversalError(DumpFilesError):
    """
    Exception raised when a directory entry cannot be read during traversal.

    Unlike unreadable files, which are recorded inline as placeholders, a
    directory that cannot be listed aborts the whole run.

    Example:
        >>> str(TraversalError("/tmp/project/locked"))
        'Failed to read directory entry: /tmp/project/locked'
    """

    def __init__(self, path: str, message: str = "Failed to read directory entry") -> None:
        super().__init__(path, message)


class OperationInterruptedError(DumpFilesError):
    """
    Exception raised when SIGINT is received while the output is being written.

    Example:
        >>> str(OperationInterruptedError("output.txt"))
        'Interrupted while writing output file: output.txt'
    """

    def __init__(self, path: str, message: str = "Interrupted while writing output file") -> None:
        super().__init__(path, message)
