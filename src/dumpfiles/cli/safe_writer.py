"""Signal-aware output writing for the dumpfiles CLI."""

import types
from pathlib import Path
from typing import Optional, Type

from dumpfiles.cli.signal_handler import signal_handler
from dumpfiles.exceptions import OperationInterruptedError, OutputFileError
from dumpfiles.types import PathType


class SafeWriter:
    """Buffered UTF-8 writer for the output artifact that stops on SIGINT.

    The file is created or truncated when the writer is constructed and stays
    open until :meth:`close`, which flushes everything written.

    Attributes:
        path (Path): The output file.
    """

    def __init__(self, path: PathType):
        """Open the output file.

        Args:
            path: File to create or truncate.

        Raises:
            OutputFileError: If the file cannot be opened for writing.
        """
        self.path = Path(path)
        self._closed = False
        try:
            self._file_obj = self.path.open("w", encoding="utf-8", newline="")
        except OSError as e:
            raise OutputFileError(str(self.path)) from e

    def write(self, data: str) -> None:
        """Write data unless an interrupt has been received.

        Raises:
            OperationInterruptedError: If SIGINT was received.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")
        if signal_handler.sigint_received.is_set():
            raise OperationInterruptedError(str(self.path))
        self._file_obj.write(data)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._file_obj.close()

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Close the file.

        An error raised while closing is only propagated when the block
        itself finished without one.
        """
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
