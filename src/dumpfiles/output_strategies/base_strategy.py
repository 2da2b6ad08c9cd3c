"""Output strategy base class defining the interface for content section formatting.

The content section nests one block per directory and one block per file.
A strategy decides how the opening and closing markers of those blocks look
and how file lines are laid out; the content printer decides when each of
them is emitted.
"""

from abc import ABC, abstractmethod


class OutputStrategy(ABC):
    """Abstract base class for content section formatting strategies.

    Every method receives the nesting depth of the block it formats (0 for
    entries directly under the root) and returns a complete chunk of output,
    newlines included.

    Example:
        >>> class BracketStrategy(OutputStrategy):
        ...     def format_directory_start(self, name, depth):
        ...         return f"[{name}\\n"
        ...     def format_directory_end(self, name, depth):
        ...         return f"{name}]\\n"
        ...     def format_file_start(self, name, depth):
        ...         return f"({name}\\n"
        ...     def format_file_line(self, line, depth):
        ...         return line + "\\n"
        ...     def format_file_end(self, name, depth):
        ...         return f"{name})\\n"
        ...     def format_unreadable(self, path, depth):
        ...         return f"?{path}\\n"
        >>> print(BracketStrategy().format_directory_start("src", 0), end="")
        [src
    """

    @abstractmethod
    def format_directory_start(self, name: str, depth: int) -> str:
        """Format the marker that opens a directory block."""
        pass

    @abstractmethod
    def format_directory_end(self, name: str, depth: int) -> str:
        """Format the marker that closes a directory block."""
        pass

    @abstractmethod
    def format_file_start(self, name: str, depth: int) -> str:
        """Format the marker that opens a file block."""
        pass

    @abstractmethod
    def format_file_line(self, line: str, depth: int) -> str:
        """Format one line of a file's content.

        Args:
            line: The line without its line terminator.
            depth: Nesting depth of the file block the line belongs to.
        """
        pass

    @abstractmethod
    def format_file_end(self, name: str, depth: int) -> str:
        """Format the marker that closes a file block."""
        pass

    @abstractmethod
    def format_unreadable(self, path: str, depth: int) -> str:
        """Format the placeholder written instead of the content of an unreadable file.

        Args:
            path: Absolute path of the file that could not be read as text.
            depth: Nesting depth of the file block.
        """
        pass
