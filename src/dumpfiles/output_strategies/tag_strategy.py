"""Tag-based output strategy for the content section."""

from .base_strategy import OutputStrategy

INDENT = "    "


class TagOutputStrategy(OutputStrategy):
    """Formats blocks as ``<name>`` / ``</name>`` pairs indented four spaces per level.

    Names and file content are written verbatim, without any escaping. A
    blank line follows every closing directory marker.

    Example:
        >>> strategy = TagOutputStrategy()
        >>> print(strategy.format_directory_start("src", 0), end="")
        <src>
        >>> print(strategy.format_file_start("main.py", 1), end="")
            <main.py>
        >>> print(strategy.format_file_line("print('hi')", 1), end="")
            print('hi')
        >>> print(strategy.format_file_end("main.py", 1), end="")
            </main.py>
        >>> strategy.format_directory_end("src", 0)
        '</src>\\n\\n'
        >>> strategy.format_unreadable("/project/logo.png", 0)
        'Binary or inaccessible file: /project/logo.png\\n'
    """

    def __init__(self, indent: str = INDENT) -> None:
        self.indent = indent

    def format_directory_start(self, name: str, depth: int) -> str:
        return f"{self.indent * depth}<{name}>\n"

    def format_directory_end(self, name: str, depth: int) -> str:
        return f"{self.indent * depth}</{name}>\n\n"

    def format_file_start(self, name: str, depth: int) -> str:
        return f"{self.indent * depth}<{name}>\n"

    def format_file_line(self, line: str, depth: int) -> str:
        return f"{self.indent * depth}{line}\n"

    def format_file_end(self, name: str, depth: int) -> str:
        return f"{self.indent * depth}</{name}>\n"

    def format_unreadable(self, path: str, depth: int) -> str:
        return f"{self.indent * depth}Binary or inaccessible file: {path}\n"
