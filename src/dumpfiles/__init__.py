"""Directory dumping utilities.

This package serializes a directory's structure and the contents of its files
into a single text artifact, honoring explicit ignore patterns and an optional
.gitignore-style ignore file.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dumpfiles")
except PackageNotFoundError:
    __version__ = "unknown"
