"""Command-line interface for dumpfiles."""
