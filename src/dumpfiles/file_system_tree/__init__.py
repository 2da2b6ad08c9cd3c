"""File system tree representation with configurable exclusion rules.

This module provides classes for building a filtered tree of a directory
structure once and iterating over it for every section of the output.
"""
