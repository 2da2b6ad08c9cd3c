"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .glob_translation import gitignore_to_glob, normalize_cli_pattern
from .ignore_file import parse_ignore_file
from .path_set_rules import PathSetExclusionRules, generate_exclusion_set

__all__ = [
    "BaseExclusionRules",
    "PathSetExclusionRules",
    "generate_exclusion_set",
    "gitignore_to_glob",
    "normalize_cli_pattern",
    "parse_ignore_file",
]
