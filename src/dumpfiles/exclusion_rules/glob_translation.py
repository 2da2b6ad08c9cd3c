"""Translation of .gitignore-style lines into glob expressions.

The globs produced here are expanded against the filesystem by
:mod:`dumpfiles.exclusion_rules.path_set_rules` using ``pathspec``'s
git-wildmatch semantics, where ``**`` spans any number of directories and a
leading ``/`` anchors a glob to the scan root.
"""

NEGATION_PREFIX = "!"
ANY_DEPTH_PREFIX = "**/"
DIRECTORY_SUFFIX = "/**"


def gitignore_to_glob(pattern: str) -> str:
    """Convert one ignore-file line into a glob expression.

    The line must already be trimmed and must not be blank or a comment.
    Rules are applied in order:

    1. ``!pattern`` translates ``pattern`` and keeps the ``!`` in front of it.
    2. ``name/`` only matches directories, so it becomes ``name/**`` (the
       directory itself and everything beneath it).
    3. ``*suffix`` without a ``/`` matches at any depth: ``**/*suffix``.
    4. Anything else passes through unchanged, ``**`` segments included.

    Finally, a glob that is not anchored with a leading ``/`` and does not
    already start with a wildcard gets a ``**/`` prefix so it matches at any
    depth. Malformed input is never rejected here; it surfaces later as a
    pattern that fails to compile or matches nothing.

    Args:
        pattern: A trimmed, non-empty, non-comment ignore-file line.

    Returns:
        The equivalent glob expression.

    Example:
        >>> gitignore_to_glob("*.log")
        '**/*.log'
        >>> gitignore_to_glob("build/")
        '**/build/**'
        >>> gitignore_to_glob("/dist/")
        '/dist/**'
        >>> gitignore_to_glob("/TODO")
        '/TODO'
        >>> gitignore_to_glob("docs/**/*.md")
        '**/docs/**/*.md'
        >>> gitignore_to_glob("!keep.log")
        '!**/keep.log'
    """
    if pattern.startswith(NEGATION_PREFIX):
        return NEGATION_PREFIX + gitignore_to_glob(pattern[len(NEGATION_PREFIX) :])  # noqa: E203

    if not pattern:
        return pattern

    if pattern.endswith("/"):
        glob_pattern = pattern.rstrip("/") + DIRECTORY_SUFFIX
    elif pattern.startswith("*") and "/" not in pattern:
        return ANY_DEPTH_PREFIX + pattern
    else:
        glob_pattern = pattern

    if not pattern.startswith("/") and not glob_pattern.startswith("*"):
        glob_pattern = ANY_DEPTH_PREFIX + glob_pattern

    return glob_pattern


def normalize_cli_pattern(pattern: str) -> str:
    """Normalize a pattern given on the command line before translation.

    Backslash separators become ``/`` and trailing slashes are stripped, so
    ``build\\`` and ``build/`` both mean ``build``.

    Example:
        >>> normalize_cli_pattern("vendor\\\\cache/")
        'vendor/cache'
        >>> normalize_cli_pattern(".git*")
        '.git*'
    """
    return pattern.replace("\\", "/").rstrip("/")


def is_negated(glob_pattern: str) -> bool:
    """Return True if a translated glob re-includes the paths it matches.

    Example:
        >>> is_negated("!**/keep.log")
        True
        >>> is_negated("**/*.log")
        False
    """
    return glob_pattern.startswith(NEGATION_PREFIX)
