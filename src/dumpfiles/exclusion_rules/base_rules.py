from abc import ABC, abstractmethod

from dumpfiles.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for path exclusion rules.

    Exclusion rules are consulted by the directory walk for every entry before
    it is visited. Returning True for a directory prunes it: none of its
    descendants are visited or checked.

    Example:
        >>> class NoTmpRules(BaseExclusionRules):
        ...     def exclude(self, path):
        ...         return str(path).endswith('.tmp')
        >>> rules = NoTmpRules()
        >>> rules.exclude("/project/build/cache.tmp")
        True
        >>> rules.exclude("/project/main.py")
        False
        >>> rules.has_rules()
        True
    """

    @abstractmethod
    def exclude(self, path: PathType) -> bool:
        """
        Determine whether a path should be left out of the output.

        Args:
            path: The absolute path of the file or directory being visited.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def has_rules(self) -> bool:
        """
        Report whether these rules can exclude anything at all.

        Implementations that can cheaply tell they are empty override this so
        the walk can skip the per-entry check.

        Returns:
            bool: True unless the implementation knows it excludes nothing.
        """
        return True
