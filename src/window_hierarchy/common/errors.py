# error types raised by the hierarchy model
from typing import Sequence

class HierarchyError(Exception):
    """
    Base class for every error raised by window_hierarchy.
    NOTE: "not found" is never an error, queries return None or an empty tuple instead.
    """

class InvariantViolationError(HierarchyError, ValueError):
    """
    The captured hierarchy breaks a domain invariant, i.e. the dump is malformed.
    - Fatal: raised straight to the caller, never caught or retried inside the package.
    """

    def __init__(self, message: str, offending: Sequence[str] = ()):
        super().__init__(message)
        self.offending = tuple(offending)
