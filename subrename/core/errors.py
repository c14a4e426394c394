"""
errors.py - Exception Hierarchy

Every error that aborts a run derives from RenameToolError so callers
can catch one type and map it to an exit code.
"""

from pathlib import Path
from typing import Optional


class RenameToolError(Exception):
    """Base class for all errors raised by the renamer"""

    def __init__(self, message: str, src: Optional[Path] = None, dst: Optional[Path] = None):
        super().__init__(message)
        self.src = src
        self.dst = dst


class InvalidInputError(RenameToolError, ValueError):
    """Configuration rejected before any traversal"""


class TraversalError(RenameToolError):
    """Directory walk could not visit an entry"""


class CollisionError(RenameToolError):
    """Destination name is already occupied"""


class RenameError(RenameToolError):
    """Underlying rename failed, or the new name is not usable"""
