"""
subrename - Recursive Substring Rename Tool

Renames every file and directory under a root whose name contains a
substring, replacing it with another (possibly empty) substring.
"""

from .core import (
    RenameOptions,
    RenameResult,
    Outcome,
    Renamer,
    rename,
    rename_with_options,
    RenameToolError,
    InvalidInputError,
    TraversalError,
    CollisionError,
    RenameError,
)

__version__ = "1.0.0"

__all__ = [
    "RenameOptions",
    "RenameResult",
    "Outcome",
    "Renamer",
    "rename",
    "rename_with_options",
    "RenameToolError",
    "InvalidInputError",
    "TraversalError",
    "CollisionError",
    "RenameError",
    "__version__",
]
