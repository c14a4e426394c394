"""
core - Recursive Rename Core Module

Provides candidate collection, rename planning, execution and event reporting
"""

from .errors import (
    RenameToolError,
    InvalidInputError,
    TraversalError,
    CollisionError,
    RenameError,
)

from .models_fs import (
    RenameOptions,
    RenameOp,
    RenameResult,
    Outcome,
)

from .text_match import (
    make_matcher,
    replace_text,
    is_valid_filename,
)

from .scan_files import collect

from .plan_rename import (
    plan_replace_rename,
    PlannedRename,
    OccupancyTracker,
)

from .exec_rename import apply_renames

from .reporter import (
    RenameEvent,
    Reporter,
    NullReporter,
    ListReporter,
    CallbackReporter,
    ConsoleReporter,
    LoggingReporter,
    MultiReporter,
)

from .renamer import (
    Renamer,
    rename,
    rename_with_options,
)

__all__ = [
    # Errors
    "RenameToolError",
    "InvalidInputError",
    "TraversalError",
    "CollisionError",
    "RenameError",

    # Data models
    "RenameOptions",
    "RenameOp",
    "RenameResult",
    "Outcome",

    # Text processing
    "make_matcher",
    "replace_text",
    "is_valid_filename",

    # Scanning
    "collect",

    # Planning
    "plan_replace_rename",
    "PlannedRename",
    "OccupancyTracker",

    # Execution
    "apply_renames",

    # Reporting
    "RenameEvent",
    "Reporter",
    "NullReporter",
    "ListReporter",
    "CallbackReporter",
    "ConsoleReporter",
    "LoggingReporter",
    "MultiReporter",

    # Entry points
    "Renamer",
    "rename",
    "rename_with_options",
]
