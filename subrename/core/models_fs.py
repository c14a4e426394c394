"""
models_fs.py - Core Data Structure Definitions

Contains:
- RenameOptions: Run configuration
- Outcome: Per-candidate result kind
- RenameOp: Single rename operation and its outcome
- RenameResult: Outcomes of a whole run
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple
from enum import Enum

from .errors import InvalidInputError


class Outcome(Enum):
    """Outcome of a single candidate"""
    RENAMED = "renamed"
    WOULD_RENAME = "would_rename"            # Dry-run
    SKIPPED_UNCHANGED = "skipped_unchanged"  # New name equals old name
    SKIPPED_COLLISION = "skipped_collision"  # Destination occupied
    SKIPPED_INVALID = "skipped_invalid"      # New name is not a legal base name
    FAILED = "failed"                        # os.rename raised

    @property
    def is_success(self) -> bool:
        return self in (Outcome.RENAMED, Outcome.WOULD_RENAME)

    @property
    def is_skip(self) -> bool:
        return self in (
            Outcome.SKIPPED_UNCHANGED,
            Outcome.SKIPPED_COLLISION,
            Outcome.SKIPPED_INVALID,
        )


@dataclass(frozen=True)
class RenameOptions:
    """Rename options configuration"""
    old: str                        # Substring to replace (must be non-empty)
    new: str = ""                   # Replacement (may be empty)
    case_sensitive: bool = True
    dry_run: bool = False           # Preview only, do not actually execute
    skip_errors: bool = False       # Turn per-entry fatal errors into skips
    follow_symlinks: bool = False   # Descend into symlinked directories

    def validate(self) -> None:
        """Reject options that cannot drive a run"""
        if not self.old:
            raise InvalidInputError("Old substring cannot be empty")


@dataclass
class RenameOp:
    """Single rename operation"""
    src: Path                       # Source path
    dst: Path                       # Destination path
    outcome: Outcome
    message: str = ""               # Warning or error text


@dataclass
class RenameResult:
    """Outcomes of one run, in apply order (deepest first)"""
    ops: List[RenameOp] = field(default_factory=list)
    traversal_errors: List[Tuple[Path, str]] = field(default_factory=list)  # (path, error_msg)
    dry_run: bool = False

    @property
    def success(self) -> List[RenameOp]:
        return [op for op in self.ops if op.outcome.is_success]

    @property
    def skipped(self) -> List[RenameOp]:
        return [op for op in self.ops if op.outcome.is_skip]

    @property
    def failed(self) -> List[RenameOp]:
        return [op for op in self.ops if op.outcome is Outcome.FAILED]

    @property
    def success_count(self) -> int:
        return len(self.success)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    @property
    def collision_count(self) -> int:
        return sum(1 for op in self.ops if op.outcome is Outcome.SKIPPED_COLLISION)

    def add(self, src: Path, dst: Path, outcome: Outcome, message: str = "") -> RenameOp:
        """Record an outcome"""
        op = RenameOp(src=src, dst=dst, outcome=outcome, message=message)
        self.ops.append(op)
        return op

    def summary(self) -> str:
        """Generate summary"""
        title = "Preview Result:" if self.dry_run else "Execution Result:"
        label = "Would rename" if self.dry_run else "Renamed"
        lines = [
            title,
            f"  - {label}: {self.success_count}",
            f"  - Skipped: {self.skipped_count} (collisions: {self.collision_count})",
            f"  - Failed: {self.failed_count}",
        ]
        if self.traversal_errors:
            lines.append(f"  - Unreadable entries: {len(self.traversal_errors)}")
        if self.failed:
            lines.append("Failure Details:")
            for op in self.failed[:10]:  # Show at most 10
                lines.append(f"  - {op.src.name} -> {op.dst.name}: {op.message}")
            if len(self.failed) > 10:
                lines.append(f"  ... and {len(self.failed) - 10} more failures")
        return "\n".join(lines)
