"""
exec_rename.py - Rename Execution Module

Responsibilities:
- Apply planned renames deepest first
- Collision detection, skip-or-fail error policy
- dry_run support
"""

from pathlib import Path
from typing import Optional, Sequence
import uuid
import os

from .errors import CollisionError, RenameError
from .models_fs import Outcome, RenameOptions, RenameResult
from .plan_rename import OccupancyTracker, plan_replace_rename
from .reporter import (
    Reporter, RenameEvent,
    RENAMED, WOULD_RENAME, SKIPPED, FAILED, SUMMARY,
)
from .text_match import is_valid_filename


def _generate_temp_name(original: Path) -> Path:
    """Generate temporary filename"""
    unique_id = uuid.uuid4().hex[:8]
    temp_name = f".__tmp_rename__{unique_id}__{original.name}"
    return original.parent / temp_name


def _rename_entry(src: Path, dst: Path) -> None:
    """
    Rename src to dst

    A case-only change on a case-insensitive filesystem goes through a
    temporary sibling name, otherwise the OS may treat it as a no-op.
    """
    if os.path.lexists(dst) and OccupancyTracker.is_case_only_change(src, dst):
        temp_path = _generate_temp_name(src)
        os.rename(src, temp_path)
        try:
            os.rename(temp_path, dst)
        except OSError:
            # Put the entry back before reporting the failure
            os.rename(temp_path, src)
            raise
        return

    os.rename(src, dst)


def apply_renames(
    candidates: Sequence[Path],
    options: RenameOptions,
    reporter: Optional[Reporter] = None,
    result: Optional[RenameResult] = None,
) -> RenameResult:
    """
    Rename every candidate, deepest first

    Args:
        candidates: Paths in walk order (as returned by collect)
        options: Rename options
        reporter: Event sink
        result: Result to append to (a new one is created if omitted)

    Returns:
        Per-candidate outcomes

    Raises:
        CollisionError: Destination occupied and skip_errors is off
        RenameError: New name unusable or os.rename failed, and skip_errors is off
    """
    reporter = reporter or Reporter()
    if result is None:
        result = RenameResult(dry_run=options.dry_run)

    tracker = OccupancyTracker()

    for planned in plan_replace_rename(candidates, options):
        src, dst = planned.src, planned.dst

        if planned.is_unchanged:
            result.add(src, dst, Outcome.SKIPPED_UNCHANGED, "name unchanged")
            reporter.emit(RenameEvent(SKIPPED, src=src, dst=dst, message="name unchanged"))
            continue

        valid, error = is_valid_filename(planned.new_name)
        if not valid:
            reporter.emit(RenameEvent(SKIPPED, src=src, dst=dst, message=error))
            if not options.skip_errors:
                raise RenameError(f"Cannot rename {src}: {error}", src=src, dst=dst)
            result.add(src, dst, Outcome.SKIPPED_INVALID, error)
            continue

        if tracker.is_occupied(src, dst):
            message = "destination already exists"
            reporter.emit(RenameEvent(SKIPPED, src=src, dst=dst, message=message))
            if not options.skip_errors:
                raise CollisionError(f"Destination already exists: {src} -> {dst}", src=src, dst=dst)
            result.add(src, dst, Outcome.SKIPPED_COLLISION, message)
            continue

        if options.dry_run:
            tracker.mark_renamed(src, dst)
            result.add(src, dst, Outcome.WOULD_RENAME)
            reporter.emit(RenameEvent(WOULD_RENAME, src=src, dst=dst))
            continue

        try:
            _rename_entry(src, dst)
        except OSError as e:
            reporter.emit(RenameEvent(FAILED, src=src, dst=dst, message=str(e)))
            if not options.skip_errors:
                raise RenameError(f"Rename failed {src} -> {dst}: {e}", src=src, dst=dst) from e
            result.add(src, dst, Outcome.FAILED, str(e))
            continue

        tracker.mark_renamed(src, dst)
        result.add(src, dst, Outcome.RENAMED)
        reporter.emit(RenameEvent(RENAMED, src=src, dst=dst))

    reporter.emit(RenameEvent(SUMMARY, message=result.summary()))
    return result
