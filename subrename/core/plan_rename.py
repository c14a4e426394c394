"""
plan_rename.py - Rename Plan Generation Module

Responsibilities:
- Compute the destination of every candidate (base name only)
- Order candidates deepest first
- Track destination occupancy across one run
"""

from pathlib import Path
from typing import List, NamedTuple, Sequence, Set
import os

from .models_fs import RenameOptions
from .text_match import replace_text


class OccupancyTracker:
    """
    Occupancy of destination paths within one run

    A path is occupied if it was claimed by an earlier rename of this run,
    or if it exists on disk and no earlier rename of this run vacated it.
    Dry-run and real runs therefore reach the same collision decisions.
    """

    def __init__(self):
        self.claimed: Set[str] = set()
        self.vacated: Set[str] = set()

    @staticmethod
    def _key(path: Path) -> str:
        """Normalize path for comparison"""
        return os.path.normcase(os.path.abspath(path))

    @staticmethod
    def is_case_only_change(src: Path, dst: Path) -> bool:
        """Whether dst is src itself under another casing (case-insensitive FS)"""
        if src.name.lower() != dst.name.lower():
            return False
        try:
            a = os.lstat(src)
            b = os.lstat(dst)
        except OSError:
            return False
        return (a.st_dev, a.st_ino) == (b.st_dev, b.st_ino)

    def is_occupied(self, src: Path, dst: Path) -> bool:
        """Check if dst is taken by something other than src"""
        key = self._key(dst)
        if key in self.claimed:
            return True
        if key in self.vacated:
            return False
        if not os.path.lexists(dst):
            return False
        return not self.is_case_only_change(src, dst)

    def mark_renamed(self, src: Path, dst: Path) -> None:
        """Record that src moved to dst"""
        src_key = self._key(src)
        dst_key = self._key(dst)
        self.claimed.discard(src_key)
        self.vacated.add(src_key)
        self.vacated.discard(dst_key)
        self.claimed.add(dst_key)


class PlannedRename(NamedTuple):
    """Source path and the base name it should get"""
    src: Path
    new_name: str

    @property
    def dst(self) -> Path:
        return self.src.parent / self.new_name

    @property
    def is_unchanged(self) -> bool:
        return self.new_name == self.src.name


def new_name_for(name: str, options: RenameOptions) -> str:
    """Apply the substring replacement to a base name"""
    return replace_text(name, options.old, options.new, options.case_sensitive)


def plan_replace_rename(
    candidates: Sequence[Path],
    options: RenameOptions,
) -> List[PlannedRename]:
    """
    Generate planned renames in apply order

    Candidates come from a pre-order walk, so reversing them puts every
    descendant before its ancestors.

    Args:
        candidates: Paths in walk order
        options: Rename options

    Returns:
        Planned renames, deepest first
    """
    return [
        PlannedRename(Path(src), new_name_for(Path(src).name, options))
        for src in reversed(candidates)
    ]
