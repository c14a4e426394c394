"""
renamer.py - Recursive Substring Renamer

Two phases: collect every matching entry in one walk, then apply the
renames deepest first so no pending path is invalidated by renaming
one of its ancestors.
"""

from pathlib import Path
from typing import Callable, Optional, Sequence, Tuple, Union

from .exec_rename import apply_renames
from .models_fs import RenameOptions, RenameResult
from .reporter import Reporter
from .scan_files import collect
from .text_match import make_matcher


PathLike = Union[str, Path]


class Renamer:
    """Renames entries under a root whose names contain a substring"""

    def __init__(self, options: RenameOptions, reporter: Optional[Reporter] = None):
        options.validate()
        self.options = options
        self.reporter = reporter or Reporter()

    @property
    def matcher(self) -> Callable[[str], bool]:
        return make_matcher(self.options.old, self.options.case_sensitive)

    def collect(self, root: PathLike, result: Optional[RenameResult] = None) -> Tuple[Path, ...]:
        """Walk root and return the candidates in walk order"""
        errors = result.traversal_errors if result is not None else None
        return collect(
            Path(root),
            self.matcher,
            skip_errors=self.options.skip_errors,
            follow_symlinks=self.options.follow_symlinks,
            reporter=self.reporter,
            errors=errors,
        )

    def apply(self, candidates: Sequence[Path], result: Optional[RenameResult] = None) -> RenameResult:
        """Rename candidates deepest first"""
        return apply_renames(candidates, self.options, reporter=self.reporter, result=result)

    def run(self, root: PathLike) -> RenameResult:
        """Collect then apply"""
        result = RenameResult(dry_run=self.options.dry_run)
        candidates = self.collect(root, result)
        return self.apply(candidates, result)


def rename_with_options(
    root: PathLike,
    options: RenameOptions,
    reporter: Optional[Reporter] = None,
) -> RenameResult:
    """
    Rename every entry under root whose name contains options.old

    Raises:
        InvalidInputError: options.old is empty (nothing is touched)
        TraversalError, CollisionError, RenameError: unless options.skip_errors
    """
    return Renamer(options, reporter).run(root)


def rename(root: PathLike, old: str, new: str, reporter: Optional[Reporter] = None) -> RenameResult:
    """Case-sensitive rename that aborts on the first error or collision"""
    return rename_with_options(root, RenameOptions(old=old, new=new), reporter)
