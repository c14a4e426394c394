"""
scan_files.py - Candidate Collection

Walks a directory tree once and collects every entry whose base name
matches, in walk order (a directory always precedes its descendants).
"""

from pathlib import Path
from typing import Callable, List, Optional, Tuple
import os
import stat

from .errors import TraversalError
from .reporter import Reporter, RenameEvent, MATCHED, TRAVERSAL_ERROR


def collect(
    root: Path,
    matcher: Callable[[str], bool],
    skip_errors: bool = False,
    follow_symlinks: bool = False,
    reporter: Optional[Reporter] = None,
    errors: Optional[List[Tuple[Path, str]]] = None,
) -> Tuple[Path, ...]:
    """
    Recursively collect entries whose name satisfies matcher

    Args:
        root: Root path (itself a candidate if its own name matches)
        matcher: Name predicate
        skip_errors: Report unreadable directories and keep walking
        follow_symlinks: Descend into symlinked directories
        reporter: Event sink
        errors: List receiving (path, message) for each tolerated error

    Returns:
        Candidate paths, shallow to deep, lexical within a directory

    Raises:
        TraversalError: root is missing or cannot be listed, or a
            subdirectory cannot be listed and skip_errors is off
    """
    reporter = reporter or Reporter()
    root = Path(root)

    try:
        st = os.lstat(root)
        is_link = stat.S_ISLNK(st.st_mode)
        if is_link and follow_symlinks:
            st = os.stat(root)
    except OSError as e:
        raise TraversalError(f"Cannot access root {root}: {e}", src=root) from e

    candidates: List[Path] = []

    def visit(path: Path) -> None:
        if matcher(path.name):
            candidates.append(path)
            reporter.emit(RenameEvent(MATCHED, src=path))

    def on_error(exc: OSError) -> None:
        failed = Path(exc.filename) if exc.filename else root
        # Nothing left to walk once the root itself cannot be listed
        if not skip_errors or os.path.abspath(failed) == os.path.abspath(root):
            raise TraversalError(f"Cannot read directory {failed}: {exc}", src=failed) from exc
        if errors is not None:
            errors.append((failed, str(exc)))
        reporter.emit(RenameEvent(TRAVERSAL_ERROR, src=failed, message=str(exc)))

    visit(root)

    if not stat.S_ISDIR(st.st_mode) or (is_link and not follow_symlinks):
        return tuple(candidates)

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error, followlinks=follow_symlinks):
        current_dir = Path(dirpath)

        # Sorting dirnames in place fixes the order os.walk descends in
        dirnames.sort()

        for name in sorted(dirnames + filenames):
            visit(current_dir / name)

    return tuple(candidates)
