"""
reporter.py - Event Sinks

The core never prints. It emits RenameEvent objects to a Reporter, and
the caller decides where they go (console, logging, Qt signals, a list).
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Optional
import logging


MATCHED = "matched"
RENAMED = "renamed"
WOULD_RENAME = "would_rename"
SKIPPED = "skipped"
FAILED = "failed"
TRAVERSAL_ERROR = "traversal_error"
SUMMARY = "summary"


@dataclass(frozen=True)
class RenameEvent:
    """Single structured event"""
    kind: str
    src: Optional[Path] = None
    dst: Optional[Path] = None
    message: str = ""

    def format(self) -> str:
        """Render as one human-readable line"""
        if self.kind == MATCHED:
            return f"Matched: {self.src}"
        if self.kind == RENAMED:
            return f"Renamed: {self.src} -> {self.dst}"
        if self.kind == WOULD_RENAME:
            return f"[Preview] {self.src} -> {self.dst}"
        if self.kind == SKIPPED:
            return f"Warning: skipped {self.src} -> {self.dst}: {self.message}"
        if self.kind == FAILED:
            return f"Error: {self.src} -> {self.dst}: {self.message}"
        if self.kind == TRAVERSAL_ERROR:
            return f"Warning: cannot access {self.src}: {self.message}"
        return self.message


class Reporter:
    """Base reporter, discards everything"""

    def emit(self, event: RenameEvent) -> None:
        pass


NullReporter = Reporter


class ListReporter(Reporter):
    """Keeps every event in memory"""

    def __init__(self):
        self.events: List[RenameEvent] = []

    def emit(self, event: RenameEvent) -> None:
        self.events.append(event)

    def of_kind(self, kind: str) -> List[RenameEvent]:
        return [e for e in self.events if e.kind == kind]


class CallbackReporter(Reporter):
    """Forwards events to a callable (e.g. a Qt signal's emit)"""

    def __init__(self, callback: Callable[[RenameEvent], None]):
        self.callback = callback

    def emit(self, event: RenameEvent) -> None:
        self.callback(event)


class ConsoleReporter(Reporter):
    """Prints one line per event to stdout"""

    def __init__(self, show_matches: bool = False):
        self.show_matches = show_matches

    def emit(self, event: RenameEvent) -> None:
        if event.kind == MATCHED and not self.show_matches:
            return
        print(event.format())


_LEVELS = {
    MATCHED: logging.DEBUG,
    RENAMED: logging.INFO,
    WOULD_RENAME: logging.INFO,
    SUMMARY: logging.INFO,
    SKIPPED: logging.WARNING,
    FAILED: logging.ERROR,
    TRAVERSAL_ERROR: logging.ERROR,
}


class LoggingReporter(Reporter):
    """Writes events to a stdlib logger"""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("subrename")

    def emit(self, event: RenameEvent) -> None:
        self.logger.log(_LEVELS.get(event.kind, logging.INFO), "%s", event.format())


class MultiReporter(Reporter):
    """Fans events out to several reporters"""

    def __init__(self, reporters: Iterable[Reporter]):
        self.reporters = list(reporters)

    def emit(self, event: RenameEvent) -> None:
        for reporter in self.reporters:
            reporter.emit(event)
