"""
gui_workers.py - GUI Worker Threads

Provides background execution of long tasks to avoid blocking UI
"""

from pathlib import Path
from typing import Optional

from PySide6.QtCore import QThread, Signal, QObject

from ..core import Renamer, RenameOptions, CallbackReporter


class RenameWorker(QThread):
    """Collect-and-apply worker thread (preview when options.dry_run)"""

    # Signals
    event = Signal(object)          # RenameEvent
    finished = Signal(object)       # RenameResult
    error = Signal(str)             # Error message

    def __init__(
        self,
        directory: Path,
        options: RenameOptions,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.directory = directory
        self.options = options

    def run(self):
        try:
            renamer = Renamer(self.options, CallbackReporter(self.event.emit))
            result = renamer.run(self.directory)
            self.finished.emit(result)
        except Exception as e:
            self.error.emit(str(e))
