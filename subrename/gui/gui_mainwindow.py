"""
gui_mainwindow.py - GUI Main Window

Single panel: pick a root, enter the substrings, preview, execute
"""

from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QLineEdit, QPushButton, QCheckBox, QTableWidget,
    QTableWidgetItem, QProgressBar, QFileDialog, QMessageBox,
    QHeaderView, QGroupBox,
)
from PySide6.QtCore import Slot
from PySide6.QtGui import QColor

from ..core import RenameOptions, RenameResult, RenameEvent, Outcome
from .gui_workers import RenameWorker


STATUS_TEXT = {
    Outcome.RENAMED: ("Renamed", QColor(0, 150, 0)),
    Outcome.WOULD_RENAME: ("Will Rename", QColor(0, 150, 0)),
    Outcome.SKIPPED_UNCHANGED: ("No Change", QColor(150, 150, 150)),
    Outcome.SKIPPED_COLLISION: ("Collision", QColor(200, 150, 0)),
    Outcome.SKIPPED_INVALID: ("Invalid Name", QColor(200, 150, 0)),
    Outcome.FAILED: ("Failed", QColor(200, 0, 0)),
}


class RenamePanel(QWidget):
    """Search and Replace Rename Panel"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.preview: Optional[RenameResult] = None
        self.worker: Optional[RenameWorker] = None

        self._init_ui()

    def _init_ui(self):
        layout = QVBoxLayout(self)

        # Settings group
        settings_group = QGroupBox("Settings")
        settings_layout = QGridLayout(settings_group)

        # Directory selection
        settings_layout.addWidget(QLabel("Directory:"), 0, 0)
        self.dir_edit = QLineEdit()
        self.dir_edit.setPlaceholderText("Select root directory...")
        settings_layout.addWidget(self.dir_edit, 0, 1)
        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.clicked.connect(self._browse_directory)
        settings_layout.addWidget(self.browse_btn, 0, 2)

        settings_layout.addWidget(QLabel("Find:"), 1, 0)
        self.old_edit = QLineEdit()
        self.old_edit.setPlaceholderText("Substring to replace")
        settings_layout.addWidget(self.old_edit, 1, 1, 1, 2)

        settings_layout.addWidget(QLabel("Replace with:"), 2, 0)
        self.new_edit = QLineEdit()
        self.new_edit.setPlaceholderText("Replacement (leave empty to delete)")
        settings_layout.addWidget(self.new_edit, 2, 1, 1, 2)

        # Options
        options_layout = QHBoxLayout()
        self.case_check = QCheckBox("Case Sensitive")
        self.case_check.setChecked(True)
        self.skip_check = QCheckBox("Skip Errors")
        self.symlink_check = QCheckBox("Follow Symlinks")
        options_layout.addWidget(self.case_check)
        options_layout.addWidget(self.skip_check)
        options_layout.addWidget(self.symlink_check)
        options_layout.addStretch()
        settings_layout.addLayout(options_layout, 3, 0, 1, 3)

        self.preview_btn = QPushButton("Preview")
        self.preview_btn.clicked.connect(self._do_preview)
        settings_layout.addWidget(self.preview_btn, 4, 0, 1, 3)

        layout.addWidget(settings_group)

        # Results table
        self.table = QTableWidget()
        self.table.setColumnCount(4)
        self.table.setHorizontalHeaderLabels(["Original Name", "New Name", "Status", "Folder"])
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(2, QHeaderView.ResizeMode.ResizeToContents)
        self.table.horizontalHeader().setSectionResizeMode(3, QHeaderView.ResizeMode.Stretch)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        layout.addWidget(self.table, 1)

        # Progress and execution
        bottom_layout = QHBoxLayout()

        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        bottom_layout.addWidget(self.progress_bar, 1)

        self.execute_btn = QPushButton("Execute Rename")
        self.execute_btn.clicked.connect(self._do_execute)
        self.execute_btn.setEnabled(False)
        self.execute_btn.setStyleSheet("QPushButton { background-color: #4CAF50; color: white; font-weight: bold; padding: 8px 16px; }")
        bottom_layout.addWidget(self.execute_btn)

        layout.addLayout(bottom_layout)

        # Status label
        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

    def _browse_directory(self):
        """Browse and select directory"""
        directory = QFileDialog.getExistingDirectory(self, "Select Directory")
        if directory:
            self.dir_edit.setText(directory)

    def _options(self, dry_run: bool) -> Optional[RenameOptions]:
        """Read options from the form, warn and return None if incomplete"""
        directory = self.dir_edit.text().strip()
        if not directory or not Path(directory).is_dir():
            QMessageBox.warning(self, "Warning", f"Directory does not exist: {directory}")
            return None
        if not self.old_edit.text():
            QMessageBox.warning(self, "Warning", "Please enter the string to replace")
            return None
        return RenameOptions(
            old=self.old_edit.text(),
            new=self.new_edit.text(),
            case_sensitive=self.case_check.isChecked(),
            dry_run=dry_run,
            skip_errors=self.skip_check.isChecked(),
            follow_symlinks=self.symlink_check.isChecked(),
        )

    def _start(self, options: RenameOptions):
        self.preview_btn.setEnabled(False)
        self.execute_btn.setEnabled(False)
        self.progress_bar.setVisible(True)
        self.progress_bar.setRange(0, 0)  # Indeterminate progress

        self.worker = RenameWorker(Path(self.dir_edit.text().strip()), options)
        self.worker.event.connect(self._on_event)
        self.worker.finished.connect(self._on_finished)
        self.worker.error.connect(self._on_error)
        self.worker.start()

    def _do_preview(self):
        """Generate preview"""
        options = self._options(dry_run=True)
        if options is None:
            return
        self.preview_btn.setText("Generating...")
        self._start(options)

    def _do_execute(self):
        """Execute rename"""
        if not self.preview or self.preview.success_count == 0:
            return

        reply = QMessageBox.question(
            self, "Confirm",
            f"Are you sure you want to execute {self.preview.success_count} rename operations?\n\nThis action cannot be undone!",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        if reply != QMessageBox.StandardButton.Yes:
            return

        options = self._options(dry_run=False)
        if options is None:
            return
        self.execute_btn.setText("Executing...")
        self._start(options)

    @Slot(object)
    def _on_event(self, event: RenameEvent):
        """Worker progress"""
        if event.src is not None:
            msg = event.format()
            self.status_label.setText(msg[-80:] if len(msg) > 80 else msg)

    @Slot(object)
    def _on_finished(self, result: RenameResult):
        """Worker complete"""
        self.preview_btn.setEnabled(True)
        self.preview_btn.setText("Preview")
        self.execute_btn.setText("Execute Rename")
        self.progress_bar.setVisible(False)

        self._update_table(result)

        if result.dry_run:
            self.preview = result
            self.execute_btn.setEnabled(result.success_count > 0)
            if result.success_count:
                self.status_label.setText(
                    f"Will perform {result.success_count} rename operations (collisions: {result.collision_count})"
                )
            else:
                self.status_label.setText("No entries need renaming")
        else:
            self.preview = None
            msg = (f"Rename complete!\n\nSuccess: {result.success_count}\n"
                   f"Skipped: {result.skipped_count}\nFailed: {result.failed_count}")
            QMessageBox.information(self, "Complete", msg)
            self.status_label.setText("Complete")

    @Slot(str)
    def _on_error(self, error: str):
        """Worker aborted"""
        self.preview_btn.setEnabled(True)
        self.preview_btn.setText("Preview")
        self.execute_btn.setText("Execute Rename")
        self.execute_btn.setEnabled(False)
        self.progress_bar.setVisible(False)
        self.preview = None
        QMessageBox.critical(self, "Error", f"Operation aborted: {error}")

    def _update_table(self, result: RenameResult):
        """Display outcomes, deepest first"""
        self.table.setRowCount(len(result.ops))

        base_dir = Path(self.dir_edit.text().strip())
        for i, op in enumerate(result.ops):
            text, color = STATUS_TEXT[op.outcome]
            status_item = QTableWidgetItem(text)
            status_item.setForeground(color)
            if op.message:
                status_item.setToolTip(op.message)

            try:
                rel_path = str(op.src.parent.relative_to(base_dir))
            except ValueError:
                rel_path = str(op.src.parent)

            self.table.setItem(i, 0, QTableWidgetItem(op.src.name))
            self.table.setItem(i, 1, QTableWidgetItem(op.dst.name))
            self.table.setItem(i, 2, status_item)
            self.table.setItem(i, 3, QTableWidgetItem(rel_path))


class MainWindow(QMainWindow):
    """Main window"""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Recursive Rename Tool")
        self.setMinimumSize(800, 600)

        self.panel = RenamePanel()
        self.setCentralWidget(self.panel)

        # Status bar
        self.statusBar().showMessage("Ready")
