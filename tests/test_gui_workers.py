"""Tests for the GUI worker thread (run synchronously, no event loop)."""

import pytest

pytest.importorskip("PySide6.QtWidgets")

from subrename.core import RenameOptions, Renamer  # noqa: E402
from subrename.core.reporter import WOULD_RENAME  # noqa: E402
from subrename.gui.gui_workers import RenameWorker  # noqa: E402


class TestRenameWorker:
    """Test cases for RenameWorker."""

    def _run(self, worker):
        events, results, errors = [], [], []
        worker.event.connect(events.append)
        worker.finished.connect(results.append)
        worker.error.connect(errors.append)
        worker.run()
        return events, results, errors

    def test_preview_emits_events_and_result(self, tree, take_snapshot):
        root = tree("fooDir/", "fooDir/foo.txt")
        before = take_snapshot(root)

        events, results, errors = self._run(
            RenameWorker(root, RenameOptions(old="foo", new="bar", dry_run=True))
        )

        assert errors == []
        assert results[0].success_count == 2
        assert [e.kind for e in events].count(WOULD_RENAME) == 2
        assert take_snapshot(root) == before

    def test_execute(self, tree):
        root = tree("fooDir/", "fooDir/foo.txt")

        _, results, errors = self._run(RenameWorker(root, RenameOptions(old="foo", new="bar")))

        assert errors == []
        assert (root / "barDir" / "bar.txt").is_file()

    def test_abort_is_reported_as_error(self, tree):
        root = tree("a_old", "a_new")

        _, results, errors = self._run(RenameWorker(root, RenameOptions(old="old", new="new")))

        assert results == []
        assert len(errors) == 1
        assert "already exists" in errors[0]

    def test_unexpected_exception_is_reported_as_error(self, tree, monkeypatch):
        root = tree("foo.txt")

        def broken_run(self, directory):
            raise RuntimeError("boom")

        monkeypatch.setattr(Renamer, "run", broken_run)

        _, results, errors = self._run(RenameWorker(root, RenameOptions(old="foo", new="bar")))

        assert results == []
        assert errors == ["boom"]
