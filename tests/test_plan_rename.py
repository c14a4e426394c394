"""Tests for rename planning and occupancy tracking."""

import os
from pathlib import Path

from subrename.core.models_fs import RenameOptions
from subrename.core.plan_rename import OccupancyTracker, PlannedRename, plan_replace_rename


class TestPlanReplaceRename:
    """Test cases for plan_replace_rename."""

    def test_reverses_walk_order(self):
        candidates = (Path("r/fooDir"), Path("r/fooDir/foo.txt"))

        plan = plan_replace_rename(candidates, RenameOptions(old="foo", new="bar"))

        assert plan == [
            PlannedRename(Path("r/fooDir/foo.txt"), "bar.txt"),
            PlannedRename(Path("r/fooDir"), "barDir"),
        ]

    def test_only_base_name_is_replaced(self):
        plan = plan_replace_rename((Path("foo/foo/a_foo"),), RenameOptions(old="foo", new="bar"))

        assert plan[0].dst == Path("foo/foo/a_bar")

    def test_unchanged_names_are_flagged(self):
        plan = plan_replace_rename((Path("r/foo"),), RenameOptions(old="foo", new="foo"))

        assert plan[0].is_unchanged


class TestOccupancyTracker:
    """Test cases for OccupancyTracker."""

    def test_existing_entry_is_occupied(self, tmp_path):
        (tmp_path / "a").write_text("a")
        (tmp_path / "b").write_text("b")

        assert OccupancyTracker().is_occupied(tmp_path / "a", tmp_path / "b")

    def test_missing_entry_is_free(self, tmp_path):
        assert not OccupancyTracker().is_occupied(tmp_path / "a", tmp_path / "b")

    def test_claimed_destination_is_occupied(self, tmp_path):
        tracker = OccupancyTracker()
        tracker.mark_renamed(tmp_path / "a", tmp_path / "c")

        assert tracker.is_occupied(tmp_path / "b", tmp_path / "c")

    def test_vacated_source_is_free(self, tmp_path):
        (tmp_path / "a").write_text("a")
        tracker = OccupancyTracker()
        tracker.mark_renamed(tmp_path / "a", tmp_path / "z")

        assert not tracker.is_occupied(tmp_path / "b", tmp_path / "a")

    def test_entry_is_not_occupied_by_itself(self, tmp_path):
        (tmp_path / "a").write_text("a")

        assert not OccupancyTracker().is_occupied(tmp_path / "a", tmp_path / "a")

    def test_broken_symlink_occupies_its_name(self, tmp_path):
        (tmp_path / "link").symlink_to(tmp_path / "missing")

        assert OccupancyTracker().is_occupied(tmp_path / "a", tmp_path / "link")

    def test_hard_link_under_another_name_is_occupied(self, tmp_path):
        (tmp_path / "a_old").write_text("a")
        os.link(tmp_path / "a_old", tmp_path / "a_new")

        assert OccupancyTracker().is_occupied(tmp_path / "a_old", tmp_path / "a_new")
