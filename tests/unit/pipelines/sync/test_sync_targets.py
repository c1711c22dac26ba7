"""Unit tests for sync target selection."""

import pytest

from docs_sync.pipelines.sync.targets import SYNC_TARGETS, SyncTarget, select_targets


class TestSyncTargets:
    """Test the default target list."""

    def test_targets_are_unique(self):
        assert len({t.output_file_name for t in SYNC_TARGETS}) == len(SYNC_TARGETS)
        assert len({t.group for t in SYNC_TARGETS}) == len(SYNC_TARGETS)

    def test_targets_point_at_markdown(self):
        for target in SYNC_TARGETS:
            assert target.output_file_name.endswith(".md")
            assert target.source_url.startswith("https://")


class TestSelectTargets:
    """Test narrowing the target list."""

    def test_no_groups_returns_all(self):
        assert select_targets() == SYNC_TARGETS
        assert select_targets([]) == SYNC_TARGETS

    def test_selection_keeps_list_order(self):
        groups = [SYNC_TARGETS[-1].group, SYNC_TARGETS[0].group]

        selected = select_targets(groups)

        assert selected == [SYNC_TARGETS[0], SYNC_TARGETS[-1]]

    def test_unknown_group_raises(self):
        with pytest.raises(ValueError, match="nope"):
            select_targets(["nope"])

    def test_custom_target_list(self):
        targets = [SyncTarget("x", "x.md", "https://example.com/x.md")]

        assert select_targets(["x"], targets) == targets
