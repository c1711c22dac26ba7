"""Unit tests for output path planning."""

from pathlib import Path

from docs_sync.pipelines.site.base import UnitCategory
from docs_sync.pipelines.site.paths import ensure_directory, plan_output

OUT = Path("/site/docs")


class TestPlanOutput:
    """Test category, placement and naming of generated pages."""

    def test_nested_guide(self):
        plan = plan_output("guides/setup/intro.md", OUT)

        assert plan.category == UnitCategory.GUIDE
        assert plan.output_path == OUT / "setup" / "Intro.tsx"
        assert plan.identifier == "Intro"
        assert plan.export_name == "SetupIntro"

    def test_nested_index_guide(self):
        plan = plan_output("guides/setup/index.md", OUT)

        assert plan.identifier == "Setup"
        assert plan.export_name == "Setup"
        assert plan.file_name == "index"
        assert plan.output_path == OUT / "setup" / "index.tsx"

    def test_top_level_guide(self):
        plan = plan_output("guides/getting-started.md", OUT)

        assert plan.category == UnitCategory.GUIDE
        assert plan.output_path == OUT / "GettingStarted.tsx"
        assert plan.identifier == "GettingStarted"
        assert plan.export_name == "GettingStarted"

    def test_top_level_index_guide(self):
        plan = plan_output("guides/index.md", OUT)

        assert plan.output_path == OUT / "Index.tsx"
        assert plan.identifier == "Index"

    def test_hyphenated_nested_names(self):
        plan = plan_output("guides/data-access/query-builder.md", OUT)

        assert plan.output_path == OUT / "data-access" / "QueryBuilder.tsx"
        assert plan.identifier == "QueryBuilder"
        assert plan.export_name == "DataAccessQueryBuilder"

    def test_deeply_nested_guide_keeps_first_segment_only(self):
        plan = plan_output("guides/setup/advanced/tuning.md", OUT)

        assert plan.output_path == OUT / "setup" / "Tuning.tsx"
        assert plan.export_name == "SetupAdvancedTuning"

    def test_package(self):
        plan = plan_output("packages/http-client.md", OUT)

        assert plan.category == UnitCategory.PACKAGE
        assert plan.output_path == OUT / "packages" / "HttpClient.tsx"
        assert plan.identifier == "HttpClientPackage"
        assert plan.export_name == "HttpClientPackage"

    def test_plan_is_deterministic(self):
        assert plan_output("guides/a/b.md", OUT) == plan_output("guides/a/b.md", OUT)

    def test_planning_does_not_touch_filesystem(self, tmp_path):
        plan_output("guides/setup/intro.md", tmp_path)

        assert list(tmp_path.iterdir()) == []


class TestEnsureDirectory:
    """Test on-demand directory creation."""

    def test_creates_nested_directories(self, tmp_path):
        target = tmp_path / "a" / "b"

        assert ensure_directory(target) == target
        assert target.is_dir()

    def test_existing_directory_is_not_an_error(self, tmp_path):
        ensure_directory(tmp_path)
        ensure_directory(tmp_path)

        assert tmp_path.is_dir()
