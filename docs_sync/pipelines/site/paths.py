"""Output placement for generated pages."""

from dataclasses import dataclass
from pathlib import Path

from .base import GUIDES_DIR, MARKDOWN_SUFFIX, PACKAGES_DIR, UnitCategory
from .transformer import path_identifier, to_identifier

COMPONENT_SUFFIX = ".tsx"
INDEX_NAME = "index"


@dataclass(frozen=True)
class OutputPlan:
    """Where a document's page goes and what it is called."""

    category: UnitCategory
    identifier: str
    export_name: str
    output_dir: Path
    file_name: str

    @property
    def output_path(self) -> Path:
        return self.output_dir / f"{self.file_name}{COMPONENT_SUFFIX}"


def _strip_suffix(name: str) -> str:
    if name.endswith(MARKDOWN_SUFFIX):
        return name[: -len(MARKDOWN_SUFFIX)]
    return name


def _strip_prefix(path: str, prefix: str) -> str:
    if path.startswith(prefix):
        return path[len(prefix) :]
    return path


def plan_output(relative_path: str, output_dir: Path) -> OutputPlan:
    """Decide category, output location and identifiers for a document.

    Args:
        relative_path: POSIX path relative to the docs root, e.g. ``guides/setup/intro.md``
        output_dir: Root of the generated site pages

    Returns:
        OutputPlan for the document. Nothing is written.
    """
    output_dir = Path(output_dir)
    basename = _strip_suffix(relative_path.rsplit("/", 1)[-1])

    if relative_path.startswith(f"{PACKAGES_DIR}/"):
        file_name = to_identifier(basename)
        component_name = f"{file_name}Package"
        return OutputPlan(
            category=UnitCategory.PACKAGE,
            identifier=component_name,
            export_name=component_name,
            output_dir=output_dir / PACKAGES_DIR,
            file_name=file_name,
        )

    guide_path = _strip_suffix(_strip_prefix(relative_path, f"{GUIDES_DIR}/"))
    parts = guide_path.split("/")

    if len(parts) == 1:
        identifier = to_identifier(basename)
        return OutputPlan(
            category=UnitCategory.GUIDE,
            identifier=identifier,
            export_name=identifier,
            output_dir=output_dir,
            file_name=identifier,
        )

    if basename == INDEX_NAME:
        # guides/setup/index.md is the "Setup" page, served as setup/index
        identifier = to_identifier(parts[0])
        return OutputPlan(
            category=UnitCategory.GUIDE,
            identifier=identifier,
            export_name=identifier,
            output_dir=output_dir / parts[0],
            file_name=INDEX_NAME,
        )

    return OutputPlan(
        category=UnitCategory.GUIDE,
        identifier=to_identifier(basename),
        export_name=path_identifier(parts),
        output_dir=output_dir / parts[0],
        file_name=to_identifier(basename),
    )


def ensure_directory(path: Path) -> Path:
    """Create ``path`` (and parents) if missing."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path
