"""Site build: convert guides/ and packages/ markdown into page components."""

import logging
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from .base import (
    GUIDES_DIR,
    MARKDOWN_SUFFIX,
    PACKAGES_DIR,
    ProcessedUnit,
    SiteBuildResult,
    SourceDocument,
)
from .frontmatter import parse_frontmatter
from .index import write_index
from .paths import ensure_directory, plan_output
from .transformer import render_page_component

logger = logging.getLogger(__name__)


class DuplicateOutputError(Exception):
    """Raised when two documents would be written to the same output file."""

    def __init__(self, output_path: Path, first: str, second: str):
        self.output_path = output_path
        super().__init__(f"{second} would overwrite {output_path} (already generated from {first})")


class DuplicateExportError(Exception):
    """Raised when two documents would be exported from index.ts under one name."""

    def __init__(self, export_name: str, first: str, second: str):
        self.export_name = export_name
        super().__init__(f"{second} and {first} both export {export_name} from index.ts")


class SiteBuilder:
    """Builds the docs site pages from a documentation repo checkout.

    Reads ``guides/`` and ``packages/`` under ``docs_root`` and writes one page
    component per markdown file, plus ``index.ts``, into ``output_dir``.
    """

    def __init__(
        self,
        docs_root: Path,
        output_dir: Path,
        config: Optional[Dict[str, Any]] = None,
    ):
        self.docs_root = Path(docs_root)
        self.output_dir = Path(output_dir)
        self.config = {
            # Source roots, processed in this order
            "source_dirs": [GUIDES_DIR, PACKAGES_DIR],
            # Hand-authored files in the output dir that survive a rebuild
            "preserve_files": ["DocsLayout.tsx", "DocsLayout.ts"],
            **(config or {}),
        }
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        # output path -> relative path of the document that produced it
        self._sources: Dict[Path, str] = {}
        # index.ts export name -> relative path of the document that claimed it
        self._exports: Dict[str, str] = {}

    def build(self) -> SiteBuildResult:
        """Run a full build and return what it produced."""
        self.logger.info("Building docs for site")
        self.logger.info(f"Source: {self.docs_root}")
        self.logger.info(f"Output: {self.output_dir}")

        result = SiteBuildResult(output_dir=self.output_dir)
        self._sources = {}
        self._exports = {}

        if self.output_dir.exists():
            self.clean_output_dir()
        else:
            ensure_directory(self.output_dir)

        for source_dir in self.config["source_dirs"]:
            self._process_directory(self.docs_root / source_dir, source_dir, result)

        result.index_path = write_index(result.units, self.output_dir)
        result.completed_at = datetime.now(timezone.utc)

        self.logger.info(f"Site docs build complete ({len(result.units)} files)")
        return result

    def clean_output_dir(self) -> None:
        """Remove generated files so each run leaves only current output."""
        if not self.output_dir.exists():
            return
        for entry in self.output_dir.iterdir():
            if entry.name in self.config["preserve_files"]:
                continue
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()

    def _process_directory(self, directory: Path, relative_path: str, result: SiteBuildResult):
        # iterdir() yields entries in directory listing order; index.ts is sorted later
        for entry in directory.iterdir():
            entry_relative = f"{relative_path}/{entry.name}" if relative_path else entry.name
            # symlinked directories are not followed
            if entry.is_dir() and not entry.is_symlink():
                self._process_directory(entry, entry_relative, result)
            elif entry.name.endswith(MARKDOWN_SUFFIX) and entry.is_file():
                document = SourceDocument(
                    relative_path=entry_relative,
                    raw_content=entry.read_text(encoding="utf-8"),
                )
                result.units.append(self.process_document(document))

    def process_document(self, document: SourceDocument) -> ProcessedUnit:
        """Transform one document and write its page component."""
        filename = document.relative_path.rsplit("/", 1)[-1]
        metadata, body = parse_frontmatter(document.raw_content, filename=filename)
        plan = plan_output(document.relative_path, self.output_dir)

        output_path = plan.output_path
        if output_path in self._sources:
            raise DuplicateOutputError(
                output_path, self._sources[output_path], document.relative_path
            )
        if plan.export_name in self._exports:
            raise DuplicateExportError(
                plan.export_name, self._exports[plan.export_name], document.relative_path
            )
        self._sources[output_path] = document.relative_path
        self._exports[plan.export_name] = document.relative_path

        ensure_directory(plan.output_dir)
        component = render_page_component(metadata, body, plan.identifier)
        output_path.write_text(component, encoding="utf-8")
        self.logger.info(f"✓ Generated {output_path}")

        return ProcessedUnit(
            identifier=plan.identifier,
            export_name=plan.export_name,
            output_path=output_path,
            category=plan.category,
        )
