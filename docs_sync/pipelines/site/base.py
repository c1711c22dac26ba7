"""Shared models for the site build pipeline."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

MARKDOWN_SUFFIX = ".md"
GUIDES_DIR = "guides"
PACKAGES_DIR = "packages"


class UnitCategory(str, Enum):
    """Kind of generated page."""

    GUIDE = "guide"
    PACKAGE = "package"


@dataclass(frozen=True)
class SourceDocument:
    """A markdown file read from the documentation tree."""

    relative_path: str  # POSIX style, e.g. "guides/setup/intro.md"
    raw_content: str


@dataclass
class DocMetadata:
    """Title and description shown above a rendered page."""

    title: str = ""
    description: str = ""


@dataclass(frozen=True)
class ProcessedUnit:
    """One generated page component."""

    identifier: str
    export_name: str
    output_path: Path
    category: UnitCategory


@dataclass
class SiteBuildResult:
    """Everything produced by a single site build run."""

    output_dir: Path
    units: List[ProcessedUnit] = field(default_factory=list)
    index_path: Optional[Path] = None
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    completed_at: Optional[datetime] = None

    @property
    def guides(self) -> List[ProcessedUnit]:
        return [u for u in self.units if u.category == UnitCategory.GUIDE]

    @property
    def packages(self) -> List[ProcessedUnit]:
        return [u for u in self.units if u.category == UnitCategory.PACKAGE]

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary for reporting."""
        return {
            "output_dir": str(self.output_dir),
            "total_files": len(self.units),
            "guides": len(self.guides),
            "packages": len(self.packages),
            "index_path": str(self.index_path) if self.index_path else None,
            "started_at": self.started_at.isoformat(),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
        }
