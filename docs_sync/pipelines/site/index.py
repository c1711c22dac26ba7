"""Index manifest re-exporting every generated page."""

import logging
from pathlib import Path
from typing import Iterable, List

from .base import ProcessedUnit, UnitCategory

logger = logging.getLogger(__name__)

INDEX_FILE_NAME = "index.ts"
LAYOUT_EXPORT = 'export { default as DocsLayout } from "./DocsLayout.js";'


def sort_units(units: Iterable[ProcessedUnit]) -> List[ProcessedUnit]:
    """Order units by identifier (code point order), then export name."""
    return sorted(units, key=lambda u: (u.identifier, u.export_name))


def _export_line(unit: ProcessedUnit, output_dir: Path) -> str:
    import_path = unit.output_path.relative_to(output_dir).with_suffix(".js").as_posix()
    return f'export {{ default as {unit.export_name} }} from "./{import_path}";'


def render_index(units: Iterable[ProcessedUnit], output_dir: Path) -> str:
    """Render index.ts: the layout export, then guides, then packages."""
    output_dir = Path(output_dir)
    units = list(units)
    guides = sort_units(u for u in units if u.category == UnitCategory.GUIDE)
    packages = sort_units(u for u in units if u.category == UnitCategory.PACKAGE)

    exports = [_export_line(unit, output_dir) for unit in guides]
    if packages:
        exports.append("")
        exports.extend(_export_line(unit, output_dir) for unit in packages)

    body = "\n".join(exports)
    return f"""/**
 * Documentation pages - auto-generated. Do not edit directly.
 */

{LAYOUT_EXPORT}

{body}
"""


def write_index(units: Iterable[ProcessedUnit], output_dir: Path) -> Path:
    """Write index.ts into ``output_dir`` and return its path."""
    index_path = Path(output_dir) / INDEX_FILE_NAME
    index_path.write_text(render_index(units, output_dir), encoding="utf-8")
    logger.info(f"✓ Generated {index_path}")
    return index_path
