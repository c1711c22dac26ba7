"""Pipeline entry points with configuration defaults applied."""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from ..core.config import settings
from .site.base import SiteBuildResult
from .site.builder import SiteBuilder
from .sync.packages import FetchText, PackageSyncResult, WriteFile, sync_packages
from .sync.targets import select_targets

logger = logging.getLogger(__name__)


def run_site_build(
    docs_root: Optional[Path] = None,
    output_dir: Optional[Path] = None,
    config: Optional[Dict[str, Any]] = None,
) -> SiteBuildResult:
    """Build the site pages; unset paths come from settings."""
    root = Path(docs_root) if docs_root is not None else Path(settings.docs_root)
    output = Path(output_dir) if output_dir is not None else settings.resolve_output_dir(root)

    builder = SiteBuilder(root, output, config)
    try:
        result = builder.build()
    except Exception as e:
        logger.error(f"Site build failed: {e}")
        raise

    logger.info(f"Site build completed: {result.to_dict()}")
    return result


async def run_package_sync(
    repo_root: Optional[Path] = None,
    strict: Optional[bool] = None,
    groups: Optional[Iterable[str]] = None,
    fetch_text: Optional[FetchText] = None,
    write_file: Optional[WriteFile] = None,
) -> PackageSyncResult:
    """Sync package READMEs; unset options come from settings."""
    root = Path(repo_root) if repo_root is not None else Path(settings.docs_root)
    strict = settings.sync_strict if strict is None else strict
    targets = select_targets(groups)

    logger.info(f"Syncing {len(targets)} package(s) into {root / 'packages'} (strict={strict})")
    result = await sync_packages(
        root,
        fetch_text=fetch_text,
        write_file=write_file,
        targets=targets,
        strict=strict,
        generator_command=settings.sync_generator_command,
        timeout=settings.sync_timeout,
    )
    logger.info(
        f"Package sync completed: {len(result.written)} written, {len(result.skipped)} skipped"
    )
    return result
