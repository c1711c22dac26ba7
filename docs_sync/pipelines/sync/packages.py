"""Sync package READMEs into packages/*.md."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Awaitable, Callable, List, Optional, Sequence, Union

import aiohttp

from ...core.config import settings
from .targets import SYNC_TARGETS, SyncTarget

logger = logging.getLogger(__name__)

PACKAGES_DIR = "packages"

FetchText = Callable[[str], Awaitable[str]]
WriteFile = Callable[[Path, str], Awaitable[None]]


@dataclass
class PackageSyncResult:
    """Outcome of one sync run."""

    written: List[Path] = field(default_factory=list)
    skipped: List[SyncTarget] = field(default_factory=list)


def render_synced_package_markdown(
    generator_command: str, source_url: str, source_markdown: str
) -> str:
    """Wrap fetched markdown in the generated-file banner.

    The source markdown is kept byte for byte; a newline is appended only when
    it does not already end with one. Trailing blank lines already present are
    left as they are, so the result ends with at least one newline, not exactly
    one.
    """
    banner = (
        "<!--\n"
        "  AUTO-GENERATED FILE. DO NOT EDIT DIRECTLY.\n"
        f"  Generated by: {generator_command}\n"
        f"  Source: {source_url}\n"
        "-->\n"
    )
    content = f"{banner}\n{source_markdown}"
    if not content.endswith("\n"):
        content += "\n"
    return content


async def fetch_text_http(session: aiohttp.ClientSession, url: str) -> str:
    """GET ``url`` and return the body; non-2xx responses raise ClientResponseError."""
    async with session.get(url) as response:
        response.raise_for_status()
        return await response.text()


async def write_text_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


async def sync_packages(
    repo_root_dir: Union[str, Path],
    fetch_text: Optional[FetchText] = None,
    write_file: Optional[WriteFile] = None,
    targets: Optional[Sequence[SyncTarget]] = None,
    strict: bool = True,
    generator_command: Optional[str] = None,
    timeout: Optional[int] = None,
) -> PackageSyncResult:
    """Fetch every target in order and write it under ``<repo_root_dir>/packages``.

    Args:
        repo_root_dir: Documentation repo root
        fetch_text: Coroutine returning the text at a URL. Defaults to an HTTP GET.
        write_file: Coroutine writing content to a path. Defaults to a UTF-8 file write.
        targets: Targets to sync, defaults to SYNC_TARGETS
        strict: Re-raise the first fetch failure instead of skipping the target
        generator_command: Command recorded in the banner
        timeout: HTTP timeout in seconds for the default fetcher

    Returns:
        PackageSyncResult listing written files and skipped targets
    """
    if fetch_text is None:
        client_timeout = aiohttp.ClientTimeout(total=timeout or settings.sync_timeout)
        async with aiohttp.ClientSession(timeout=client_timeout) as session:

            async def fetch(url: str) -> str:
                return await fetch_text_http(session, url)

            return await sync_packages(
                repo_root_dir,
                fetch_text=fetch,
                write_file=write_file,
                targets=targets,
                strict=strict,
                generator_command=generator_command,
            )

    write_file = write_file or write_text_file
    command = generator_command or settings.sync_generator_command
    packages_dir = Path(repo_root_dir) / PACKAGES_DIR
    result = PackageSyncResult()

    # One at a time, in list order
    for target in SYNC_TARGETS if targets is None else targets:
        try:
            source_markdown = await fetch_text(target.source_url)
        except Exception as e:
            if strict:
                logger.error(f"Failed to fetch {target.source_url}: {e}")
                raise
            logger.warning(f"Skipping {target.group}: failed to fetch {target.source_url}: {e}")
            result.skipped.append(target)
            continue

        output_path = packages_dir / target.output_file_name
        await write_file(
            output_path,
            render_synced_package_markdown(command, target.source_url, source_markdown),
        )
        result.written.append(output_path)
        logger.info(f"✓ Synced {target.source_url} -> {output_path}")

    return result
