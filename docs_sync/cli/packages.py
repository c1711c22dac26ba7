"""CLI commands for syncing package READMEs."""

import asyncio
import sys
from pathlib import Path
from typing import Optional

import click

from ..pipelines.orchestrator import run_package_sync
from ..pipelines.sync.targets import SYNC_TARGETS


@click.group()
def packages():
    """Package README sync commands."""
    pass


@packages.command()
@click.option(
    "--repo-root",
    type=click.Path(file_okay=False, path_type=Path),
    help="Documentation repo root (default: current directory)",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Fail on the first source that cannot be fetched (default: strict)",
)
@click.option("--only", multiple=True, help="Sync only this group (can be used multiple times)")
def sync(repo_root: Optional[Path], strict: Optional[bool], only: tuple):
    """Fetch package READMEs into packages/*.md."""
    click.echo("🔄 Syncing package docs...")

    try:
        result = asyncio.run(run_package_sync(repo_root, strict=strict, groups=only))
    except Exception as e:
        click.echo(f"❌ Sync failed: {e}", err=True)
        sys.exit(1)

    for path in result.written:
        click.echo(f"   ✅ {path}")
    for target in result.skipped:
        click.echo(f"   ⚠️  Skipped {target.group} ({target.source_url})")
    click.echo(f"✅ Synced {len(result.written)} package(s)")


@packages.command(name="list")
def list_targets():
    """List the configured package sources."""
    for target in SYNC_TARGETS:
        click.echo(f"{target.group}: {target.source_url} -> packages/{target.output_file_name}")
