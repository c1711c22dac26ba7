"""CLI commands for building the docs site pages."""

import sys
from pathlib import Path
from typing import Optional

import click

from ..core.config import settings
from ..pipelines.orchestrator import run_site_build
from ..pipelines.site.paths import plan_output


@click.group()
def site():
    """Docs site page generation commands."""
    pass


@site.command()
@click.option(
    "--docs-root",
    type=click.Path(file_okay=False, path_type=Path),
    help="Documentation repo root containing guides/ and packages/ (default: current directory)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    help="Output directory for pages (default: DOCS_SITE_OUTPUT or ../site/src/pages/docs)",
)
def build(docs_root: Optional[Path], output: Optional[Path]):
    """Convert guides/ and packages/ markdown into site page components."""
    click.echo("📚 Building docs for site...")

    try:
        result = run_site_build(docs_root, output)
    except Exception as e:
        click.echo(f"❌ Build failed: {e}", err=True)
        sys.exit(1)

    click.echo(f"   Output: {result.output_dir}")
    click.echo(f"   Guides: {len(result.guides)}")
    click.echo(f"   Packages: {len(result.packages)}")
    click.echo(f"✅ Site docs build complete! ({len(result.units)} files)")


@site.command()
@click.argument("paths", nargs=-1, required=True)
@click.option(
    "--output",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    help="Output directory used for the plan",
)
def plan(paths: tuple, output: Optional[Path]):
    """Show where documents would be generated, without writing anything.

    PATHS are relative to the docs root, e.g. guides/setup/intro.md
    """
    output_dir = output if output is not None else settings.resolve_output_dir()
    for relative_path in paths:
        planned = plan_output(relative_path, output_dir)
        click.echo(
            f"{relative_path}: {planned.category.value} -> {planned.output_path} "
            f"(identifier={planned.identifier}, export={planned.export_name})"
        )
