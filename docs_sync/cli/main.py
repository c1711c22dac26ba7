"""CLI interface for docs-sync."""

import importlib
import logging

import click

from docs_sync.core.config import settings

# Map command names to their module:attribute for lazy import
_COMMANDS = {
    "site": "docs_sync.cli.site:site",
    "packages": "docs_sync.cli.packages:packages",
}


class LazyGroup(click.Group):
    """
    Lazy loading of CLI commands.

    Subcommands live in separate modules and are imported only when invoked.
    """

    def list_commands(self, ctx):
        # Keep stable ordering for help output
        return list(_COMMANDS.keys())

    def get_command(self, ctx, name):
        target = _COMMANDS.get(name)
        if not target:
            return None
        module_path, attr = target.split(":", 1)
        mod = importlib.import_module(module_path)
        return getattr(mod, attr)


@click.command(cls=LazyGroup)
def main():
    """Documentation pipeline: site page generation and package README sync."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )


if __name__ == "__main__":
    main()
