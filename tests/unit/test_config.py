"""Unit tests for configuration management."""

import os
from pathlib import Path
from unittest.mock import patch

from docs_sync.core.config import Settings


class TestSettings:
    """Test Settings configuration class."""

    def test_default_values(self):
        """Test default configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

            assert settings.log_level == "INFO"
            assert settings.docs_root == Path(".")
            assert settings.docs_site_output is None
            assert settings.sync_strict is True
            assert settings.sync_timeout == 30
            assert settings.sync_generator_command == "docs-sync packages sync"

    def test_environment_variable_override(self):
        """Test that environment variables override defaults."""
        env_vars = {
            "DOCS_SITE_OUTPUT": "/srv/site/docs",
            "DOCS_ROOT": "/srv/documentation",
            "SYNC_STRICT": "false",
            "SYNC_TIMEOUT": "5",
            "LOG_LEVEL": "DEBUG",
        }
        with patch.dict(os.environ, env_vars, clear=True):
            settings = Settings(_env_file=None)

            assert settings.docs_site_output == Path("/srv/site/docs")
            assert settings.docs_root == Path("/srv/documentation")
            assert settings.sync_strict is False
            assert settings.sync_timeout == 5
            assert settings.log_level == "DEBUG"

    def test_empty_env_values_are_ignored(self):
        """Test that empty environment variables fall back to defaults."""
        with patch.dict(os.environ, {"DOCS_SITE_OUTPUT": ""}, clear=True):
            settings = Settings(_env_file=None)

            assert settings.docs_site_output is None


class TestResolveOutputDir:
    """Test output directory resolution."""

    def test_override_wins(self):
        settings = Settings(_env_file=None, docs_site_output=Path("/out"))

        assert settings.resolve_output_dir(Path("/docs")) == Path("/out")

    def test_sibling_default_from_argument(self):
        settings = Settings(_env_file=None, docs_site_output=None)

        assert settings.resolve_output_dir(Path("/repo/documentation")) == Path(
            "/repo/documentation/../site/src/pages/docs"
        )

    def test_sibling_default_from_docs_root(self):
        settings = Settings(
            _env_file=None, docs_root=Path("/repo/documentation"), docs_site_output=None
        )

        assert settings.resolve_output_dir() == Path("/repo/documentation/../site/src/pages/docs")
