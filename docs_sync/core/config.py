"""Configuration management using Pydantic Settings."""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_OPT: str | None = None

# Only load .env if it exists (for local development)
_env_path = Path(".env")
if _env_path.exists():
    load_dotenv(dotenv_path=_env_path)
    ENV_FILE_OPT = str(_env_path)


class Settings(BaseSettings):
    """Pipeline configuration.

    Loads settings from environment variables. In local development, these can be
    provided via a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=ENV_FILE_OPT,
        env_file_encoding="utf-8",
        extra="ignore",
        env_ignore_empty=True,
    )

    log_level: str = Field(default="INFO", description="Logging level")

    # Site build
    docs_root: Path = Field(
        default=Path("."), description="Documentation repo root containing guides/ and packages/"
    )
    docs_site_output: Optional[Path] = Field(
        default=None,
        description="Output directory for generated site pages. "
        "Defaults to ../site/src/pages/docs relative to docs_root.",
    )

    # Package sync
    sync_strict: bool = Field(
        default=True, description="Abort the sync when any source cannot be fetched"
    )
    sync_timeout: int = Field(default=30, description="HTTP timeout for source fetches (seconds)")
    sync_generator_command: str = Field(
        default="docs-sync packages sync",
        description="Command recorded in the banner of synced package files",
    )

    def resolve_output_dir(self, docs_root: Optional[Path] = None) -> Path:
        """Return the site output directory, falling back to the sibling site checkout."""
        if self.docs_site_output is not None:
            return Path(self.docs_site_output)
        root = Path(docs_root) if docs_root is not None else Path(self.docs_root)
        return root / ".." / "site" / "src" / "pages" / "docs"


# Global settings instance
settings = Settings()
