"""Core configuration for docs-sync."""
