"""Filesystem and process services behind the CLI and API."""
