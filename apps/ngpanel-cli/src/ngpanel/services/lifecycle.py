"""Commit protocol for a site's config file.

A commit writes the new content, runs ``nginx -t`` over the whole
configuration and then either finalizes (records the previous content as a
version) or restores the previous bytes. The file is never left holding
content that failed validation, unless the restore itself fails (reported on
the raised error).

Concurrent commits to the same site are not serialized.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from ngpanel_common import CommandResult, PanelConfig, VersionRecord

from ngpanel.errors import IOFailureError, ValidationFailedError
from ngpanel.services import nginx
from ngpanel.services.names import available_path
from ngpanel.services.versions import VersionStore

log = logging.getLogger(__name__)

Validator = Callable[[PanelConfig], CommandResult]


@dataclass
class StagedWrite:
    """A written-but-unvalidated change that can still be reverted."""

    site: str
    path: Path
    previous: bytes


@dataclass
class CommitResult:
    site: str
    validation: CommandResult
    version: VersionRecord | None = None


class ConfigLifecycle:
    def __init__(
        self,
        cfg: PanelConfig,
        versions: VersionStore | None = None,
        validator: Validator | None = None,
    ):
        self.cfg = cfg
        self.versions = versions or VersionStore(cfg)
        self.validator = validator or nginx.check_config

    def stage(self, site: str, content: str | bytes) -> StagedWrite:
        path = available_path(self.cfg, site)
        data = content.encode("utf-8") if isinstance(content, str) else content
        try:
            previous = path.read_bytes() if path.exists() else b""
        except OSError as exc:
            raise IOFailureError(f"Failed to read {path}: {exc}") from exc

        try:
            path.write_bytes(data)
        except OSError as exc:
            log.error("Failed to write %s: %s", path, exc)
            raise IOFailureError("Failed to write file.") from exc
        return StagedWrite(site=site, path=path, previous=previous)

    def revert(self, staged: StagedWrite) -> str | None:
        """Restore the pre-commit content. Returns an error message if that fails."""
        try:
            staged.path.write_bytes(staged.previous)
        except OSError as exc:
            log.error("Rollback of %s failed: %s", staged.path, exc)
            return str(exc)
        log.info("Rolled back %s", staged.site)
        return None

    def finalize(self, staged: StagedWrite, actor: str | None, source_address: str | None) -> VersionRecord | None:
        """Record the replaced content. A change whose history cannot be kept is reverted."""
        try:
            return self.versions.snapshot(staged.site, staged.previous, actor, source_address)
        except IOFailureError:
            self.revert(staged)
            raise

    def commit(
        self,
        site: str,
        content: str | bytes,
        actor: str | None = None,
        source_address: str | None = None,
    ) -> CommitResult:
        """Write ``content`` to ``site`` if and only if NGINX accepts it.

        Raises ValidationFailedError (carrying the validator output and any
        rollback error) when the check fails.
        """
        staged = self.stage(site, content)
        result = self.validator(self.cfg)
        if not result.ok:
            rollback_error = self.revert(staged)
            raise ValidationFailedError(result, rollback_error=rollback_error)
        version = self.finalize(staged, actor, source_address)
        log.info("Committed %s (actor=%s)", site, actor or "unknown")
        return CommitResult(site=site, validation=result, version=version)
