"""Per-site version history: immutable content snapshots plus a newest-first index."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

from pydantic import ValidationError

from ngpanel_common import PanelConfig, VersionRecord

from ngpanel.errors import CorruptIndexError, IOFailureError, NotFoundError
from ngpanel.services.names import check_site_name, check_version_id

log = logging.getLogger(__name__)

_ID_FORMAT = "%Y-%m-%dT%H-%M-%S-%fZ"


def format_version_id(moment: datetime) -> str:
    """Render ``moment`` as ``2025-01-31T10-20-30-123Z`` (UTC, millisecond precision)."""
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H-%M-%S-") + f"{moment.microsecond // 1000:03d}Z"


def parse_version_id(version_id: str) -> datetime:
    return datetime.strptime(version_id, _ID_FORMAT).replace(tzinfo=timezone.utc)


def decode_config(raw: bytes) -> str:
    """Decode stored config bytes for display; line endings are left untouched."""
    return raw.decode("utf-8", errors="replace")


def _atomic_write_text(path: Path, content: str) -> None:
    fd, tmp = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp, path)
    except BaseException:
        try:
            os.unlink(tmp)
        except FileNotFoundError:
            pass
        raise


class VersionStore:
    """Stores prior contents of site configs under ``history/<site>/``."""

    def __init__(self, cfg: PanelConfig):
        self.cfg = cfg

    def site_dir(self, site: str) -> Path:
        return self.cfg.history_dir / check_site_name(site)

    def index_path(self, site: str) -> Path:
        return self.site_dir(site) / "index.json"

    def parse_index(self, site: str) -> list[VersionRecord]:
        """Read the index for ``site``. Raises CorruptIndexError if unreadable."""
        path = self.index_path(site)
        if not path.exists():
            return []
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(raw, list):
                raise ValueError("index is not a list")
            return [VersionRecord.model_validate(entry) for entry in raw]
        except (OSError, ValueError, ValidationError) as exc:
            raise CorruptIndexError(f"Failed to read history index for {site}: {exc}") from exc

    def list(self, site: str) -> list[VersionRecord]:
        """Return the index as stored (newest first)."""
        return self.parse_index(site)

    def fetch(self, site: str, version_id: str) -> str:
        check_version_id(version_id)
        path = self.site_dir(site) / f"{version_id}.conf"
        if not path.is_file():
            raise NotFoundError("Version not found")
        try:
            return decode_config(path.read_bytes())
        except OSError as exc:
            raise IOFailureError(f"Failed to read version {version_id}: {exc}") from exc

    def _next_id(self, site: str, index: list[VersionRecord]) -> tuple[str, datetime]:
        now = datetime.now(timezone.utc)
        version_id = format_version_id(now)
        if index and version_id <= index[0].id:
            # Clock did not advance past the newest snapshot.
            try:
                newest = parse_version_id(index[0].id)
            except ValueError:
                log.warning("Ignoring malformed newest version id %r for %s", index[0].id, site)
                return version_id, now
            now = newest + timedelta(milliseconds=1)
            version_id = format_version_id(now)
        return version_id, now

    def snapshot(
        self,
        site: str,
        content: str | bytes,
        actor: str | None = None,
        source_address: str | None = None,
    ) -> VersionRecord | None:
        """Record ``content`` as the newest version of ``site``.

        Empty content is never recorded. A corrupt index is logged and
        replaced by a fresh one rather than failing the snapshot.
        """
        site_dir = self.site_dir(site)
        if not content:
            return None

        try:
            index = self.parse_index(site)
        except CorruptIndexError as exc:
            log.warning("%s; starting a new index", exc)
            index = []

        version_id, created = self._next_id(site, index)
        record = VersionRecord(
            id=version_id,
            created_at=created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            user=actor or "unknown",
            source_address=source_address or "unknown",
        )
        try:
            site_dir.mkdir(parents=True, exist_ok=True)
            data = content.encode("utf-8") if isinstance(content, str) else content
            with open(site_dir / f"{version_id}.conf", "xb") as f:
                f.write(data)
            index.insert(0, record)
            _atomic_write_text(
                self.index_path(site),
                json.dumps([r.to_index() for r in index], indent=2),
            )
        except OSError as exc:
            raise IOFailureError(f"Failed to record version for {site}: {exc}") from exc

        log.info("Recorded version %s for %s (user=%s)", version_id, site, record.user)
        return record
