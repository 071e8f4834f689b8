"""Central configuration for ngpanel tools."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

from ngpanel_common.constants import (
    ACCESS_LOG,
    DATA_DIR,
    ERROR_LOG,
    NGINX_AVAILABLE_DIR,
    NGINX_CONF_ROOT,
    NGINX_ENABLED_DIR,
    NGINX_PATH,
    SYSTEMCTL_PATH,
    VALIDATOR_TIMEOUT,
)


def _env_path(name: str, default: Path) -> Path:
    value = os.environ.get(name)
    return Path(value) if value else default


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "false").strip().lower() in ("1", "true", "yes", "on")


class PanelConfig(BaseModel):
    """Runtime configuration passed explicitly to every service."""

    available_dir: Path = Field(default_factory=lambda: _env_path("NGINX_AVAILABLE_DIR", NGINX_AVAILABLE_DIR))
    enabled_dir: Path = Field(default_factory=lambda: _env_path("NGINX_ENABLED_DIR", NGINX_ENABLED_DIR))
    validator_path: Path = Field(default_factory=lambda: _env_path("NGINX_PATH", NGINX_PATH))
    systemctl_path: Path = Field(default_factory=lambda: _env_path("SYSTEMCTL_PATH", SYSTEMCTL_PATH))
    nginx_conf_root: Path = Field(default_factory=lambda: _env_path("NGINX_CONF_ROOT", NGINX_CONF_ROOT))
    data_dir: Path = Field(default_factory=lambda: _env_path("NGPANEL_DATA_DIR", DATA_DIR))
    use_service_manager_reload: bool = Field(default_factory=lambda: _env_flag("USE_SYSTEMCTL"))
    validator_timeout: float = VALIDATOR_TIMEOUT
    access_log: Path = Field(default_factory=lambda: _env_path("NGINX_ACCESS_LOG", ACCESS_LOG))
    error_log: Path = Field(default_factory=lambda: _env_path("NGINX_ERROR_LOG", ERROR_LOG))

    @property
    def history_dir(self) -> Path:
        return self.data_dir / "history"

    @property
    def backup_dir(self) -> Path:
        return self.data_dir / "backups"

    @property
    def users_file(self) -> Path:
        return self.data_dir / "users.json"

    @property
    def templates_file(self) -> Path:
        return self.data_dir / "templates.json"

    def ensure_data_dirs(self) -> None:
        """Create the panel's own data directories."""
        for d in (self.data_dir, self.history_dir, self.backup_dir):
            d.mkdir(parents=True, exist_ok=True)
