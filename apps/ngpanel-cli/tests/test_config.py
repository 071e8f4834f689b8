"""Tests for PanelConfig."""

from __future__ import annotations

from pathlib import Path

from ngpanel_common import VALIDATOR_TIMEOUT, PanelConfig


class TestPanelConfig:
    def test_derived_paths(self, tmp_config: PanelConfig):
        assert tmp_config.history_dir == tmp_config.data_dir / "history"
        assert tmp_config.backup_dir == tmp_config.data_dir / "backups"
        assert tmp_config.users_file == tmp_config.data_dir / "users.json"
        assert tmp_config.templates_file == tmp_config.data_dir / "templates.json"

    def test_ensure_data_dirs(self, tmp_path: Path):
        cfg = PanelConfig(data_dir=tmp_path / "fresh")
        cfg.ensure_data_dirs()
        assert cfg.history_dir.is_dir()
        assert cfg.backup_dir.is_dir()

    def test_defaults(self, monkeypatch):
        for var in ("NGINX_AVAILABLE_DIR", "NGINX_ENABLED_DIR", "NGINX_PATH", "USE_SYSTEMCTL", "NGPANEL_DATA_DIR"):
            monkeypatch.delenv(var, raising=False)
        cfg = PanelConfig()
        assert cfg.available_dir == Path("/etc/nginx/sites-available")
        assert cfg.enabled_dir == Path("/etc/nginx/sites-enabled")
        assert cfg.validator_path == Path("/usr/sbin/nginx")
        assert cfg.use_service_manager_reload is False
        assert cfg.validator_timeout == VALIDATOR_TIMEOUT

    def test_from_env(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("NGINX_AVAILABLE_DIR", str(tmp_path / "avail"))
        monkeypatch.setenv("NGINX_ENABLED_DIR", str(tmp_path / "enab"))
        monkeypatch.setenv("NGINX_PATH", "/opt/nginx/sbin/nginx")
        monkeypatch.setenv("USE_SYSTEMCTL", "TRUE")
        monkeypatch.setenv("NGPANEL_DATA_DIR", str(tmp_path / "data"))
        cfg = PanelConfig()
        assert cfg.available_dir == tmp_path / "avail"
        assert cfg.enabled_dir == tmp_path / "enab"
        assert cfg.validator_path == Path("/opt/nginx/sbin/nginx")
        assert cfg.use_service_manager_reload is True
        assert cfg.users_file == tmp_path / "data" / "users.json"
