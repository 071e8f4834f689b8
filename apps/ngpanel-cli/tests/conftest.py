"""Shared test fixtures."""

from __future__ import annotations

import stat
from pathlib import Path

import pytest

from ngpanel_common import PanelConfig

# Stand-in for the nginx binary: "-t" fails when any site config contains "bad{".
FAKE_NGINX = """#!/bin/sh
case "$1" in
  -t)
    if grep -rqF 'bad{' "{available}"; then
      echo 'nginx: [emerg] unexpected "{" in {available}' >&2
      echo 'nginx: configuration file test failed' >&2
      exit 1
    fi
    echo 'nginx: configuration file test is successful' >&2
    exit 0
    ;;
  -s)
    echo "signal $2 sent"
    exit 0
    ;;
esac
exit 2
"""


def write_script(path: Path, body: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def make_script(tmp_path: Path):
    """Return a factory writing executable shell scripts under ``tmp_path``."""

    def _make(name: str, body: str) -> Path:
        return write_script(tmp_path / "scripts" / name, body)

    return _make


@pytest.fixture
def tmp_config(tmp_path: Path) -> PanelConfig:
    """Return a PanelConfig pointing at temp directories and a fake nginx."""
    conf_root = tmp_path / "etc-nginx"
    available = conf_root / "sites-available"
    enabled = conf_root / "sites-enabled"
    available.mkdir(parents=True)
    enabled.mkdir(parents=True)
    nginx = write_script(
        tmp_path / "bin" / "nginx",
        FAKE_NGINX.replace("{available}", str(available)),
    )
    cfg = PanelConfig(
        available_dir=available,
        enabled_dir=enabled,
        validator_path=nginx,
        systemctl_path=tmp_path / "bin" / "systemctl",
        nginx_conf_root=conf_root,
        data_dir=tmp_path / "data",
        use_service_manager_reload=False,
        validator_timeout=5,
        access_log=tmp_path / "log" / "access.log",
        error_log=tmp_path / "log" / "error.log",
    )
    cfg.ensure_data_dirs()
    return cfg
