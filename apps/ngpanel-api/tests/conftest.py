"""Shared fixtures for API tests."""

from __future__ import annotations

import stat
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from ngpanel_common import PanelConfig, Role
from ngpanel.services.users import UserStore
from ngpanel_api.config import Settings
from ngpanel_api.main import create_app

# "-t" fails when any site config contains "bad{"; "-s reload" always succeeds.
FAKE_NGINX = """#!/bin/sh
if [ "$1" = "-t" ]; then
  if grep -rqF 'bad{' "{available}"; then
    echo 'nginx: [emerg] unexpected "{"' >&2
    echo 'nginx: configuration file test failed' >&2
    exit 1
  fi
  echo 'nginx: configuration file test is successful' >&2
  exit 0
fi
echo "signal $2 sent"
"""

PASSWORDS = {"admin": "admin-pw", "operator": "operator-pw", "viewer": "viewer-pw"}


@pytest.fixture
def panel_config(tmp_path: Path) -> PanelConfig:
    conf_root = tmp_path / "etc-nginx"
    available = conf_root / "sites-available"
    enabled = conf_root / "sites-enabled"
    available.mkdir(parents=True)
    enabled.mkdir(parents=True)

    nginx = tmp_path / "bin" / "nginx"
    nginx.parent.mkdir()
    nginx.write_text(FAKE_NGINX.replace("{available}", str(available)))
    nginx.chmod(nginx.stat().st_mode | stat.S_IXUSR)

    cfg = PanelConfig(
        available_dir=available,
        enabled_dir=enabled,
        validator_path=nginx,
        nginx_conf_root=conf_root,
        data_dir=tmp_path / "data",
        use_service_manager_reload=False,
        validator_timeout=5,
        access_log=tmp_path / "log" / "access.log",
        error_log=tmp_path / "log" / "error.log",
    )
    store = UserStore(cfg)
    for name, password in PASSWORDS.items():
        store.add_user(name, password, Role(name), rounds=4)
    return cfg


@pytest.fixture
def client(panel_config: PanelConfig):
    app = create_app(panel_config, Settings(session_secret="test-secret"))
    with TestClient(app) as c:
        yield c


def login(client: TestClient, username: str) -> None:
    resp = client.post(
        "/login",
        data={"username": username, "password": PASSWORDS[username]},
        follow_redirects=False,
    )
    assert resp.status_code == 303
    assert resp.headers["location"] == "/"


@pytest.fixture
def admin(client: TestClient) -> TestClient:
    login(client, "admin")
    return client


@pytest.fixture
def operator(client: TestClient) -> TestClient:
    login(client, "operator")
    return client


@pytest.fixture
def viewer(client: TestClient) -> TestClient:
    login(client, "viewer")
    return client
