"""Tests for the log tail service."""

from __future__ import annotations

import pytest

from ngpanel_common import PanelConfig
from ngpanel.errors import NotFoundError
from ngpanel.services import logs


@pytest.fixture
def access_log(tmp_config: PanelConfig):
    tmp_config.access_log.parent.mkdir(parents=True, exist_ok=True)
    tmp_config.access_log.write_text("".join(f"GET /{i}\n" for i in range(10)))
    return tmp_config.access_log


def test_tail_last_lines(tmp_config: PanelConfig, access_log):
    assert logs.tail(tmp_config, "access", 3) == "GET /7\nGET /8\nGET /9\n"


def test_unknown_type_reads_access_log(tmp_config: PanelConfig, access_log):
    assert logs.tail(tmp_config, "whatever", 1) == "GET /9\n"


def test_lines_are_clamped(tmp_config: PanelConfig, access_log):
    assert logs.tail(tmp_config, "access", 0) == "GET /9\n"
    assert logs.tail(tmp_config, "access", 10**9).count("\n") == 10


def test_missing_error_log(tmp_config: PanelConfig):
    with pytest.raises(NotFoundError):
        logs.tail(tmp_config, "error")
