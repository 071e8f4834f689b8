"""Tests for the nginx -t / reload invoker."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from ngpanel_common import CommandResult, PanelConfig
from ngpanel.services import nginx


class TestRunCommand:
    def test_success_captures_output(self, make_script):
        script = make_script("ok.sh", "#!/bin/sh\necho hello\necho warn >&2\n")
        result = nginx.run_command([str(script)])
        assert result == CommandResult(exit_code=0, stdout="hello\n", stderr="warn\n")

    def test_failure_is_not_raised(self, make_script):
        script = make_script("fail.sh", "#!/bin/sh\necho broken >&2\nexit 3\n")
        result = nginx.run_command([str(script)])
        assert result.exit_code == 3
        assert result.stderr == "broken\n"

    def test_timeout_is_synthetic_exit_code(self, make_script):
        script = make_script("slow.sh", "#!/bin/sh\nexec sleep 5\n")
        result = nginx.run_command([str(script)], timeout=0.2)
        assert result.exit_code == 124
        assert "timed out" in result.stderr

    def test_missing_binary(self, tmp_path: Path):
        result = nginx.run_command([str(tmp_path / "no-such-nginx"), "-t"])
        assert result.exit_code == 127
        assert result.stderr


class TestCheckConfig:
    def test_passes_on_clean_tree(self, tmp_config: PanelConfig):
        (tmp_config.available_dir / "example.com").write_text("server { listen 80; }")
        result = nginx.check_config(tmp_config)
        assert result.ok
        assert "test is successful" in result.stderr

    def test_fails_on_bad_file(self, tmp_config: PanelConfig):
        (tmp_config.available_dir / "broken.conf").write_text("bad{")
        result = nginx.check_config(tmp_config)
        assert result.exit_code == 1
        assert "test failed" in result.stderr


class TestReload:
    def test_signal_reload(self, tmp_config: PanelConfig):
        with patch("ngpanel.services.nginx.run_command", return_value=CommandResult(exit_code=0)) as run:
            nginx.reload(tmp_config)
        assert run.call_args.args[0] == [str(tmp_config.validator_path), "-s", "reload"]

    def test_systemctl_reload(self, tmp_config: PanelConfig):
        cfg = tmp_config.model_copy(update={"use_service_manager_reload": True})
        with patch("ngpanel.services.nginx.run_command", return_value=CommandResult(exit_code=0)) as run:
            nginx.reload(cfg)
        assert run.call_args.args[0] == [str(cfg.systemctl_path), "reload", "nginx"]

    def test_reload_with_fake_binary(self, tmp_config: PanelConfig):
        result = nginx.reload(tmp_config)
        assert result.ok
        assert result.stdout == "signal reload sent\n"
