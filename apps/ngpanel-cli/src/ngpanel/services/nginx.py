"""NGINX config validation and reload."""

from __future__ import annotations

import logging
import subprocess

from ngpanel_common import CommandResult, PanelConfig
from ngpanel_common.constants import MISSING_BINARY_EXIT_CODE, TIMEOUT_EXIT_CODE

log = logging.getLogger(__name__)


def _text(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def run_command(cmd: list[str], *, timeout: float | None = None) -> CommandResult:
    """Run ``cmd`` and capture its verdict.

    Never raises for a failing, missing or timed-out process; those come back
    as a non-zero ``exit_code`` with a diagnostic in ``stderr``.
    """
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout, check=False)
    except subprocess.TimeoutExpired as exc:
        log.warning("Command timed out after %ss: %s", timeout, " ".join(cmd))
        stderr = _text(exc.stderr)
        return CommandResult(
            exit_code=TIMEOUT_EXIT_CODE,
            stdout=_text(exc.stdout),
            stderr=f"{stderr}\nCommand timed out after {timeout}s".lstrip("\n"),
        )
    except OSError as exc:
        log.warning("Command could not be started: %s (%s)", " ".join(cmd), exc)
        return CommandResult(exit_code=MISSING_BINARY_EXIT_CODE, stderr=str(exc))
    return CommandResult(exit_code=proc.returncode, stdout=proc.stdout, stderr=proc.stderr)


def check_config(cfg: PanelConfig) -> CommandResult:
    """Run ``nginx -t`` against the whole live configuration."""
    return run_command([str(cfg.validator_path), "-t"], timeout=cfg.validator_timeout)


def reload(cfg: PanelConfig) -> CommandResult:
    """Reload NGINX, through systemd when configured, otherwise by signal."""
    if cfg.use_service_manager_reload:
        cmd = [str(cfg.systemctl_path), "reload", "nginx"]
    else:
        cmd = [str(cfg.validator_path), "-s", "reload"]
    result = run_command(cmd, timeout=cfg.validator_timeout)
    if result.ok:
        log.info("NGINX reloaded via %s", cmd[0])
    else:
        log.warning("NGINX reload failed (exit %s)", result.exit_code)
    return result
