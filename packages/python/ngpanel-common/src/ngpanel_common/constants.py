"""Shared constants for the ngpanel tools."""

from pathlib import Path

# NGINX layout (overridable via PanelConfig / env vars)
NGINX_AVAILABLE_DIR = Path("/etc/nginx/sites-available")
NGINX_ENABLED_DIR = Path("/etc/nginx/sites-enabled")
NGINX_CONF_ROOT = Path("/etc/nginx")
NGINX_PATH = Path("/usr/sbin/nginx")
SYSTEMCTL_PATH = Path("/bin/systemctl")

# NGINX logs
ACCESS_LOG = Path("/var/log/nginx/access.log")
ERROR_LOG = Path("/var/log/nginx/error.log")

# Panel data
DATA_DIR = Path("/var/lib/ngpanel")

# External commands
VALIDATOR_TIMEOUT = 15.0
TIMEOUT_EXIT_CODE = 124
MISSING_BINARY_EXIT_CODE = 127

# Path-segment patterns
SITE_NAME_PATTERN = r"^[A-Za-z0-9._-]+$"
VERSION_ID_PATTERN = r"^\d{4}-\d{2}-\d{2}T\d{2}-\d{2}-\d{2}-\d{3}Z$"
BACKUP_NAME_PATTERN = r"^[\w\-.]+\.tar\.gz$"

# Backups
BACKUP_SUFFIX = "_nginx-backup.tar.gz"

# Templates
TEMPLATE_PLACEHOLDER = "{{domain}}"

# Log tail
DEFAULT_LOG_LINES = 200
MAX_LOG_LINES = 5000
