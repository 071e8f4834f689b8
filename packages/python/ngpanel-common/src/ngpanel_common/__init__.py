"""ngpanel common — shared models and constants for the ngpanel CLI and API."""

from ngpanel_common.constants import (
    ACCESS_LOG,
    BACKUP_NAME_PATTERN,
    BACKUP_SUFFIX,
    DATA_DIR,
    DEFAULT_LOG_LINES,
    ERROR_LOG,
    MAX_LOG_LINES,
    NGINX_AVAILABLE_DIR,
    NGINX_CONF_ROOT,
    NGINX_ENABLED_DIR,
    NGINX_PATH,
    SITE_NAME_PATTERN,
    TEMPLATE_PLACEHOLDER,
    VALIDATOR_TIMEOUT,
    VERSION_ID_PATTERN,
)
from ngpanel_common.config import PanelConfig
from ngpanel_common.models import CommandResult, Role, SiteInfo, Template, User, VersionRecord

__all__ = [
    "ACCESS_LOG",
    "BACKUP_NAME_PATTERN",
    "BACKUP_SUFFIX",
    "CommandResult",
    "DATA_DIR",
    "DEFAULT_LOG_LINES",
    "ERROR_LOG",
    "MAX_LOG_LINES",
    "NGINX_AVAILABLE_DIR",
    "NGINX_CONF_ROOT",
    "NGINX_ENABLED_DIR",
    "NGINX_PATH",
    "PanelConfig",
    "Role",
    "SITE_NAME_PATTERN",
    "SiteInfo",
    "TEMPLATE_PLACEHOLDER",
    "Template",
    "User",
    "VALIDATOR_TIMEOUT",
    "VERSION_ID_PATTERN",
    "VersionRecord",
]
