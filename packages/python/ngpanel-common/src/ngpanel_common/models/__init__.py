"""Shared Pydantic models."""

from ngpanel_common.models.command import CommandResult
from ngpanel_common.models.site import SiteInfo, Template
from ngpanel_common.models.user import Role, User
from ngpanel_common.models.version import VersionRecord

__all__ = ["CommandResult", "Role", "SiteInfo", "Template", "User", "VersionRecord"]
