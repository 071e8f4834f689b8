"""Panel users and roles."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    VIEWER = "viewer"
    OPERATOR = "operator"
    ADMIN = "admin"

    @property
    def level(self) -> int:
        return _ROLE_LEVELS[self]

    def allows(self, required: Role) -> bool:
        """True if this role is at least as privileged as ``required``."""
        return self.level >= required.level


_ROLE_LEVELS = {Role.VIEWER: 1, Role.OPERATOR: 2, Role.ADMIN: 3}


class User(BaseModel):
    """An entry of ``users.json``."""

    model_config = ConfigDict(populate_by_name=True)

    username: str
    password_hash: str = Field(alias="passwordHash")
    role: Role = Role.VIEWER
