"""Panel accounts in ``users.json`` with bcrypt password hashes."""

from __future__ import annotations

import json
import logging

import bcrypt
from pydantic import ValidationError

from ngpanel_common import PanelConfig, Role, User

log = logging.getLogger(__name__)


def hash_password(password: str, rounds: int = 12) -> str:
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode(), salt).decode()


def check_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except ValueError:
        # Malformed hash in users.json
        return False


class UserStore:
    def __init__(self, cfg: PanelConfig):
        self.path = cfg.users_file

    def load(self) -> list[User]:
        if not self.path.exists():
            return []
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            return [User.model_validate(u) for u in raw]
        except (OSError, TypeError, ValueError, ValidationError) as exc:
            log.error("Failed to read %s: %s", self.path, exc)
            return []

    def save(self, users: list[User]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = [u.model_dump(mode="json", by_alias=True) for u in users]
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")

    def find(self, username: str) -> User | None:
        return next((u for u in self.load() if u.username == username), None)

    def authenticate(self, username: str, password: str) -> User | None:
        user = self.find(username)
        if user is None or not check_password(password, user.password_hash):
            return None
        return user

    def add_user(self, username: str, password: str, role: Role = Role.VIEWER, *, rounds: int = 12) -> User:
        """Create or replace ``username``."""
        user = User(username=username, password_hash=hash_password(password, rounds), role=role)
        users = [u for u in self.load() if u.username != username]
        users.append(user)
        self.save(users)
        log.info("Saved user %s (role=%s)", username, role.value)
        return user

    def ensure_bootstrap_admin(self, username: str, password_hash: str) -> bool:
        """Seed a single admin when no users exist. Returns True if one was created."""
        if not username or not password_hash or self.load():
            return False
        self.save([User(username=username, password_hash=password_hash, role=Role.ADMIN)])
        log.info("Bootstrapped admin user %s", username)
        return True
