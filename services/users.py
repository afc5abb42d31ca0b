"""User management rules on top of ``UserMapper``."""

from __future__ import annotations

import logging
import re
from typing import List

from database import InvalidUserAttributeError, InventoryStore
from models import User

logger = logging.getLogger(__name__)

USERNAME_RE = re.compile(r"^[a-z0-9_]{3,32}$", re.I)


def validate_user(user: User) -> User:
    if not USERNAME_RE.match(user.username or ""):
        raise InvalidUserAttributeError("Username must be 3-32 letters, digits, underscores.")
    if not (user.password or "").strip():
        raise InvalidUserAttributeError("Password required.")
    if not (user.first_name or "").strip():
        raise InvalidUserAttributeError("First name required.")
    if not (user.last_name or "").strip():
        raise InvalidUserAttributeError("Last name required.")
    return user


class UserManager:
    def __init__(self, store: InventoryStore):
        self.users = store.users

    def list_users(self) -> List[User]:
        return self.users.get_users()

    def create_user(self, user: User) -> User:
        validate_user(user)
        existing = self.users.find_by_username(user.username)
        if existing:
            raise InvalidUserAttributeError("Username already taken.")
        self.users.create_user(user)
        return user

    def update_user(self, user: User) -> User:
        validate_user(user)
        existing = self.users.find_by_username(user.username)
        if existing and existing.user_id != user.user_id:
            raise InvalidUserAttributeError("Username already taken.")
        self.users.update_user(user)
        return user

    def delete_user(self, user: User) -> None:
        self.users.delete_user(user)
        logger.info("user removed user_id=%s username=%s", user.user_id, user.username)


__all__ = ["USERNAME_RE", "UserManager", "validate_user"]
