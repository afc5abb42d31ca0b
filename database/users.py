"""Mapper for the ``user`` table.

Passwords are stored and compared exactly as typed. That matches the data
already in use, and it is a known weakness: do not reuse this for anything
that needs real credentials.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import sqlalchemy as sa

from models import User
from .errors import LastAdministratorError, StorageError, UserReferenceError
from .mapper import EntityMapper

logger = logging.getLogger(__name__)

DEFAULT_ADMIN = {
    "username": "admin",
    "password": "admin",
    "first_name": "Administrative",
    "last_name": "User",
}


def _to_user(row) -> User:
    return User(
        user_id=row.userId,
        username=row.username,
        password=row.password,
        first_name=row.firstName,
        last_name=row.lastName,
        administrator=bool(row.administrator),
    )


def _check_user(user, saved: bool = False) -> User:
    if user is None:
        raise UserReferenceError("User cannot be None")
    if not isinstance(user, User):
        raise UserReferenceError(f"Expected a User, got {type(user).__name__}")
    if saved and not user.user_id:
        raise UserReferenceError(f"User {user.username} has not been saved yet")
    return user


class UserMapper(EntityMapper):
    table = "user"
    create_table_sql = """
        CREATE TABLE IF NOT EXISTS user (
            userId INTEGER PRIMARY KEY,
            username TEXT NOT NULL UNIQUE,
            password TEXT NOT NULL,
            firstName TEXT NOT NULL,
            lastName TEXT NOT NULL,
            administrator INTEGER DEFAULT 0
        )
    """

    def seed(self, conn: sa.engine.Connection) -> None:
        result = conn.execute(
            sa.text(
                "INSERT INTO user (username, password, firstName, lastName, administrator) "
                "VALUES (:username, :password, :first_name, :last_name, 1)"
            ),
            DEFAULT_ADMIN,
        )
        if result.rowcount != 1:
            raise StorageError("Inserting default administrative user failed")
        logger.info("seeded default administrator username=%s", DEFAULT_ADMIN["username"])

    @staticmethod
    def _other_administrators(conn: sa.engine.Connection, user_id: int) -> int:
        return conn.execute(
            sa.text("SELECT COUNT(*) FROM user WHERE administrator = 1 AND userId != :uid"),
            {"uid": user_id},
        ).scalar()

    def get_users(self) -> List[User]:
        with self.database.connect() as conn:
            rows = conn.execute(sa.text("SELECT * FROM user ORDER BY userId")).fetchall()
        return [_to_user(r) for r in rows]

    def find_user(self, user_id: int) -> Optional[User]:
        with self.database.connect() as conn:
            row = conn.execute(
                sa.text("SELECT * FROM user WHERE userId = :uid"), {"uid": user_id}
            ).first()
        return _to_user(row) if row else None

    def find_by_username(self, username: str) -> Optional[User]:
        with self.database.connect() as conn:
            row = conn.execute(
                sa.text("SELECT * FROM user WHERE username = :username"), {"username": username}
            ).first()
        return _to_user(row) if row else None

    def authenticate_user(self, username: str, password: str) -> Optional[User]:
        """Return the user when ``password`` matches the stored one exactly."""
        user = self.find_by_username(username)
        if user is None or not user.is_valid_password(password):
            return None
        return user

    def verify_credentials(self, username: str, password: str) -> bool:
        return self.authenticate_user(username, password) is not None

    def create_user(self, user: User) -> int:
        _check_user(user)
        with self.database.connect() as conn:
            result = conn.execute(
                sa.text(
                    "INSERT INTO user (username, password, firstName, lastName, administrator) "
                    "VALUES (:username, :password, :first_name, :last_name, :administrator)"
                ),
                {
                    "username": user.username,
                    "password": user.password,
                    "first_name": user.first_name,
                    "last_name": user.last_name,
                    "administrator": 1 if user.administrator else 0,
                },
            )
            user.user_id = result.lastrowid
        logger.info("create_user user_id=%s username=%s", user.user_id, user.username)
        return user.user_id

    def update_user(self, user: User) -> None:
        _check_user(user, saved=True)
        with self.database.connect() as conn:
            if not user.administrator and self._other_administrators(conn, user.user_id) == 0:
                raise LastAdministratorError()
            result = conn.execute(
                sa.text(
                    "UPDATE user SET username = :username, password = :password, "
                    "firstName = :first_name, lastName = :last_name, "
                    "administrator = :administrator WHERE userId = :uid"
                ),
                {
                    "username": user.username,
                    "password": user.password,
                    "first_name": user.first_name,
                    "last_name": user.last_name,
                    "administrator": 1 if user.administrator else 0,
                    "uid": user.user_id,
                },
            )
            if result.rowcount != 1:
                raise UserReferenceError(f"User {user.user_id} not found")
        logger.info("update_user user_id=%s administrator=%s", user.user_id, user.administrator)

    def delete_user(self, user: User) -> None:
        _check_user(user, saved=True)
        with self.database.connect() as conn:
            if self._other_administrators(conn, user.user_id) == 0:
                raise LastAdministratorError()
            result = conn.execute(
                sa.text("DELETE FROM user WHERE userId = :uid"), {"uid": user.user_id}
            )
            if result.rowcount != 1:
                raise UserReferenceError(f"User {user.user_id} not found")
        logger.info("delete_user user_id=%s", user.user_id)

    def after_import(self, conn: sa.engine.Connection) -> None:
        if self._other_administrators(conn, 0) == 0:
            raise LastAdministratorError("Import would leave the system without an administrator.")
