"""SQLite connection provider.

One ``SQLiteDatabase`` points at one database file. Every call opens its own
connection and closes it before returning; nothing is pooled.
"""

from __future__ import annotations

import logging
import math
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

import sqlalchemy as sa
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

from .errors import StorageError

logger = logging.getLogger(__name__)

DB_FILENAME = "inventory.db"


def _sql_literal(value) -> str:
    """Render a column value the way it would be typed in an INSERT."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float) and not math.isfinite(value):
        raise StorageError(f"Cannot export non-finite number {value!r}")
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        quoted = "'" + value.replace("'", "''") + "'"
        # keep one statement per line in export files
        quoted = quoted.replace("\r", "' || char(13) || '").replace("\n", "' || char(10) || '")
        return quoted
    raise StorageError(f"Unknown data type found during export: {type(value).__name__}")


class SQLiteDatabase:
    def __init__(self, path: Union[str, os.PathLike] = DB_FILENAME):
        self.path = Path(path).expanduser().resolve()
        if self.path.is_dir():
            raise StorageError(f"{self.path} is a directory and cannot be used as a database file")
        if self.path.exists() and not os.access(self.path, os.R_OK | os.W_OK):
            raise StorageError(f"Unable to read/write to {self.path}.")
        self.engine = sa.create_engine(f"sqlite:///{self.path}", poolclass=NullPool)

    def __repr__(self) -> str:
        return f"<SQLiteDatabase {self.path}>"

    @contextmanager
    def connect(self, enforce_foreign_keys: bool = True) -> Iterator[sa.engine.Connection]:
        """Yield a connection, committing on success and rolling back on error.

        Foreign keys are enforced unless ``enforce_foreign_keys`` is false,
        which import uses so rows can arrive in any order.
        """
        try:
            with self.engine.connect() as conn:
                conn.exec_driver_sql(
                    "PRAGMA foreign_keys = %s" % ("ON" if enforce_foreign_keys else "OFF")
                )
                yield conn
                conn.commit()
        except SQLAlchemyError as exc:
            raise StorageError(f"Database error ({self.path.name}): {exc}") from exc

    def table_exists(self, table_name_pattern: str) -> bool:
        """True if a table matching the SQL ``LIKE`` pattern exists."""
        with self.connect() as conn:
            row = conn.execute(
                sa.text(
                    "SELECT name FROM sqlite_master WHERE type = 'table' AND name LIKE :pattern"
                ),
                {"pattern": table_name_pattern},
            ).first()
        return row is not None

    def table_names(self) -> List[str]:
        with self.connect() as conn:
            rows = conn.execute(
                sa.text(
                    "SELECT name FROM sqlite_master "
                    "WHERE type = 'table' AND name NOT LIKE 'sqlite_%' ORDER BY name"
                )
            ).fetchall()
        return [r[0] for r in rows]

    def export_records(self, table_name: str) -> List[str]:
        """Return one INSERT statement per row of ``table_name``."""
        statements: List[str] = []
        with self.connect() as conn:
            result = conn.exec_driver_sql(f'SELECT * FROM "{table_name}"')
            columns = list(result.keys())
            for row in result:
                values = ",".join(_sql_literal(v) for v in row)
                statements.append(
                    f"INSERT INTO {table_name} ({','.join(columns)}) VALUES ({values})"
                )
        logger.info("export_records table=%s rows=%s", table_name, len(statements))
        return statements

    @staticmethod
    def execute_statements(conn: sa.engine.Connection, statements: Iterable[str]) -> int:
        """Run raw statements on ``conn`` and return how many were executed.

        Blank statements are skipped. Nothing is checked beyond what SQLite
        itself rejects.
        """
        count = 0
        for statement in statements:
            if not statement or not statement.strip():
                continue
            conn.exec_driver_sql(statement)
            count += 1
        return count

    def truncate_tables(self, conn: sa.engine.Connection, table_names: Iterable[str]) -> None:
        for name in table_names:
            conn.exec_driver_sql(f'DELETE FROM "{name}"')

    def drop_all_tables(self) -> List[str]:
        names = self.table_names()
        with self.connect(enforce_foreign_keys=False) as conn:
            for name in names:
                conn.exec_driver_sql(f'DROP TABLE "{name}"')
        logger.info("drop_all_tables dropped=%s", names)
        return names

    def scalar(self, sql: str, params: Optional[dict] = None):
        with self.connect() as conn:
            return conn.execute(sa.text(sql), params or {}).scalar()
