"""Common surface every entity mapper offers to the table registrar."""

from __future__ import annotations

from typing import List

import sqlalchemy as sa

from .connection import SQLiteDatabase


class EntityMapper:
    # name of the table this mapper owns
    table = ""
    create_table_sql = ""

    def __init__(self, database: SQLiteDatabase):
        self.database = database

    def ensure_schema(self) -> bool:
        """Create the table if it is missing. Returns True when it was created.

        Must be safe to call any number of times: the registrar calls it
        again for every mapper each time a new one registers.
        """
        created = not self.database.table_exists(self.table)
        with self.database.connect() as conn:
            conn.execute(sa.text(self.create_table_sql))
            if created:
                self.seed(conn)
        return created

    def seed(self, conn: sa.engine.Connection) -> None:
        """Rows to insert the first time the table is created."""

    def export_table(self) -> List[str]:
        return self.database.export_records(self.table)

    def after_import(self, conn: sa.engine.Connection) -> None:
        """Validate the table once an import has run on ``conn``."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} table={self.table}>"
