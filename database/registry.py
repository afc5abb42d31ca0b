"""Keeps the registered mappers and their tables in step."""

from __future__ import annotations

import logging
from typing import Iterable, List

from .connection import SQLiteDatabase
from .mapper import EntityMapper

logger = logging.getLogger(__name__)


class TableRegistrar:
    def __init__(self, database: SQLiteDatabase):
        self.database = database
        self._mappers: List[EntityMapper] = []

    @property
    def mappers(self) -> List[EntityMapper]:
        return list(self._mappers)

    def register(self, mapper: EntityMapper) -> None:
        """Add ``mapper`` and re-check the schema of every registered mapper."""
        if mapper is None:
            raise TypeError("mapper cannot be None")
        self._mappers.append(mapper)
        self.ensure_schemas()

    def ensure_schemas(self) -> None:
        for mapper in self._mappers:
            if mapper.ensure_schema():
                logger.info("ensure_schema created table=%s", mapper.table)

    def export_database(self) -> List[str]:
        statements: List[str] = []
        for mapper in self._mappers:
            statements.extend(mapper.export_table())
        logger.info("export_database statements=%s", len(statements))
        return statements

    def import_database(self, statements: Iterable[str], overwrite: bool = False) -> int:
        """Run exported statements against the registered tables.

        Foreign keys are off for the duration so statement order does not
        matter. With ``overwrite`` every registered table is emptied first.
        The whole import is one transaction: any failure, including a mapper
        rejecting the result, leaves the database as it was.
        """
        statements = [s.strip() for s in statements if s and s.strip()]
        with self.database.connect(enforce_foreign_keys=False) as conn:
            if overwrite:
                self.database.truncate_tables(conn, [m.table for m in reversed(self._mappers)])
            count = self.database.execute_statements(conn, statements)
            for mapper in self._mappers:
                mapper.after_import(conn)
        logger.info("import_database statements=%s overwrite=%s", count, overwrite)
        return count
