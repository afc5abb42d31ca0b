from __future__ import annotations

import logging
from typing import List, Optional

import sqlalchemy as sa

from models import Manufacture
from .mapper import EntityMapper

logger = logging.getLogger(__name__)


class ManufactureMapper(EntityMapper):
    table = "manufacture"
    create_table_sql = """
        CREATE TABLE IF NOT EXISTS manufacture (
            manufactureId INTEGER PRIMARY KEY,
            name TEXT UNIQUE NOT NULL COLLATE NOCASE
        )
    """

    def find_manufacture(self, manufacture_id: int) -> Optional[Manufacture]:
        with self.database.connect() as conn:
            row = conn.execute(
                sa.text("SELECT manufactureId, name FROM manufacture WHERE manufactureId = :mid"),
                {"mid": manufacture_id},
            ).first()
        return Manufacture(row.manufactureId, row.name) if row else None

    def find_manufacture_by_name(self, name: str) -> Optional[Manufacture]:
        # the column is NOCASE so "Sony" and "SONY" are the same manufacture
        with self.database.connect() as conn:
            row = conn.execute(
                sa.text("SELECT manufactureId, name FROM manufacture WHERE name = :name"),
                {"name": name},
            ).first()
        return Manufacture(row.manufactureId, row.name) if row else None

    def add_manufacture(self, name: str) -> Manufacture:
        """Return the manufacture called ``name``, creating it when missing."""
        name = (name or "").strip()
        existing = self.find_manufacture_by_name(name)
        if existing:
            return existing
        with self.database.connect() as conn:
            result = conn.execute(
                sa.text("INSERT INTO manufacture (name) VALUES (:name)"), {"name": name}
            )
            manufacture = Manufacture(result.lastrowid, name)
        logger.info("add_manufacture manufacture_id=%s name=%s", manufacture.manufacture_id, name)
        return manufacture

    def get_manufactures(self) -> List[Manufacture]:
        with self.database.connect() as conn:
            rows = conn.execute(
                sa.text("SELECT manufactureId, name FROM manufacture ORDER BY name")
            ).fetchall()
        return [Manufacture(r.manufactureId, r.name) for r in rows]
