"""Shared plumbing for the per-kind mappers (game, accessory, console).

A kind's table reuses the ``item`` identity as its own primary key. Writes go
to the base table first so the kind row has a key to use; deletes go the other
way round because the kind row's key references ``item`` with RESTRICT.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import sqlalchemy as sa

from models import Item
from .errors import ItemReferenceError, StorageError
from .items import ItemMapper
from .mapper import EntityMapper

logger = logging.getLogger(__name__)


class SubtypeMapper(EntityMapper):
    model: Any = None
    key_column = ""
    insert_sql = ""
    update_sql = ""

    def __init__(self, database, items: ItemMapper):
        super().__init__(database)
        self.items = items

    # -- per kind ---------------------------------------------------------
    def to_params(self, obj) -> Dict[str, Any]:
        raise NotImplementedError

    def from_row(self, row, item: Item):
        raise NotImplementedError

    # -- helpers ----------------------------------------------------------
    def _check(self, obj, saved: bool = False):
        if obj is None:
            raise ItemReferenceError(f"{self.model.__name__} cannot be None")
        if not isinstance(obj, self.model):
            raise ItemReferenceError(
                f"Unable to use {type(obj).__name__} as {self.model.__name__}"
            )
        if saved and not obj.item.is_saved:
            raise ItemReferenceError(f"{self.model.__name__} has not been saved yet")
        return obj

    def _check_platform(self, obj) -> None:
        platform_id = getattr(obj, "platform_id", None)
        if platform_id is None:
            return
        with self.database.connect() as conn:
            row = conn.execute(
                sa.text("SELECT consoleId FROM console WHERE consoleId = :key"),
                {"key": platform_id},
            ).first()
        if row is None:
            raise ItemReferenceError(f"Platform {platform_id} is not a console")

    def _build(self, row):
        item = Item(item_number=row._mapping[self.key_column])
        if not self.items.load_item(item):
            logger.warning(
                "orphan %s row item_number=%s has no item row; skipped", self.table, item.item_number
            )
            return None
        return self.from_row(row, item)

    # -- operations -------------------------------------------------------
    def get_all(self) -> List[Any]:
        with self.database.connect() as conn:
            rows = conn.execute(
                sa.text(f"SELECT * FROM {self.table} ORDER BY {self.key_column}")
            ).fetchall()
        found = (self._build(row) for row in rows)
        return [obj for obj in found if obj is not None]

    def find(self, item_number: int) -> Optional[Any]:
        with self.database.connect() as conn:
            row = conn.execute(
                sa.text(f"SELECT * FROM {self.table} WHERE {self.key_column} = :key"),
                {"key": item_number},
            ).first()
        return self._build(row) if row is not None else None

    def add(self, obj) -> int:
        self._check(obj)
        self._check_platform(obj)
        # base row first: it hands out the identity this row is keyed by
        self.items.add_item(obj.item)
        params = self.to_params(obj)
        params["key"] = obj.item_number
        try:
            with self.database.connect() as conn:
                conn.execute(sa.text(self.insert_sql), params)
        except StorageError:
            # the base row must not outlive a rejected kind row
            self.items.delete_item(obj.item)
            obj.item.item_number = 0
            raise
        logger.info("add_%s item_number=%s", self.table, obj.item_number)
        return obj.item_number

    def update(self, obj) -> None:
        self._check(obj, saved=True)
        self._check_platform(obj)
        self.items.update_item(obj.item)
        params = self.to_params(obj)
        params["key"] = obj.item_number
        with self.database.connect() as conn:
            result = conn.execute(sa.text(self.update_sql), params)
            if result.rowcount != 1:
                raise ItemReferenceError(
                    f"Item {obj.item_number} is not a {self.model.__name__.lower()}"
                )
        logger.info("update_%s item_number=%s", self.table, obj.item_number)

    def delete(self, obj) -> None:
        self._check(obj, saved=True)
        with self.database.connect() as conn:
            conn.execute(
                sa.text(f"DELETE FROM {self.table} WHERE {self.key_column} = :key"),
                {"key": obj.item_number},
            )
        # only now is the item row free of references
        self.items.delete_item(obj.item)
        logger.info("delete_%s item_number=%s", self.table, obj.item_number)
