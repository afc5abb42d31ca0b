"""Builds the connection provider, registrar and mappers in one place.

Hosts (the Flask app, the CLI, tests) construct one ``InventoryStore`` and
pass it around; mappers receive their collaborators explicitly.
"""

from __future__ import annotations

import logging
import os
from typing import Union

from .accessories import AccessoryMapper
from .connection import DB_FILENAME, SQLiteDatabase
from .consoles import ConsoleMapper
from .games import GameMapper
from .items import ItemMapper
from .manufactures import ManufactureMapper
from .registry import TableRegistrar
from .users import UserMapper

logger = logging.getLogger(__name__)


class InventoryStore:
    def __init__(self, path: Union[str, os.PathLike] = DB_FILENAME):
        self.database = SQLiteDatabase(path)
        self.registrar = TableRegistrar(self.database)

        self.manufactures = ManufactureMapper(self.database)
        self.items = ItemMapper(self.database, self.manufactures)
        self.consoles = ConsoleMapper(self.database, self.items)
        self.games = GameMapper(self.database, self.items)
        self.accessories = AccessoryMapper(self.database, self.items)
        self.users = UserMapper(self.database)

        for mapper in (
            self.manufactures, self.items, self.consoles,
            self.games, self.accessories, self.users,
        ):
            self.registrar.register(mapper)
        logger.info("inventory store ready path=%s", self.database.path)

    @property
    def path(self):
        return self.database.path

    def subtype_mappers(self):
        return {
            "game": self.games,
            "accessory": self.accessories,
            "console": self.consoles,
        }

    def export_database(self):
        return self.registrar.export_database()

    def import_database(self, statements, overwrite: bool = False) -> int:
        return self.registrar.import_database(statements, overwrite=overwrite)


def open_store(path: Union[str, os.PathLike] = DB_FILENAME) -> InventoryStore:
    return InventoryStore(path)
