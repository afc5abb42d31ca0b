from .connection import SQLiteDatabase, DB_FILENAME
from .registry import TableRegistrar
from .mapper import EntityMapper
from .manufactures import ManufactureMapper
from .items import ItemMapper
from .games import GameMapper
from .accessories import AccessoryMapper
from .consoles import ConsoleMapper
from .users import UserMapper, DEFAULT_ADMIN
from .store import InventoryStore, open_store
from .errors import (
    InventoryError,
    StorageError,
    DomainRuleError,
    InvalidUserAttributeError,
    LastAdministratorError,
    ItemReferenceError,
    UserReferenceError,
    InvalidFilterError,
)

__all__ = [
    "SQLiteDatabase", "DB_FILENAME", "TableRegistrar", "EntityMapper",
    "ManufactureMapper", "ItemMapper", "GameMapper", "AccessoryMapper",
    "ConsoleMapper", "UserMapper", "DEFAULT_ADMIN",
    "InventoryStore", "open_store",
    "InventoryError", "StorageError", "DomainRuleError",
    "InvalidUserAttributeError", "LastAdministratorError",
    "ItemReferenceError", "UserReferenceError", "InvalidFilterError",
]
