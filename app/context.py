"""Access to the per-app inventory store from request handlers."""

from flask import current_app

from database import InventoryStore
from services.inventory import InventoryTable
from services.users import UserManager


def get_store() -> InventoryStore:
    return current_app.extensions["inventory_store"]


def get_inventory() -> InventoryTable:
    return InventoryTable(get_store())


def get_user_manager() -> UserManager:
    return UserManager(get_store())
