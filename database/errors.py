"""Error kinds raised by the persistence layer.

Storage failures, broken domain rules and bad references are kept apart so
callers can decide how to report each one. Every error carries a short
``code`` next to its message, the same way the HTTP layer reports them.
"""


class InventoryError(Exception):
    code = "E_INVENTORY"

    def __init__(self, message: str, code: str = None):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code


class StorageError(InventoryError):
    """File, connection or SQL failure."""
    code = "E_STORAGE"


class DomainRuleError(InventoryError):
    code = "E_RULE"


class InvalidUserAttributeError(DomainRuleError):
    code = "E_USER_ATTR"


class LastAdministratorError(DomainRuleError):
    code = "E_LAST_ADMIN"

    def __init__(self, message: str = "At least one administrator must exist in the system."):
        super().__init__(message)


class ItemReferenceError(InventoryError, ValueError):
    """Null, unsaved, mistyped or missing item."""
    code = "E_ITEM_REF"


class UserReferenceError(InventoryError, ValueError):
    code = "E_USER_REF"


class InvalidFilterError(InventoryError, ValueError):
    code = "E_FILTER"


__all__ = [
    "InventoryError",
    "StorageError",
    "DomainRuleError",
    "InvalidUserAttributeError",
    "LastAdministratorError",
    "ItemReferenceError",
    "UserReferenceError",
    "InvalidFilterError",
]
