from .item import Item, PackageDimension
from .game import Game
from .accessory import Accessory
from .console import Console
from .user import User
from .manufacture import Manufacture

# Item kinds as they appear in the inventory table
ITEM_KINDS = {
    "game": Game,
    "accessory": Accessory,
    "console": Console,
}

__all__ = [
    "Item", "PackageDimension",
    "Game", "Accessory", "Console",
    "User", "Manufacture",
    "ITEM_KINDS",
]
