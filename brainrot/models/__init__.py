from .base import db, Model, metadata

# Import model modules so tables register with metadata
from .users import User, utcnow               # noqa: F401
from .catalog import Brainrot                 # noqa: F401
from .inventory import InventorySlot          # noqa: F401

__all__ = [
    "db", "Model", "metadata",
    "User", "Brainrot", "InventorySlot",
    "utcnow",
]
