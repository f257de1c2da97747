"""Database layer for carve-log."""

from .engine import get_data_dir, get_db_path, init_db
from .persistence import CollectionSlot
from .repositories import KeyValueRepository

__all__ = [
    "CollectionSlot",
    "get_data_dir",
    "get_db_path",
    "init_db",
    "KeyValueRepository",
]
