"""Storage adapters - Implementations of the StoragePort.

Available implementations:
- JsonFileStorage: Local key-value store, one JSON file per key
- SqlAlchemyStorage: Database backend (SQLite by default)
- InMemoryStorage: Dict-backed storage for tests
"""

from .json_storage import JsonFileStorage
from .memory_storage import InMemoryStorage
from .sqlalchemy_storage import SqlAlchemyStorage

__all__ = ["JsonFileStorage", "SqlAlchemyStorage", "InMemoryStorage"]
