# base_db.py
# Description: Path resolution and error types shared by the picker's SQLite stores
#
# Imports
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Tuple, Union
#
# 3rd-party Libraries
from loguru import logger
#
#######################################################################################################################
#
# Exceptions:

class DatabaseError(Exception):
    """Base exception for picker database errors."""
    pass


class SchemaError(DatabaseError):
    """Raised when the on-disk schema cannot be used by this version."""
    pass

#
# Classes:

class BaseDB(ABC):
    """
    Resolves where a store lives and prepares it before the schema is built.

    `db_path` is either ':memory:' or a file path (`~` is expanded). The
    parent directory of a file database is created if missing.
    """

    MEMORY_PATH = ":memory:"

    def __init__(self, db_path: Union[str, Path]):
        self.is_memory_db, self.db_path = self._resolve_path(db_path)
        self.db_path_str = self.MEMORY_PATH if self.is_memory_db else str(self.db_path)
        if not self.is_memory_db:
            self._ensure_parent_dir()
        self._initialize_schema()
        logger.info(f"{self.__class__.__name__} ready at {self.db_path_str}")

    @classmethod
    def _resolve_path(cls, db_path: Union[str, Path]) -> Tuple[bool, Path]:
        if not isinstance(db_path, Path) and db_path == cls.MEMORY_PATH:
            return True, Path(cls.MEMORY_PATH)
        return False, Path(db_path).expanduser().resolve()

    def _ensure_parent_dir(self):
        parent = self.db_path.parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Failed to create database directory {parent}: {e}")
            raise DatabaseError(f"Cannot create database directory {parent}: {e}") from e

    @abstractmethod
    def _initialize_schema(self):
        """Create or validate the schema; called once the path is ready."""

    @abstractmethod
    def close(self):
        """Release every connection held by this handle."""

#
# End of base_db.py
#######################################################################################################################
