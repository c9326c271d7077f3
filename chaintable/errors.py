from typing import Any


class TableError(Exception):
    pass


class KeyNotFound(TableError, KeyError):
    """Raised when no entry in the key's bucket matches it."""

    def __init__(self, key: Any) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"key not found: {self.key!r}"


class DuplicateKey(TableError, KeyError):
    """Raised by HashTable.insert when the key is already stored."""

    def __init__(self, key: Any) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"key already present: {self.key!r}"
