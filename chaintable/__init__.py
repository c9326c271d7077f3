from .errors import DuplicateKey, KeyNotFound, TableError
from .hashing import HashedKey, HashFn, builtin_hash, fnv1a_32, signed_32
from .table import INITIAL_BUCKETS, SHRINK_MIN_COUNT, Entry, HashTable

__all__ = [
    "DuplicateKey",
    "Entry",
    "HashFn",
    "HashTable",
    "HashedKey",
    "INITIAL_BUCKETS",
    "KeyNotFound",
    "SHRINK_MIN_COUNT",
    "TableError",
    "builtin_hash",
    "fnv1a_32",
    "signed_32",
]
