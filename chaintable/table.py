from dataclasses import dataclass
import logging
from typing import Generic, Hashable, Iterator, TypeVar

from .errors import DuplicateKey, KeyNotFound
from .hashing import HashFn, builtin_hash


logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


INITIAL_BUCKETS = 7
SHRINK_MIN_COUNT = 3


@dataclass
class Entry(Generic[K, V]):
    key: K
    value: V
    next: "Entry[K, V] | None"


class HashTable(Generic[K, V]):
    """Separate chaining hash table.

    Grows to `2n + 1` buckets once the load factor passes 1 and halves
    once it falls to 0.25, as long as at least three pairs remain.
    """

    def __init__(self, hash_fn: HashFn = builtin_hash) -> None:
        self._hash_fn = hash_fn
        self._buckets: list[Entry[K, V] | None] = [None] * INITIAL_BUCKETS
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    @property
    def load_factor(self) -> float:
        return self._count / len(self._buckets)

    def get(self, key: K) -> V:
        entry = self.find_entry(key)
        if entry is None:
            raise KeyNotFound(key)
        return entry.value

    def set(self, key: K, value: V):
        entry = self.find_entry(key)
        if entry is None:
            self.insert(key, value)
        else:
            entry.value = value

    def insert(self, key: K, value: V):
        if self.find_entry(key) is not None:
            raise DuplicateKey(key)

        index = self.key_to_index(key)
        self._buckets[index] = Entry(key, value, self._buckets[index])
        self._count += 1
        self._check_for_expand()

    def delete(self, key: K):
        index = self.key_to_index(key)
        prev: Entry[K, V] | None = None
        entry = self._buckets[index]

        while entry is not None:
            if entry.key == key:
                if prev is None:
                    self._buckets[index] = entry.next
                else:
                    prev.next = entry.next

                self._count -= 1
                self._check_for_shrink()
                return

            prev = entry
            entry = entry.next

        raise KeyNotFound(key)

    def find_entry(self, key: K) -> Entry[K, V] | None:
        entry = self._buckets[self.key_to_index(key)]
        while entry is not None:
            if entry.key == key:
                return entry
            entry = entry.next
        return None

    def key_to_index(self, key: K) -> int:
        code = self._hash_fn(key)
        # hash codes may be negative
        if code < 0:
            code = -code
        return code % len(self._buckets)

    def items(self) -> Iterator[tuple[K, V]]:
        """Yield every stored pair. No order is guaranteed."""
        for head in self._buckets:
            entry = head
            while entry is not None:
                yield entry.key, entry.value
                entry = entry.next

    def add_all(self, from_t: "HashTable[K, V]"):
        for key, value in from_t.items():
            self.set(key, value)

    def _check_for_expand(self):
        if self._count > len(self._buckets):
            self._resize(len(self._buckets) * 2 + 1)

    def _check_for_shrink(self):
        if self._count >= SHRINK_MIN_COUNT and self._count <= len(self._buckets) // 4:
            self._resize(len(self._buckets) // 2)

    def _resize(self, length: int):
        logger.debug("resizing table from %d to %d buckets", len(self._buckets), length)
        old = self._buckets

        self._buckets = [None] * length
        self._count = 0
        for head in old:
            entry = head
            while entry is not None:
                self.insert(entry.key, entry.value)
                entry = entry.next

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: K) -> bool:
        return self.find_entry(key) is not None

    def __getitem__(self, key: K) -> V:
        return self.get(key)

    def __setitem__(self, key: K, value: V):
        self.set(key, value)

    def __delitem__(self, key: K):
        self.delete(key)

    def __repr__(self) -> str:
        return f"HashTable(count={self._count}, bucket_count={len(self._buckets)})"
