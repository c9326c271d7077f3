from typing import Any

from .table import Entry, HashTable


def chain_lengths(table: HashTable[Any, Any]) -> list[int]:
    return [_chain_length(head) for head in table._buckets]


def dump_table(table: HashTable[Any, Any], name: str):
    print(f"== {name} ==")
    for index, head in enumerate(table._buckets):
        if head is None:
            continue
        print(f"[{index:04d}] {_format_chain(head)}")


def _chain_length(entry: Entry[Any, Any] | None) -> int:
    length = 0
    while entry is not None:
        length += 1
        entry = entry.next
    return length


def _format_chain(entry: Entry[Any, Any] | None) -> str:
    keys = []
    while entry is not None:
        keys.append(repr(entry.key))
        entry = entry.next
    return " -> ".join(keys)
