from dataclasses import dataclass, field
from typing import Any, Callable


HashFn = Callable[[Any], int]

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619


def builtin_hash(key: Any) -> int:
    return hash(key)


def fnv1a_32(text: str) -> int:
    code = FNV_OFFSET_BASIS
    for b in text.encode("utf-8"):
        code ^= b
        code = (code * FNV_PRIME) & 0xFFFFFFFF
    return code


def signed_32(code: int) -> int:
    """Reinterpret the low 32 bits of `code` as a two's complement int."""
    code &= 0xFFFFFFFF
    if code >= 0x80000000:
        code -= 1 << 32
    return code


@dataclass(frozen=True)
class HashedKey:
    """A string key that carries its FNV-1a hash, computed once."""

    value: str
    code: int = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "code", fnv1a_32(self.value))

    def __hash__(self) -> int:
        return self.code
