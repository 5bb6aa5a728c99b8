"""Hash codes and a unique index built on them."""

from __future__ import annotations

from typing import Protocol

_FNV64_OFFSET = 0xCBF29CE484222325
_FNV64_PRIME = 0x100000001B3
_MASK64 = 0xFFFFFFFFFFFFFFFF


class Code(int):
    """A 64-bit hash code."""

    def __str__(self) -> str:
        return "0x" + format(int(self), "x")


class Indexer(Protocol):
    """Anything that can produce a hash code for an index."""

    def hash(self) -> Code:
        """Return the hash code of the object."""
        ...


def hash_string(key: str) -> Code:
    """Return the 64-bit FNV-1a hash of a string."""
    value = _FNV64_OFFSET
    for byte in key.encode("utf-8"):
        value ^= byte
        value = (value * _FNV64_PRIME) & _MASK64
    return Code(value)


class DuplicateHashError(ValueError):
    """Raised when an object with the same hash is already indexed."""


class Index:
    """Maps hash codes of objects to positions."""

    def __init__(self) -> None:
        self._positions: dict[Code, int] = {}

    def add(self, obj: Indexer, idx: int) -> None:
        """Index the object at position idx; the hash must not be present yet."""
        code = obj.hash()
        if code in self._positions:
            raise DuplicateHashError(
                f"there is already object with same hash and index={idx}"
            )
        self._positions[code] = idx

    def remove(self, obj: Indexer) -> None:
        """Drop the object's hash from the index, if present."""
        self._positions.pop(obj.hash(), None)

    def get(self, obj: Indexer) -> int | None:
        """Return the position of the object, or None if it is not indexed."""
        return self._positions.get(obj.hash())

    def has(self, obj: Indexer) -> bool:
        """Return True if the object's hash is indexed."""
        return obj.hash() in self._positions

    def __len__(self) -> int:
        return len(self._positions)