"""
Unique identifier allocation.

Identifiers are `0x` + sha256(namespace || counter). They are deterministic for
a given allocator, and no allocator hands out the same id twice.
"""

from __future__ import annotations

import hashlib


class IdAllocator:
    def __init__(self, namespace: str = "PairPool", start: int = 0) -> None:
        if not isinstance(namespace, str) or not namespace:
            raise ValueError("namespace must be a non-empty string")
        if not isinstance(start, int) or isinstance(start, bool) or start < 0:
            raise ValueError(f"start must be a non-negative int: {start}")
        self._namespace = namespace
        self._next = start

    @property
    def allocated(self) -> int:
        return self._next

    def fresh(self) -> str:
        data = self._namespace.encode("utf-8") + b":" + str(self._next).encode("utf-8")
        self._next += 1
        return "0x" + hashlib.sha256(data).hexdigest()

    def __repr__(self) -> str:
        return f"IdAllocator(namespace={self._namespace!r}, next={self._next})"
