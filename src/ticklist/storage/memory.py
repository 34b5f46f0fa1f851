# src/ticklist/storage/memory.py

from __future__ import annotations

from ..errors import PersistenceError


class MemoryByteStore:
    """
    Dict-backed byte store. Nothing survives the process.

    `fail_reads` / `fail_writes` simulate an unavailable backend; a failed
    write leaves the previous value in place, like the durable stores.
    """

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self._data: dict[str, bytes] = dict(initial or {})
        self.fail_reads = False
        self.fail_writes = False
        self.writes = 0

    def read(self, key: str) -> bytes | None:
        if self.fail_reads:
            raise PersistenceError(f"read failed for key {key!r} (store unavailable)")
        return self._data.get(key)

    def write(self, key: str, data: bytes) -> None:
        if self.fail_writes:
            raise PersistenceError(f"write failed for key {key!r} (store unavailable)")
        self._data[key] = bytes(data)
        self.writes += 1

    def keys(self) -> list[str]:
        return list(self._data)
