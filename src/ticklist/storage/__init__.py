"""Byte store backends implementing core.ports.ByteStore."""

from .file import FileByteStore
from .memory import MemoryByteStore
from .sqlite import SqliteByteStore

__all__ = ["FileByteStore", "MemoryByteStore", "SqliteByteStore"]
