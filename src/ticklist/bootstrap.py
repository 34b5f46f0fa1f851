# src/ticklist/bootstrap.py

"""
Composition root.

- loads settings once,
- configures logging (optional),
- builds the configured byte store,
- wires a loaded TaskListStore into AppState.
"""

from __future__ import annotations

import logging

from .config import STORAGE_BACKENDS, get_settings
from .core.ports import ByteStore
from .core.state import AppState
from .errors import PersistenceError
from .logging_setup import level_from_name, setup_logging
from .storage.file import FileByteStore
from .storage.memory import MemoryByteStore
from .storage.sqlite import SqliteByteStore
from .tasks.task_store import TaskListStore

logger = logging.getLogger(__name__)


def configure_logging(settings=None) -> None:
    """Set up console/file logging from settings (log_level, data_dir, log_to_file)."""
    if settings is None:
        settings = get_settings()

    setup_logging(
        log_dir=getattr(settings, "data_dir", ".local/ticklist"),
        console_level=level_from_name(getattr(settings, "log_level", "INFO")),
        log_to_file=bool(getattr(settings, "log_to_file", True)),
    )


def create_byte_store(settings) -> ByteStore:
    """
    Build the byte store named by settings.storage_backend.

    An unknown backend name falls back to sqlite. If the durable store cannot
    be opened, an in-memory store is used so the app still runs (without
    durability for this session).
    """
    backend = str(getattr(settings, "storage_backend", "sqlite")).lower()
    if backend not in STORAGE_BACKENDS:
        logger.warning("Unknown storage backend %r; using sqlite.", backend)
        backend = "sqlite"

    if backend == "memory":
        return MemoryByteStore()

    try:
        if backend == "file":
            return FileByteStore(settings.store_dir)
        return SqliteByteStore(settings.db_path)
    except PersistenceError:
        logger.exception("Cannot open %s byte store; falling back to memory (no durability).", backend)
        return MemoryByteStore()


def create_initial_state(*, settings=None, byte_store: ByteStore | None = None) -> AppState:
    """
    Create AppState with a loaded task store.

    Keeping settings and the byte store injectable makes the app easier to
    test and avoids hidden global config reads.
    """
    if settings is None:
        settings = get_settings()
    if byte_store is None:
        byte_store = create_byte_store(settings)

    task_store = TaskListStore(byte_store)
    loaded = task_store.load()
    logger.info(
        "%s ready: store=%s tasks=%d (%s)",
        getattr(settings, "app_name", "ticklist"),
        type(byte_store).__name__,
        len(task_store),
        loaded.status,
    )

    return AppState(settings=settings, byte_store=byte_store, task_store=task_store)
