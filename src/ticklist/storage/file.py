# src/ticklist/storage/file.py

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path
from urllib.parse import quote

from ..errors import PersistenceError

logger = logging.getLogger(__name__)


class FileByteStore:
    """
    Byte store with one file per key under a directory.

    Writes go to a temp file that is then renamed over the target, so
    readers see either the old or the new value, never a partial one.
    """

    def __init__(self, directory: str | Path) -> None:
        self._dir = Path(directory)
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PersistenceError(f"cannot create byte store dir {self._dir}: {e}") from e

    def path_for(self, key: str) -> Path:
        # percent-encoding keeps distinct keys on distinct, filesystem-safe names
        return self._dir / f"{quote(key, safe='')}.json"

    def read(self, key: str) -> bytes | None:
        path = self.path_for(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise PersistenceError(f"read failed for {path}: {e}") from e

    def write(self, key: str, data: bytes) -> None:
        path = self.path_for(key)
        tmp = path.with_suffix(".tmp")
        try:
            with open(tmp, "wb") as fh:
                fh.write(data)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp, path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise PersistenceError(f"write failed for {path}: {e}") from e

        with contextlib.suppress(OSError):
            # task titles are user content; keep the file private on disk
            os.chmod(path, 0o600)
        logger.debug("file write key=%s path=%s bytes=%d", key, path, len(data))
