from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path
from typing import Optional

from ..core.exceptions import StorageError
from .base import KeyValueStorage

_SAFE_KEY = re.compile(r"[A-Za-z0-9_.-]+")


class FileStorage(KeyValueStorage):
    """One UTF-8 file per key under `data_dir`.

    Writes go to a temp file in the same directory and are renamed over the
    target, so a failed write leaves the previous content untouched.
    """

    def __init__(self, data_dir: str | Path):
        self._dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        if not _SAFE_KEY.fullmatch(key):
            raise StorageError(f"Unsupported storage key: {key!r}")
        return self._dir / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Cannot read {path}: {e}") from e

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._dir, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            raise StorageError(f"Cannot write {path}: {e}") from e

    def remove(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            raise StorageError(f"Cannot remove {path}: {e}") from e
