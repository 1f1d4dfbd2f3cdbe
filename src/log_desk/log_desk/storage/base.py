from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStorage(Protocol):
    """Durable string key-value capability used by the store and the guard.

    Implementations raise ``StorageError`` on any backend failure.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError
