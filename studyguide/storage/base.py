"""Key-value store interface used to persist viewer state between sessions."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from studyguide.errors import StorageError

__all__ = ["KeyValueStore", "StorageError"]


@runtime_checkable
class KeyValueStore(Protocol):
    """
    String-keyed store of string values.

    Implementations raise StorageError when the backing medium fails;
    a missing key is not a failure and reads as None.
    """

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...
