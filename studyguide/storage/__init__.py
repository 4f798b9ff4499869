from studyguide.storage.base import KeyValueStore, StorageError
from studyguide.storage.json_file import JsonFileStore
from studyguide.storage.memory import InMemoryStore

__all__ = [
    "InMemoryStore",
    "JsonFileStore",
    "KeyValueStore",
    "StorageError",
]
