"""Storage abstraction package for Roster."""
from __future__ import annotations
from pathlib import Path

from .base import StorageBackend, SerializerBackend
from .file_backend import FileStorageBackend
from .memory_backend import MemoryStorage
from .serializer import get_serializer


def create_storage(
    backend: str = "memory",
    serializer: str = "yaml",
    data_dir: str | Path = "data",
) -> StorageBackend:
    """Compose a raw backend and a serializer into a ready-to-use storage.

    `backend` is one of 'memory' or 'file'; `serializer` one of 'yaml',
    'json' or 'pickle'. Unknown names raise ValueError.
    """
    ser = get_serializer(serializer)
    if backend == "memory":
        raw: StorageBackend = MemoryStorage()
    elif backend == "file":
        raw = FileStorageBackend(data_dir=data_dir)
        raw.configure(suffix=serializer)
    else:
        raise ValueError(f"Unknown storage backend '{backend}'")
    return SerializerBackend(raw, ser)


__all__ = [
    "StorageBackend",
    "SerializerBackend",
    "FileStorageBackend",
    "MemoryStorage",
    "create_storage",
]
