"""Storage backend interface definitions.

Defines the StorageBackend abstract class used by the application to
persist and retrieve person records and configuration. Implementations
translate values to whatever format the backend uses.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Iterable

from .serializer import Serializer


class StorageBackend(ABC):
    """Abstract storage backend.

    Implementations must be thread-safe if used concurrently.
    """

    @abstractmethod
    def save(self, namespace: str, key: str, value: Any) -> None:
        """Save `value` under `namespace` and `key`.

        Implementations should create directories as needed and ensure
        atomic writes when possible.
        """

    @abstractmethod
    def load(self, namespace: str, key: str) -> Any:
        """Load and return object stored under `namespace`/`key`.

        Should raise `KeyError` if the key does not exist.
        """

    @abstractmethod
    def delete(self, namespace: str, key: str) -> None:
        """Delete the stored object. Raise `KeyError` if not found."""

    @abstractmethod
    def list_keys(self, namespace: str) -> Iterable[str]:
        """Return an iterable of keys stored in `namespace`."""

    @abstractmethod
    def exists(self, namespace: str, key: str) -> bool:
        """Return True if `key` exists under `namespace`."""

    def configure(self, **options) -> None:
        """Apply backend specific options. The default accepts and ignores them."""
        return None


class SerializerBackend(StorageBackend):
    """Wrap a raw backend so values are serialized to bytes on the way in.

    The wrapped backend only ever sees the serializer's output; callers
    work with plain Python values.
    """

    def __init__(self, backend: StorageBackend, serializer: Serializer) -> None:
        self.backend = backend
        self.serializer = serializer

    def save(self, namespace: str, key: str, value: Any) -> None:
        self.backend.save(namespace, key, self.serializer.dump(value))

    def load(self, namespace: str, key: str) -> Any:
        raw = self.backend.load(namespace, key)
        if isinstance(raw, str):
            raw = raw.encode("utf-8")
        return self.serializer.load(raw)

    def delete(self, namespace: str, key: str) -> None:
        self.backend.delete(namespace, key)

    def list_keys(self, namespace: str) -> Iterable[str]:
        return self.backend.list_keys(namespace)

    def exists(self, namespace: str, key: str) -> bool:
        return self.backend.exists(namespace, key)

    def configure(self, **options) -> None:
        self.backend.configure(**options)
