"""Server configuration stored as human-editable YAML.

The file lives at `<data_dir>/config/server_config.yml` and is read once at
startup. A missing file means defaults.
"""
from __future__ import annotations
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any
import logging

import yaml

from roster_lib.storage.base import StorageBackend
from roster_lib.storage.file_backend import FileStorageBackend

logger = logging.getLogger(__name__)

SERVER_CONFIG_NS = "config"
SERVER_CONFIG_KEY = "server_config"
SERVER_CONFIG_SUFFIX = ".yml"


@dataclass
class ServerConfig:
    server_name: str = "Roster"
    log_level: str = "WARNING"
    # YAML people database used to seed the store, relative to data_dir
    database_file: str = ""


class YamlConfigStore:
    """Serialize/deserialize ServerConfig to YAML using a StorageBackend.

    The store writes YAML text to the backend using the provided
    namespace/key. The backend is expected to accept a string (or bytes)
    on `save` and return the same on `load`.
    """

    def __init__(self, backend: StorageBackend, namespace: str = SERVER_CONFIG_NS):
        self.backend = backend
        self.namespace = namespace

    def save(self, key: str, cfg: ServerConfig) -> None:
        payload = yaml.safe_dump(asdict(cfg), sort_keys=False)
        self.backend.save(self.namespace, key, payload)

    def load(self, key: str) -> ServerConfig:
        raw = self.backend.load(self.namespace, key)
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        try:
            data: Any = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ValueError("invalid config format: parse error") from e
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("invalid config format: expected mapping")

        known = {f.name for f in fields(ServerConfig)}
        unknown = set(data) - known
        if unknown:
            logger.warning("Ignoring unknown server config keys: %s", ", ".join(sorted(unknown)))
        return ServerConfig(**{k: str(v) for k, v in data.items() if k in known and v is not None})


def server_config_path(data_dir: str | Path) -> Path:
    return Path(data_dir) / SERVER_CONFIG_NS / f"{SERVER_CONFIG_KEY}{SERVER_CONFIG_SUFFIX}"


def open_config_store(data_dir: str | Path) -> YamlConfigStore:
    backend = FileStorageBackend(data_dir=data_dir, suffix=SERVER_CONFIG_SUFFIX)
    return YamlConfigStore(backend)


def load_server_config(data_dir: str | Path) -> ServerConfig:
    """Load the server config from `data_dir`, falling back to defaults."""
    if not server_config_path(data_dir).exists():
        return ServerConfig()
    return open_config_store(data_dir).load(SERVER_CONFIG_KEY)
