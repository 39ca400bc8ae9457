from .config import (
    ServerConfig,
    YamlConfigStore,
    load_server_config,
    open_config_store,
    server_config_path,
)

__all__ = [
    "ServerConfig",
    "YamlConfigStore",
    "load_server_config",
    "open_config_store",
    "server_config_path",
]
