"""Server setup helper for Roster.

Provides CLI parsing for the server entrypoint and helpers to create a
server configuration template. The module only contains CLI and I/O logic;
storage interaction is delegated to the config store.
"""
from __future__ import annotations
import argparse
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Iterable, Optional

import yaml

from roster_lib.config.config import (
    SERVER_CONFIG_KEY,
    ServerConfig,
    YamlConfigStore,
    open_config_store,
    server_config_path,
)

DEFAULT_DATA_DIR = "data"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000


def get_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(add_help=False)
    p.add_argument("--setup", action="store_true", help="Write a server config template into the data directory")
    p.add_argument("--print-template", action="store_true", help="Print the default YAML template to stdout and exit")
    p.add_argument("--memory", action="store_true", help="Keep people in memory instead of the data directory")
    p.add_argument("--data-dir", default=DEFAULT_DATA_DIR, help="Directory holding config and people data")
    p.add_argument("--host", default=DEFAULT_HOST, help="Address to bind")
    p.add_argument("--port", type=int, default=DEFAULT_PORT, help="Port to bind")
    p.add_argument("--help", action="store_true", help="Show setup help")
    return p


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    """Parse server args from argv, ignoring anything unknown (e.g. uvicorn's)."""
    parser = get_parser()
    if argv is not None:
        argv = list(argv)
    args, _ = parser.parse_known_args(argv)
    return args


def template_text() -> str:
    return yaml.safe_dump(asdict(ServerConfig(database_file="config/people.yml")), sort_keys=False)


def create_template(store: YamlConfigStore, data_dir: str | Path) -> tuple[bool, str]:
    """Write the default config unless one already exists."""
    path = server_config_path(data_dir)
    if path.exists():
        return False, f"Server config already exists at {path}"
    store.save(SERVER_CONFIG_KEY, ServerConfig(database_file="config/people.yml"))
    return True, f"Wrote template server config to {path}"


def setup(argv: Optional[Iterable[str]]) -> Optional[int]:
    """Handle the setup-only flags.

    Returns an exit code when a setup action ran and the caller should stop,
    or None when the server should start.
    """
    args = parse_args(argv)

    if args.help:
        get_parser().print_help()
        return 0

    if args.print_template:
        sys.stdout.write(template_text())
        return 0

    if args.setup:
        created, message = create_template(open_config_store(args.data_dir), args.data_dir)
        print(message)
        return 0 if created else 1

    return None
