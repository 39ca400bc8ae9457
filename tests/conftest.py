"""Pytest configuration helpers for test collection.

Ensure the project root is on sys.path so tests can import the package
without requiring PYTHONPATH to be set externally, and provide app
fixtures backed by in-memory storage.
"""
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient


def pytest_configure(config):
    # Insert repo root (one level up from tests/) to sys.path
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def client(tmp_path):
    """App with an empty in-memory person store."""
    from roster_lib.main import create_app, Config
    app = create_app(Config(data_dir=str(tmp_path), storage_backend='memory'))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def seeded_client(tmp_path):
    """App whose in-memory store is seeded with three people."""
    from tests.helpers import write_seed_config
    from roster_lib.main import create_app, Config
    write_seed_config(tmp_path)
    app = create_app(Config(data_dir=str(tmp_path), storage_backend='memory'))
    with TestClient(app) as c:
        yield c
