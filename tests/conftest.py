"""
Pytest configuration and shared fixtures
"""
import sys
from pathlib import Path

import pytest

# Allow running the tests from a checkout without installing the package
src_path = Path(__file__).parent.parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from redisdocs.config import Config
from redisdocs.store.factory import StoreFactory
from redisdocs.store.memory import MemoryStore


@pytest.fixture
def store():
    """Connected in-memory store"""
    store = MemoryStore()
    store._connected = True
    return store


@pytest.fixture(autouse=True)
def reset_globals():
    """Keep class-level state from leaking between tests"""
    yield
    StoreFactory._instance = None
    StoreFactory._store_type = None
    Config.reset()


@pytest.fixture
def people():
    return [
        {"name": "Alice", "age": 25},
        {"name": "Bob", "age": 30},
        {"name": "Charlie", "age": 40},
    ]
