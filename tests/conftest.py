import pytest

from client import MemoryFilesystemClient, MemoryStorage


@pytest.fixture
def storage():
    """A fresh, isolated in-memory store for each test."""
    return MemoryStorage()


@pytest.fixture
def memory_client(storage):
    """Simulated client with no connect delay, not yet connected."""
    return MemoryFilesystemClient(storage=storage, connect_delay=0)


@pytest.fixture
def fs_root(tmp_path):
    """Scratch directory for dispatcher calls against the real filesystem."""
    return tmp_path
