from .memory_client import MemoryFilesystemClient, MemoryStorage

__all__ = ["MemoryFilesystemClient", "MemoryStorage"]
