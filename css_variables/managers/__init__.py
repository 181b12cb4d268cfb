"""Resource managers for CSS Variables."""

from .base import BaseManager
from .cache import CacheManager, is_entry_valid
from .filesystem import FileSystemManager
from .network import NetworkManager
from .loader import SourceLoader
from .factory import ManagerFactory

# Exported classes
__all__ = [
    'BaseManager',
    'CacheManager',
    'is_entry_valid',
    'FileSystemManager',
    'NetworkManager',
    'SourceLoader',
    'ManagerFactory'
]
