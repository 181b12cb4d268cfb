"""Concurrency utilities for CSS Variables."""

import logging
from typing import Any, Dict, List
from threading import Lock, RLock

logger = logging.getLogger(__name__)

class ThreadSafeDict(dict):
    """Thread-safe dictionary implementation."""
    
    def __init__(self):
        """Initialize thread-safe dictionary."""
        super().__init__()
        self._lock = RLock()
        
    def __getitem__(self, key: str) -> Any:
        with self._lock:
            return super().__getitem__(key)
            
    def __setitem__(self, key: str, value: Any) -> None:
        with self._lock:
            super().__setitem__(key, value)
            
    def __delitem__(self, key: str) -> None:
        with self._lock:
            super().__delitem__(key)
            
    def __contains__(self, key: str) -> bool:
        with self._lock:
            return super().__contains__(key)
            
    def get(self, key: str, default: Any = None) -> Any:
        """Get item from dictionary with default.
        
        Args:
            key: Key to get
            default: Default value if key not found
            
        Returns:
            Value for key or default
        """
        with self._lock:
            return super().get(key, default)
            
    def items(self) -> List[tuple]:
        """Get a snapshot of all items."""
        with self._lock:
            return list(super().items())
            
    def keys(self) -> List[str]:
        """Get a snapshot of all keys."""
        with self._lock:
            return list(super().keys())
            
    def values(self) -> List[Any]:
        """Get a snapshot of all values."""
        with self._lock:
            return list(super().values())
            
    def clear(self) -> None:
        with self._lock:
            super().clear()
            
    def update(self, other: Dict[str, Any]) -> None:
        """Update dictionary with another dictionary.
        
        Args:
            other: Dictionary to update with
        """
        with self._lock:
            super().update(other)
            
    def __len__(self):
        with self._lock:
            return super().__len__()

class KeyedLock:
    """Hand out one re-entrant lock per key.

    Used to serialize a read-modify-write sequence on a single key while
    leaving other keys free.
    """

    def __init__(self):
        self._guard = Lock()
        self._locks: Dict[str, RLock] = {}

    def __call__(self, key: str) -> RLock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = RLock()
                logger.debug(f"Created lock for {key}")
            return lock

    def __len__(self):
        with self._guard:
            return len(self._locks)

# Exported classes
__all__ = ['ThreadSafeDict', 'KeyedLock']
