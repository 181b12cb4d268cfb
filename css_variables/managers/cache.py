"""Cache management for CSS Variables."""

from threading import RLock
from typing import Dict, Any, Optional

from .base import BaseManager
from ..core.models import CacheEntry, SourceDescriptor, SourceKind
from ..utils.concurrency import ThreadSafeDict, KeyedLock
from ..utils.error import CacheError

def is_entry_valid(entry: Optional[CacheEntry], source: SourceDescriptor,
                   modified: Optional[float]) -> bool:
    """Decide whether a cached entry can stand in for a fresh load.

    Local entries are valid only while the file's modification time is the
    one stored with the entry. Remote entries never go stale on their own;
    they are replaced by an explicit refresh.

    Args:
        entry: Cached entry or None
        source: Source being loaded
        modified: Current modification time for local sources

    Returns:
        True if the entry can be used
    """
    if entry is None or entry.source_kind is not source.kind:
        return False
    if source.kind is SourceKind.REMOTE:
        return True
    return entry.last_modified == modified

class CacheManager(BaseManager):
    """In-memory store of extracted variables keyed by source.

    Entries live for the lifetime of the manager. There is no eviction;
    an entry is only ever replaced by a newer load of the same source.
    """
    
    def __init__(self):
        """Initialize cache manager."""
        super().__init__()
        self._entries = ThreadSafeDict()
        self._locks = KeyedLock()
        
    def get(self, key: str) -> Optional[CacheEntry]:
        """Get cached entry.
        
        Args:
            key: Source key (path or URL)
            
        Returns:
            Cached entry if present
        """
        entry = self._entries.get(key)
        if entry is None:
            self.count('misses')
            self.log_debug(f"Cache miss for {key}")
        else:
            self.count('hits')
            self.log_debug(f"Cache hit for {key}")
        return entry
        
    def put(self, key: str, entry: CacheEntry) -> None:
        """Store an entry, replacing any previous one for the key.
        
        Args:
            key: Source key (path or URL)
            entry: Entry to store

        Raises:
            CacheError: If the entry belongs to another source
        """
        if entry.source_key != key:
            raise CacheError(f"Entry for {entry.source_key} cannot be stored under {key}")
        self._entries[key] = entry
        self.count('puts')
        self.log_debug(f"Cached {len(entry.variables)} variables for {key}")
        
    def lock_for(self, key: str) -> RLock:
        """Lock serializing get/put pairs for one key."""
        return self._locks(key)
        
    def __contains__(self, key: str) -> bool:
        return key in self._entries
        
    def __len__(self) -> int:
        return len(self._entries)
        
    def clear(self) -> None:
        """Drop every cached entry."""
        self._entries.clear()
        self.log_info("Cache cleared")
        
    def _initial_stats(self) -> Dict[str, Any]:
        return {'hits': 0, 'misses': 0, 'puts': 0}
        
    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.
        
        Returns:
            Dictionary with cache statistics
        """
        stats = super().get_stats()
        total_requests = stats['hits'] + stats['misses']
        stats['hit_rate'] = stats['hits'] / total_requests if total_requests > 0 else 0
        stats['total_entries'] = len(self._entries)
        return stats

# Exported names
__all__ = ['CacheManager', 'is_entry_valid']
