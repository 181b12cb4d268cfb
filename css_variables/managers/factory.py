"""Manager factory for CSS Variables."""

import logging
from typing import Dict, Any, Optional
from .base import BaseManager
from .cache import CacheManager
from .filesystem import FileSystemManager
from .loader import SourceLoader
from .network import NetworkManager

class ManagerFactory:
    """Factory for creating and sharing resource managers.

    Each manager is created once per factory, so one factory gives one
    process-lifetime cache.
    """
    
    def __init__(self):
        """Initialize manager factory."""
        self.logger = logging.getLogger(self.__class__.__name__)
        self._managers: Dict[str, BaseManager] = {}
        
    def create_cache_manager(self) -> CacheManager:
        if 'cache' not in self._managers:
            self._managers['cache'] = CacheManager()
        return self._managers['cache']
            
    def create_file_system_manager(self) -> FileSystemManager:
        if 'file_system' not in self._managers:
            self._managers['file_system'] = FileSystemManager()
        return self._managers['file_system']
            
    def create_network_manager(self, **kwargs: Any) -> NetworkManager:
        """Create network manager.
        
        Args:
            **kwargs: NetworkManager options, used on first creation only
            
        Returns:
            NetworkManager: Network manager instance
        """
        if 'network' not in self._managers:
            self._managers['network'] = NetworkManager(**kwargs)
        return self._managers['network']
        
    def create_source_loader(self) -> SourceLoader:
        if 'loader' not in self._managers:
            self._managers['loader'] = SourceLoader(
                file_system=self.create_file_system_manager(),
                network=self.create_network_manager()
            )
        return self._managers['loader']
            
    def get_manager(self, name: str) -> Optional[BaseManager]:
        return self._managers.get(name)
        
    def get_all_stats(self) -> Dict[str, Dict[str, Any]]:
        """Get statistics for all managers.
        
        Returns:
            Dict[str, Dict[str, Any]]: Dictionary of statistics for each manager
        """
        return {name: manager.get_stats() for name, manager in self._managers.items()}
        
    def cleanup_all(self) -> None:
        """Clean up all managers."""
        for name, manager in self._managers.items():
            try:
                manager.cleanup()
            except Exception as e:
                self.logger.error(f"Failed to cleanup {name} manager: {e}")
                
    def __enter__(self):
        return self
        
    def __exit__(self, exc_type, exc_val, exc_tb):
        self.cleanup_all()

# Exported class
__all__ = ['ManagerFactory']
