"""Source loading for CSS Variables."""

import time
from typing import Any, Callable, Dict, Optional

from .base import BaseManager
from .filesystem import FileSystemManager
from .network import NetworkManager
from ..core.models import LoadedSource, SourceDescriptor, SourceKind
from ..utils.error import InvalidUrlError, SourceNotFoundError

class SourceLoader(BaseManager):
    """Fetch raw CSS text for exactly one source per call.

    Local files are read through a FileSystemManager and remote URLs
    through a NetworkManager. The clock supplies the modification token of
    remote sources, which have no modification time of their own.
    """

    def __init__(self, file_system: Optional[FileSystemManager] = None,
                 network: Optional[NetworkManager] = None,
                 clock: Callable[[], float] = time.time):
        super().__init__()
        self.file_system = file_system or FileSystemManager()
        self._network = network
        self.clock = clock

    @property
    def network(self) -> NetworkManager:
        # Created on first remote use so local-only runs never open a session
        if self._network is None:
            self._network = NetworkManager()
        return self._network

    def probe(self, source: SourceDescriptor) -> Optional[float]:
        """Check a source without reading it.

        Args:
            source: Source to check

        Returns:
            Current modification time for local sources, None for remote

        Raises:
            SourceNotFoundError: If a local file does not exist
            InvalidUrlError: If a remote URL does not parse
        """
        if source.kind is SourceKind.LOCAL:
            if not self.file_system.exists(source.location):
                raise SourceNotFoundError(f"CSS file not found: {source.location}")
            return self.file_system.modified_time(source.location)

        if not self.network.is_valid_url(source.location):
            raise InvalidUrlError(f"Invalid URL format: {source.location}")
        return None

    def load(self, source: SourceDescriptor) -> LoadedSource:
        """Load raw CSS text.

        Args:
            source: Source to load

        Returns:
            Text with its modification token

        Raises:
            CSSVariablesError: Any of the source-specific load errors
        """
        if source.kind is SourceKind.LOCAL:
            modified = self.probe(source)
            text = self.file_system.read_text(source.location)
            self.log_info(f"Loaded local CSS {source.location}")
            return LoadedSource(text, modified)

        text = self.network.fetch_text(source.location)
        self.log_info(f"Fetched remote CSS {source.location}")
        return LoadedSource(text, self.clock())

    def get_stats(self) -> Dict[str, Any]:
        stats = {'file_system': self.file_system.get_stats()}
        if self._network is not None:
            stats['network'] = self._network.get_stats()
        return stats

    def cleanup(self) -> None:
        if self._network is not None:
            self._network.cleanup()

# Exported class
__all__ = ['SourceLoader']
