"""Local file access for CSS Variables."""

from typing import Dict, Any

from .base import BaseManager
from ..utils.file import file_exists, get_modification_time, safe_read_file

class FileSystemManager(BaseManager):
    """Read local stylesheets and report their modification times."""

    def __init__(self, encoding: str = 'utf-8'):
        super().__init__()
        self.encoding = encoding

    def exists(self, path: str) -> bool:
        return file_exists(path)

    def modified_time(self, path: str) -> float:
        """Get the modification time used as the cache validity token.

        Raises:
            SourceNotFoundError: If the file does not exist
        """
        self.count('stat_count')
        return get_modification_time(path)

    def read_text(self, path: str) -> str:
        """Read a file as text.

        Raises:
            SourceNotFoundError: If the file does not exist
            FileOperationError: If the file cannot be read or decoded
        """
        content = safe_read_file(path, encoding=self.encoding)
        self.count('read_count')
        self.count('total_bytes', len(content.encode(self.encoding)))
        self.log_debug(f"Read {len(content)} characters from {path}")
        return content

    def _initial_stats(self) -> Dict[str, Any]:
        return {'stat_count': 0, 'read_count': 0, 'total_bytes': 0}

# Exported class
__all__ = ['FileSystemManager']
