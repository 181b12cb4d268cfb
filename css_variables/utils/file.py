"""File utility for CSS Variables."""

import os
from .error import FileOperationError, SourceNotFoundError

def file_exists(file_path: str) -> bool:
    """Check if a regular file exists at the given path."""
    return os.path.isfile(file_path)

def get_modification_time(file_path: str) -> float:
    """Get file modification time.
    
    Args:
        file_path: Path to the file
        
    Returns:
        Modification time in seconds since the epoch
        
    Raises:
        SourceNotFoundError: If the file does not exist
        FileOperationError: If the file cannot be inspected
    """
    try:
        return os.stat(file_path).st_mtime
    except FileNotFoundError as e:
        raise SourceNotFoundError(f"CSS file not found: {file_path}") from e
    except OSError as e:
        raise FileOperationError(f"Failed to stat file {file_path}: {e}") from e

def safe_read_file(file_path: str, encoding: str = 'utf-8') -> str:
    """Safely read content from a file.
    
    Args:
        file_path: Path to the file
        encoding: File encoding
        
    Returns:
        File content
        
    Raises:
        SourceNotFoundError: If the file does not exist
        FileOperationError: If file read fails
    """
    try:
        with open(file_path, 'r', encoding=encoding) as f:
            return f.read()
    except FileNotFoundError as e:
        raise SourceNotFoundError(f"CSS file not found: {file_path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise FileOperationError(f"Failed to read file {file_path}: {e}") from e

# Exported functions
__all__ = ['file_exists', 'get_modification_time', 'safe_read_file']
