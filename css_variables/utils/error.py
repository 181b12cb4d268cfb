"""Error utility for CSS Variables."""

from typing import Optional


class CSSVariablesError(Exception):
    """Base exception for CSS Variables."""
    pass

class ConfigurationError(CSSVariablesError):
    """Raised when configuration is invalid."""
    pass

class ConfigurationMissingError(ConfigurationError):
    """Raised when neither a CSS file path nor a CSS URL is configured."""
    pass

class ValidationError(CSSVariablesError):
    """Raised when validation fails."""
    pass

class InvalidUrlError(ValidationError):
    """Raised when the configured CSS URL cannot be parsed."""
    pass

class FileOperationError(CSSVariablesError):
    """Raised when file operations fail."""
    pass

class SourceNotFoundError(FileOperationError):
    """Raised when the configured CSS file does not exist."""
    pass

class RemoteSourceError(CSSVariablesError):
    """Base class for failures while fetching a remote stylesheet."""
    pass

class HttpError(RemoteSourceError):
    """Raised when the server answers with a non-2xx status."""

    def __init__(self, status: int, reason: Optional[str] = None):
        self.status = status
        self.reason = reason
        message = f"HTTP {status}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

class RequestTimeoutError(RemoteSourceError):
    """Raised when no complete response arrives in time."""
    pass

class EmptyResponseError(RemoteSourceError):
    """Raised when the server returns an empty body."""
    pass

class NetworkError(RemoteSourceError):
    """Raised when network operations fail at the transport level."""
    pass

class CacheError(CSSVariablesError):
    """Raised when cache operations fail."""
    pass

# Exported exceptions
__all__ = [
    'CSSVariablesError',
    'ConfigurationError',
    'ConfigurationMissingError',
    'ValidationError',
    'InvalidUrlError',
    'FileOperationError',
    'SourceNotFoundError',
    'RemoteSourceError',
    'HttpError',
    'RequestTimeoutError',
    'EmptyResponseError',
    'NetworkError',
    'CacheError',
]
