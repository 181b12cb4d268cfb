"""Data types shared by the extraction, cache and query layers."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class SourceKind(Enum):
    """Where a stylesheet comes from."""

    LOCAL = 'local'
    REMOTE = 'remote'


@dataclass(frozen=True)
class Variable:
    """A single custom property declaration."""

    name: str
    value: str
    category: Optional[str] = None


@dataclass(frozen=True)
class SourceDescriptor:
    """Exactly one CSS source: a local path or a remote URL."""

    kind: SourceKind
    location: str

    @property
    def key(self) -> str:
        """Cache key for this source (the path or URL itself)."""
        return self.location

    @property
    def is_local(self) -> bool:
        return self.kind is SourceKind.LOCAL

    @classmethod
    def local(cls, path: str) -> 'SourceDescriptor':
        return cls(SourceKind.LOCAL, path)

    @classmethod
    def remote(cls, url: str) -> 'SourceDescriptor':
        return cls(SourceKind.REMOTE, url)


@dataclass(frozen=True)
class LoadedSource:
    """Raw stylesheet text plus its modification token."""

    text: str
    last_modified: float


@dataclass(frozen=True)
class CacheEntry:
    """Variables previously extracted from one source."""

    source_key: str
    last_modified: float
    variables: Tuple[Variable, ...]
    source_kind: SourceKind


@dataclass(frozen=True)
class Section:
    """One category group of the presented listing."""

    category: str
    variables: Tuple[Variable, ...]


@dataclass(frozen=True)
class ErrorEntry:
    """Single actionable entry shown in place of the listing after a failure."""

    title: str
    message: str
    actions: Tuple[str, ...] = ('open_settings', 'retry')


@dataclass(frozen=True)
class ListingState:
    """Outcome of the most recent load."""

    variables: Tuple[Variable, ...] = ()
    source: Optional[SourceDescriptor] = None
    error: Optional[ErrorEntry] = None

    @property
    def ok(self) -> bool:
        return self.error is None


__all__ = [
    'SourceKind',
    'Variable',
    'SourceDescriptor',
    'LoadedSource',
    'CacheEntry',
    'Section',
    'ErrorEntry',
    'ListingState',
]
