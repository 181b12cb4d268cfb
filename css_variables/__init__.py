"""Search custom properties of a local or remote stylesheet."""

from .utils.config import VERSION as __version__

__all__ = ['__version__']
