"""Base manager class for CSS Variables."""

import time
import logging
from typing import Dict, Any, Optional
from abc import ABC

from ..utils.concurrency import ThreadSafeDict

class BaseManager(ABC):
    """Base class for resource managers.

    Every manager keeps a set of usage counters in ``stats``. Subclasses
    declare their counters in ``_initial_stats`` and bump them with
    ``count``; ``get_stats`` reports them together with the time elapsed
    since the last reset.
    """

    def __init__(self):
        """Initialize base manager."""
        self.logger = logging.getLogger(self.__class__.__name__)
        self.stats = ThreadSafeDict()
        self.reset_stats()

    def _initial_stats(self) -> Dict[str, Any]:
        return {}

    def count(self, name: str, amount: int = 1) -> None:
        self.stats[name] = self.stats.get(name, 0) + amount

    def reset_stats(self) -> None:
        """Reset every counter to its initial value."""
        self.stats.clear()
        self.stats.update(self._initial_stats())
        self.stats['start_time'] = time.time()

    def get_stats(self) -> Dict[str, Any]:
        """Get resource usage statistics.

        Returns:
            Counters plus ``elapsed_time`` in seconds
        """
        stats = dict(self.stats.items())
        stats['elapsed_time'] = time.time() - stats.pop('start_time')
        return stats

    def log_error(self, message: str, error: Optional[Exception] = None) -> None:
        """Log error message.

        Args:
            message: Error message
            error: Optional exception
        """
        if error:
            self.logger.error(f"{message}: {error}")
        else:
            self.logger.error(message)

    def log_warning(self, message: str) -> None:
        self.logger.warning(message)

    def log_info(self, message: str) -> None:
        self.logger.info(message)

    def log_debug(self, message: str) -> None:
        self.logger.debug(message)

    def cleanup(self) -> None:
        """Release held resources; nothing by default."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.cleanup()

# Exported class
__all__ = ['BaseManager']
