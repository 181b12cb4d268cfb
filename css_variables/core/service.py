"""Top-level load and query operations."""

import time
import logging
from dataclasses import replace
from typing import Callable, List, Optional, Sequence, Tuple

from .categorizer import categorize
from .colors import is_color, to_hex
from .extractor import RegexVariableExtractor, VariableExtractor
from .models import CacheEntry, ErrorEntry, ListingState, Section, SourceDescriptor, Variable
from .query import available_categories, build_sections
from .source import resolve_source
from ..managers.cache import CacheManager, is_entry_valid
from ..managers.loader import SourceLoader
from ..utils.config import ALL_CATEGORY, Preferences
from ..utils.error import CSSVariablesError
from ..utils.ui import NotificationStyle, Notifier

logger = logging.getLogger(__name__)

LOAD_FAILED_TITLE = 'Failed to load CSS file'
NO_VARIABLES_TITLE = 'No CSS variables found'
NO_VARIABLES_MESSAGE = 'The CSS file contains no custom properties (--variables)'

COPY_FORMATS = ('name', 'var', 'value')

def format_variable(variable: Variable, fmt: str = 'name') -> str:
    """Render a variable the way it would be copied.

    Args:
        variable: Variable to render
        fmt: ``name`` (``--x``), ``var`` (``var(--x)``) or ``value``

    Returns:
        Rendered string
    """
    if fmt == 'name':
        return variable.name
    if fmt == 'var':
        return f"var({variable.name})"
    if fmt == 'value':
        return variable.value
    raise ValueError(f"Unknown copy format: {fmt}")

class VariableSearchService:
    """Load variables for the configured source and answer queries.

    The cache passed in is owned by the caller and can be shared between
    services to keep entries for the lifetime of the process.
    Entries keep the categories of the prefix they were extracted with;
    a service with another prefix re-categorizes them on load.
    """

    def __init__(self, preferences: Preferences,
                 loader: Optional[SourceLoader] = None,
                 cache: Optional[CacheManager] = None,
                 extractor: Optional[VariableExtractor] = None,
                 notifier: Optional[Notifier] = None,
                 clock: Callable[[], float] = time.time):
        self.preferences = preferences
        self.clock = clock
        self.loader = loader or SourceLoader(clock=clock)
        self.cache = cache if cache is not None else CacheManager()
        self.extractor = extractor or RegexVariableExtractor()
        self.notifier = notifier
        self.state = ListingState()

    @property
    def variables(self) -> List[Variable]:
        return list(self.state.variables)

    def _notify(self, style: NotificationStyle, title: str, message: str = '') -> None:
        if self.notifier is not None:
            self.notifier.notify(style, title, message)

    def _load_entry(self, source: SourceDescriptor, force: bool) -> CacheEntry:
        modified = self.loader.probe(source)
        with self.cache.lock_for(source.key):
            cached = self.cache.get(source.key)
            if not force and is_entry_valid(cached, source, modified):
                logger.debug(f"Using cached variables for {source.key}")
                return cached

            loaded = self.loader.load(source)
            variables = self.extractor.extract(loaded.text, self.preferences.filter_prefix)
            entry = CacheEntry(
                source_key=source.key,
                last_modified=loaded.last_modified,
                variables=tuple(variables),
                source_kind=source.kind
            )
            self.cache.put(source.key, entry)
            return entry

    def _categorized(self, variables: Sequence[Variable]) -> Tuple[Variable, ...]:
        prefix = self.preferences.filter_prefix
        result = []
        for variable in variables:
            category = categorize(variable.name, prefix)
            result.append(variable if variable.category == category else replace(variable, category=category))
        return tuple(result)

    def load(self, force: bool = False) -> ListingState:
        """Load variables from the configured source.

        Failures never propagate: they are logged, reported through the
        notifier and turned into an error listing.

        Args:
            force: Bypass the cache and re-read or re-fetch the source

        Returns:
            The new listing state
        """
        try:
            source = resolve_source(self.preferences)
            entry = self._load_entry(source, force)
        except CSSVariablesError as e:
            logger.error(f"Error loading CSS variables: {e}")
            self.state = ListingState(error=ErrorEntry(LOAD_FAILED_TITLE, str(e)))
            self._notify(NotificationStyle.FAILURE, LOAD_FAILED_TITLE, str(e))
            return self.state

        self.state = ListingState(variables=self._categorized(entry.variables), source=source)
        if not entry.variables:
            self._notify(NotificationStyle.INFO, NO_VARIABLES_TITLE, NO_VARIABLES_MESSAGE)
        else:
            logger.info(f"Loaded {len(entry.variables)} variables from {source.key}")
        return self.state

    def refresh(self) -> ListingState:
        """Reload the source, ignoring any cached entry."""
        return self.load(force=True)

    def retry(self) -> ListingState:
        """Repeat the load after a failure."""
        return self.load()

    def sections(self, category: str = ALL_CATEGORY, query: str = '') -> List[Section]:
        """Grouped and sorted sections of the current listing."""
        return build_sections(self.state.variables, category, query)

    def categories(self) -> List[str]:
        return available_categories(self.state.variables)

    def color_for(self, variable: Variable) -> Optional[str]:
        """Swatch color for a variable, None when previews are off or it is no color."""
        if not self.preferences.show_color_preview or not is_color(variable.value):
            return None
        return to_hex(variable.value, self.state.variables)

__all__ = [
    'LOAD_FAILED_TITLE',
    'NO_VARIABLES_TITLE',
    'NO_VARIABLES_MESSAGE',
    'COPY_FORMATS',
    'format_variable',
    'VariableSearchService',
]
