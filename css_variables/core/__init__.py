"""Core functionality for CSS variable extraction and lookup."""

from .models import (
    SourceKind, Variable, SourceDescriptor, LoadedSource,
    CacheEntry, Section, ErrorEntry, ListingState,
)
from .categorizer import categorize
from .extractor import extract, VariableExtractor, RegexVariableExtractor
from .colors import is_color, to_hex
from .query import (
    filter_by_category, search, remove_duplicates, group_by_category,
    sort_categories, available_categories, build_sections,
)
from .source import resolve_source
from .validator import validate_url

__all__ = [
    'SourceKind', 'Variable', 'SourceDescriptor', 'LoadedSource',
    'CacheEntry', 'Section', 'ErrorEntry', 'ListingState',
    'categorize',
    'extract', 'VariableExtractor', 'RegexVariableExtractor',
    'is_color', 'to_hex',
    'filter_by_category', 'search', 'remove_duplicates', 'group_by_category',
    'sort_categories', 'available_categories', 'build_sections',
    'resolve_source',
    'validate_url',
]
