"""Filtering, search and grouping of extracted variables."""

from typing import Dict, Iterable, List, Sequence

from .models import Section, Variable
from ..utils.config import ALL_CATEGORY, OTHER_CATEGORY

# Labels that always sort after the named categories, in this order
_TRAILING_CATEGORIES = (OTHER_CATEGORY, ALL_CATEGORY)

def filter_by_category(variables: Sequence[Variable], category: str) -> List[Variable]:
    """Keep variables of one category; "All" keeps everything."""
    if category == ALL_CATEGORY:
        return list(variables)
    return [variable for variable in variables if variable.category == category]

def search(variables: Sequence[Variable], query: str) -> List[Variable]:
    """Multi-term search over name and value.

    The query is split on whitespace and every term must occur, case
    insensitively, in ``name + " " + value``. A blank query matches all.
    """
    if not query or not query.strip():
        return list(variables)

    terms = query.lower().split()
    results = []
    for variable in variables:
        haystack = f"{variable.name} {variable.value}".lower()
        if all(term in haystack for term in terms):
            results.append(variable)
    return results

def remove_duplicates(variables: Sequence[Variable], keep: str = 'first') -> List[Variable]:
    """Drop repeated names.

    Args:
        variables: Variables in document order
        keep: ``'first'`` keeps the first declaration of each name,
            ``'last'`` keeps the last one (CSS cascade order) at the
            position of its last occurrence

    Returns:
        Variables with unique names, relative order preserved
    """
    if keep not in ('first', 'last'):
        raise ValueError(f"keep must be 'first' or 'last', got {keep!r}")

    ordered = variables if keep == 'first' else list(reversed(variables))
    seen = set()
    unique = []
    for variable in ordered:
        if variable.name in seen:
            continue
        seen.add(variable.name)
        unique.append(variable)
    return unique if keep == 'first' else unique[::-1]

def group_by_category(variables: Iterable[Variable]) -> Dict[str, List[Variable]]:
    """Group variables by category, "Other" when a variable has none."""
    grouped: Dict[str, List[Variable]] = {}
    for variable in variables:
        grouped.setdefault(variable.category or OTHER_CATEGORY, []).append(variable)
    return grouped

def _category_sort_key(category: str):
    if category in _TRAILING_CATEGORIES:
        return (1, _TRAILING_CATEGORIES.index(category), '')
    return (0, 0, category)

def sort_categories(categories: Iterable[str]) -> List[str]:
    """Alphabetical order with "Other" and then "All" at the end."""
    return sorted(categories, key=_category_sort_key)

def available_categories(variables: Iterable[Variable]) -> List[str]:
    """Categories offered for filtering: "All" first, then the rest sorted."""
    categories = {variable.category for variable in variables
                  if variable.category and variable.category != ALL_CATEGORY}
    return [ALL_CATEGORY] + sorted(categories)

def build_sections(variables: Sequence[Variable], category: str = ALL_CATEGORY,
                   query: str = '', keep: str = 'first') -> List[Section]:
    """Run the full query pipeline.

    Category filter, search, de-duplication, grouping and section sort are
    applied in that order.
    """
    filtered = filter_by_category(variables, category)
    matched = search(filtered, query)
    unique = remove_duplicates(matched, keep=keep)
    grouped = group_by_category(unique)
    return [Section(name, tuple(grouped[name])) for name in sort_categories(grouped)]

__all__ = [
    'filter_by_category',
    'search',
    'remove_duplicates',
    'group_by_category',
    'sort_categories',
    'available_categories',
    'build_sections',
]
