"""Category detection for custom property names."""

import re

from ..utils.config import ALL_CATEGORY, OTHER_CATEGORY

_LEADING_WORD = re.compile(r'^([a-zA-Z0-9]+)')

def categorize(name: str, filter_prefix: str) -> str:
    """Derive a category label for a variable name.

    With a blank prefix every variable lands in the "All" bucket. When the
    name starts with the trimmed prefix, the first alphanumeric word after
    it becomes the category (``--app-color-bg`` with ``--app-`` gives
    ``Color``). Everything else, including a name that matches the prefix
    but has no alphanumeric word after it, is "Other".

    Args:
        name: Variable name including the leading ``--``
        filter_prefix: Configured prefix, may be empty

    Returns:
        Category label
    """
    if not filter_prefix or not filter_prefix.strip():
        return ALL_CATEGORY

    prefix = filter_prefix.strip()
    if name.startswith(prefix):
        match = _LEADING_WORD.match(name[len(prefix):])
        if match:
            word = match.group(1)
            return word[0].upper() + word[1:]

    return OTHER_CATEGORY

__all__ = ['categorize']
