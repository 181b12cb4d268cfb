"""Source selection from preferences."""

from .models import SourceDescriptor
from ..utils.config import Preferences
from ..utils.error import ConfigurationMissingError

MISSING_SOURCE_MESSAGE = (
    "Please configure either a CSS file path or a CSS URL in the preferences"
)

def resolve_source(preferences: Preferences) -> SourceDescriptor:
    """Pick the single source to load.

    A non-blank local path always wins over the URL, whether or not the
    file exists or the URL is valid.

    Raises:
        ConfigurationMissingError: If neither a path nor a URL is set
    """
    path = (preferences.css_file_path or '').strip()
    if path:
        return SourceDescriptor.local(path)

    url = (preferences.css_file_url or '').strip()
    if url:
        return SourceDescriptor.remote(url)

    raise ConfigurationMissingError(MISSING_SOURCE_MESSAGE)

__all__ = ['MISSING_SOURCE_MESSAGE', 'resolve_source']
