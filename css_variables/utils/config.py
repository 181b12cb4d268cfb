"""Configuration utility for CSS Variables."""

import os
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import orjson

from .error import ConfigurationError

logger = logging.getLogger(__name__)

# Project version
VERSION = "1.0.0"

# Default directories
CONFIG_DIR = Path(os.path.expanduser('~')) / '.config' / 'css-variables'
PREFERENCES_FILE = CONFIG_DIR / 'preferences.json'

# Category labels
ALL_CATEGORY = 'All'
OTHER_CATEGORY = 'Other'

# Color model
FALLBACK_COLOR = '#000000'
MAX_ALIAS_DEPTH = 10

# Timeouts (in seconds)
REQUEST_TIMEOUT = 10

# Response body read size (in bytes)
READ_CHUNK_SIZE = 8192

# Request headers
USER_AGENT = 'CSS Variables Searcher/1.0'
ACCEPT_HEADER = 'text/css,text/plain;q=0.9,*/*;q=0.8'

# Logging
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
LOG_LEVEL = 'WARNING'

# Environment overrides
ENV_FILE_PATH = 'CSS_VARIABLES_FILE_PATH'
ENV_FILE_URL = 'CSS_VARIABLES_FILE_URL'
ENV_COLOR_PREVIEW = 'CSS_VARIABLES_COLOR_PREVIEW'
ENV_FILTER_PREFIX = 'CSS_VARIABLES_FILTER_PREFIX'

# Preference keys as stored by the settings collaborator, mapped to field names
_PREFERENCE_KEYS = {
    'cssFilePath': 'css_file_path',
    'css_file_path': 'css_file_path',
    'cssFileUrl': 'css_file_url',
    'css_file_url': 'css_file_url',
    'showColorPreview': 'show_color_preview',
    'show_color_preview': 'show_color_preview',
    'filterPrefix': 'filter_prefix',
    'filter_prefix': 'filter_prefix',
}

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off'}


@dataclass(frozen=True)
class Preferences:
    """User preferences driving a load."""

    css_file_path: str = ''
    css_file_url: str = ''
    show_color_preview: bool = True
    filter_prefix: str = ''

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'Preferences':
        """Build preferences from a settings mapping.

        Both the camelCase keys of the settings store and snake_case
        field names are accepted. Unknown keys are ignored.

        Args:
            data: Settings mapping

        Returns:
            Preferences instance

        Raises:
            ConfigurationError: If a value has the wrong type
        """
        values: Dict[str, Any] = {}
        for key, value in data.items():
            field = _PREFERENCE_KEYS.get(key)
            if field is None or value is None:
                continue
            if field == 'show_color_preview':
                values[field] = _parse_bool(value, key)
            elif not isinstance(value, str):
                raise ConfigurationError(f"Preference {key} must be a string")
            else:
                values[field] = value
        return cls(**values)

    def merged(self, **overrides: Any) -> 'Preferences':
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _parse_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    raise ConfigurationError(f"Preference {key} must be a boolean, got {value!r}")


def read_preferences_file(path: Path) -> Dict[str, Any]:
    """Read a JSON preferences file.

    Args:
        path: Preferences file path

    Returns:
        Parsed settings, empty if the file does not exist

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    if not path.exists():
        logger.debug(f"No preferences file at {path}")
        return {}
    try:
        data = orjson.loads(path.read_bytes())
    except (OSError, orjson.JSONDecodeError) as e:
        raise ConfigurationError(f"Failed to read preferences {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Preferences {path} must contain a JSON object")
    return data


def load_preferences(path: Optional[Path] = None,
                     environ: Optional[Mapping[str, str]] = None) -> Preferences:
    """Load preferences from file and environment.

    Environment variables take priority over the preferences file.

    Args:
        path: Preferences file, defaults to PREFERENCES_FILE
        environ: Environment mapping, defaults to os.environ

    Returns:
        Preferences instance
    """
    environ = os.environ if environ is None else environ
    settings = read_preferences_file(path or PREFERENCES_FILE)
    env_settings = {
        'cssFilePath': environ.get(ENV_FILE_PATH),
        'cssFileUrl': environ.get(ENV_FILE_URL),
        'showColorPreview': environ.get(ENV_COLOR_PREVIEW),
        'filterPrefix': environ.get(ENV_FILTER_PREFIX),
    }
    settings.update({k: v for k, v in env_settings.items() if v is not None})
    return Preferences.from_mapping(settings)


# Exported config
__all__ = [
    'VERSION', 'CONFIG_DIR', 'PREFERENCES_FILE',
    'ALL_CATEGORY', 'OTHER_CATEGORY',
    'FALLBACK_COLOR', 'MAX_ALIAS_DEPTH',
    'REQUEST_TIMEOUT', 'READ_CHUNK_SIZE', 'USER_AGENT', 'ACCEPT_HEADER',
    'LOG_FORMAT', 'LOG_DATE_FORMAT', 'LOG_LEVEL',
    'ENV_FILE_PATH', 'ENV_FILE_URL', 'ENV_COLOR_PREVIEW', 'ENV_FILTER_PREFIX',
    'Preferences', 'read_preferences_file', 'load_preferences',
]
