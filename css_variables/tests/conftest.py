"""Pytest configuration for CSS Variables tests."""

import logging
import pytest
import requests

from ..managers.filesystem import FileSystemManager
from ..utils.error import SourceNotFoundError
from ..utils.ui import Notifier

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

SAMPLE_CSS = """
:root {
    --app-color-primary: #3366ff;
    --app-color-foreground: rgb(20, 20, 20);
    --app-color-accent: var(--app-color-primary);
    --app-spacing-sm: 4px;
    --app-spacing-md: 8px;
    --font-body: "Inter", sans-serif;
}

.dark {
    --app-color-primary: hsl(220, 90%, 60%);
}
"""

class RecordingNotifier(Notifier):
    """Collects notifications instead of showing them."""

    def __init__(self):
        self.notifications = []

    def notify(self, style, title, message=''):
        self.notifications.append((style, title, message))

    @property
    def styles(self):
        return [style for style, _, _ in self.notifications]

class FakeFileSystem(FileSystemManager):
    """In-memory files with settable modification times."""

    def __init__(self):
        super().__init__()
        self.files = {}

    def write(self, path, content, mtime):
        self.files[path] = (content, mtime)

    def exists(self, path):
        return path in self.files

    def modified_time(self, path):
        self.count('stat_count')
        if path not in self.files:
            raise SourceNotFoundError(f"CSS file not found: {path}")
        return self.files[path][1]

    def read_text(self, path):
        if path not in self.files:
            raise SourceNotFoundError(f"CSS file not found: {path}")
        self.count('read_count')
        return self.files[path][0]

def make_response(status=200, body=b'', reason='OK', content_type='text/css'):
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status
    response.reason = reason
    response._content = body
    response._content_consumed = True
    if content_type:
        response.headers['Content-Type'] = content_type
    return response

class FakeSession:
    """Session stand-in returning queued responses or raising queued errors."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = []
        self.verify = True

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    def close(self):
        pass

@pytest.fixture
def sample_css():
    """Return sample CSS content for testing."""
    return SAMPLE_CSS

@pytest.fixture
def css_file(tmp_path, sample_css):
    """Write the sample stylesheet to disk."""
    path = tmp_path / 'theme.css'
    path.write_text(sample_css, encoding='utf-8')
    return path

@pytest.fixture
def notifier():
    return RecordingNotifier()

@pytest.fixture
def fake_fs():
    return FakeFileSystem()

@pytest.fixture
def clock():
    """Deterministic clock advancing one second per call."""
    ticks = iter(range(1000, 100000))
    return lambda: float(next(ticks))

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep preference environment variables out of the tests."""
    for name in ('CSS_VARIABLES_FILE_PATH', 'CSS_VARIABLES_FILE_URL',
                 'CSS_VARIABLES_COLOR_PREVIEW', 'CSS_VARIABLES_FILTER_PREFIX'):
        monkeypatch.delenv(name, raising=False)
