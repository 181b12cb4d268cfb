"""Network management for CSS Variables."""

import time
import requests
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from typing import Dict, Any, Optional, Tuple
from requests.adapters import HTTPAdapter
from requests.structures import CaseInsensitiveDict
from requests.utils import get_encoding_from_headers
from urllib3.exceptions import ReadTimeoutError
from urllib3.util.retry import Retry

from .base import BaseManager
from ..core.validator import validate_url
from ..utils.config import REQUEST_TIMEOUT, READ_CHUNK_SIZE, USER_AGENT, ACCEPT_HEADER
from ..utils.error import (
    EmptyResponseError,
    HttpError,
    InvalidUrlError,
    NetworkError,
    RequestTimeoutError,
)

def _is_read_timeout(error: requests.exceptions.ConnectionError) -> bool:
    """Whether a connection error wraps a urllib3 read timeout.

    requests re-raises read timeouts hit while streaming the body as
    ConnectionError rather than Timeout.
    """
    for arg in error.args:
        if isinstance(arg, ReadTimeoutError) or isinstance(getattr(arg, 'reason', None), ReadTimeoutError):
            return True
    return False

def _decode(content: bytes, headers: CaseInsensitiveDict) -> str:
    """Decode a body with the declared charset, UTF-8 otherwise."""
    encoding = 'utf-8'
    if 'charset' in headers.get('Content-Type', '').lower():
        encoding = get_encoding_from_headers(headers) or encoding
    try:
        return str(content, encoding, errors='replace')
    except LookupError:
        return str(content, 'utf-8', errors='replace')

class NetworkManager(BaseManager):
    """Fetch remote stylesheets with a single GET request.

    The whole exchange, from connecting to the last body byte, has to finish
    within ``request_timeout`` seconds.
    """

    def __init__(self, request_timeout: float = REQUEST_TIMEOUT,
                 user_agent: str = USER_AGENT,
                 verify_ssl: bool = True,
                 session: Optional[requests.Session] = None):
        """Initialize network manager.

        Args:
            request_timeout: Request timeout in seconds
            user_agent: User-Agent header sent with every request
            verify_ssl: Whether to verify SSL certificates
            session: Optional preconfigured session

        Raises:
            ValueError: If any parameter is invalid
        """
        super().__init__()
        if request_timeout <= 0:
            raise ValueError("Request timeout must be positive")

        self.request_timeout = request_timeout
        self.verify_ssl = verify_ssl
        self.headers = {
            'User-Agent': user_agent,
            'Accept': ACCEPT_HEADER
        }

        if session is None:
            # Exactly one attempt per fetch
            session = requests.Session()
            adapter = HTTPAdapter(max_retries=Retry(total=0, read=False))
            session.mount('http://', adapter)
            session.mount('https://', adapter)
        self.session = session
        self.session.verify = verify_ssl

    def is_valid_url(self, url: str) -> bool:
        return validate_url(url)

    def _download(self, url: str, deadline: float) -> Tuple[CaseInsensitiveDict, bytes]:
        """Send the GET and stream the body until ``deadline``.

        Returns:
            Response headers and the raw body
        """
        response = self.session.get(
            url,
            headers=self.headers,
            timeout=self.request_timeout,
            stream=True
        )
        try:
            if not 200 <= response.status_code < 300:
                self.count('http_errors')
                self.log_warning(f"HTTP {response.status_code} for {url}")
                raise HttpError(response.status_code, response.reason)

            body = bytearray()
            for chunk in response.iter_content(chunk_size=READ_CHUNK_SIZE):
                if time.monotonic() > deadline:
                    raise RequestTimeoutError(f"Request timeout after {self.request_timeout}s")
                body.extend(chunk)
            return response.headers, bytes(body)
        finally:
            response.close()

    def fetch_text(self, url: str) -> str:
        """Fetch a stylesheet as text.

        The request runs on a worker thread so that a server trickling bytes
        slower than the socket timeout still cannot hold the caller past
        ``request_timeout``.

        Args:
            url: URL to request

        Returns:
            Response body decoded with the declared charset, UTF-8 otherwise

        Raises:
            InvalidUrlError: If the URL does not parse
            HttpError: If the server answers with a non-2xx status
            RequestTimeoutError: If the response is not complete in time
            EmptyResponseError: If the body is empty
            NetworkError: If the request fails at the transport level
        """
        if not self.is_valid_url(url):
            raise InvalidUrlError(f"Invalid URL format: {url}")

        self.count('request_count')
        deadline = time.monotonic() + self.request_timeout
        executor = ThreadPoolExecutor(max_workers=1)
        try:
            future = executor.submit(self._download, url, deadline)
            headers, content = future.result(timeout=self.request_timeout)
        except (FutureTimeoutError, RequestTimeoutError) as e:
            self.count('timeout_errors')
            self.log_error(f"Request timeout for {url}")
            raise RequestTimeoutError(f"Request timeout after {self.request_timeout}s") from e
        except requests.exceptions.Timeout as e:
            self.count('timeout_errors')
            self.log_error(f"Request timeout for {url}", e)
            raise RequestTimeoutError(f"Request timeout after {self.request_timeout}s") from e
        except requests.exceptions.SSLError as e:
            self.count('ssl_errors')
            self.log_error(f"SSL error for {url}", e)
            raise NetworkError(f"SSL error: {e}") from e
        except requests.exceptions.ConnectionError as e:
            if _is_read_timeout(e):
                self.count('timeout_errors')
                self.log_error(f"Read timeout for {url}", e)
                raise RequestTimeoutError(f"Request timeout after {self.request_timeout}s") from e
            self.count('connection_errors')
            self.log_error(f"Connection error for {url}", e)
            raise NetworkError(f"Connection error: {e}") from e
        except requests.exceptions.RequestException as e:
            self.count('error_count')
            self.log_error(f"Request failed for {url}", e)
            raise NetworkError(f"Request failed: {e}") from e
        finally:
            # A stalled worker is left to its socket timeout
            executor.shutdown(wait=False)

        if not content:
            raise EmptyResponseError(f"Empty response from {url}")

        self.count('total_bytes', len(content))
        self.log_debug(f"Fetched {len(content)} bytes from {url}")
        return _decode(content, headers)

    def _initial_stats(self) -> Dict[str, Any]:
        return {
            'request_count': 0,
            'error_count': 0,
            'http_errors': 0,
            'timeout_errors': 0,
            'ssl_errors': 0,
            'connection_errors': 0,
            'total_bytes': 0
        }

    def cleanup(self) -> None:
        """Close the underlying session."""
        self.session.close()

# Exported class
__all__ = ['NetworkManager']
