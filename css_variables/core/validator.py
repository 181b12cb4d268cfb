"""Validation helpers for source locations."""

import logging

import validators

logger = logging.getLogger(__name__)

def validate_url(url: str) -> bool:
    """Validate a URL.

    Args:
        url: URL to check

    Returns:
        True if the URL parses with a scheme and host; single-label hosts
        such as ``localhost`` are accepted
    """
    if not url or not url.strip():
        return False
    result = validators.url(url.strip(), simple_host=True)
    if not result:
        logger.debug(f"Rejected URL {url!r}")
        return False
    return True

__all__ = ['validate_url']
