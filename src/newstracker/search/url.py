"""URL handling utilities."""

from __future__ import annotations

import logging
from urllib.parse import urlparse

logger = logging.getLogger(__name__)


def extract_host(url: str | None) -> str:
    """Extract the host name from a URL.

    Args:
        url: The URL to extract the host from.

    Returns:
        The host name as written in the URL, or "Unknown" if extraction fails.
    """
    if not url:
        return "Unknown"
    try:
        host = urlparse(url).hostname
    except ValueError:
        logger.warning(f"Could not parse url {url}")
        return "Unknown"
    if not host:
        logger.warning(f"Could not get host from url {url}")
        return "Unknown"
    return host
