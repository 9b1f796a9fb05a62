"""Utilities for fetching recorded cursor traces from URLs"""

import requests
import hashlib
from pathlib import Path
from urllib.parse import urlparse


def is_url(path_or_url):
    """Check if a string is an http(s) URL

    Args:
        path_or_url: String to check

    Returns:
        bool: True if it's a URL, False otherwise
    """
    try:
        result = urlparse(str(path_or_url))
    except ValueError:
        return False
    return result.scheme in ("http", "https") and bool(result.netloc)


def download_trace(url, cleanup_manager):
    """Download a trace file from a URL into the cleanup manager's temp dir

    Args:
        url: URL of the trace (JSON)
        cleanup_manager: CleanupManager that owns the downloaded file

    Returns:
        Path: Path to the downloaded temporary file

    Raises:
        ValueError: If download fails or URL is invalid
    """
    if not is_url(url):
        raise ValueError(f"Invalid URL: {url}")

    ext = Path(urlparse(url).path).suffix or '.json'
    url_hash = hashlib.md5(url.encode()).hexdigest()[:8]
    temp_path = cleanup_manager.temp_path(f"trace_{url_hash}{ext}")

    try:
        response = requests.get(url, timeout=30, stream=True)
        response.raise_for_status()

        with open(temp_path, 'wb') as f:
            for chunk in response.iter_content(chunk_size=8192):
                f.write(chunk)
    except requests.RequestException as e:
        raise ValueError(f"Failed to download trace from {url}: {e}")

    return temp_path


def resolve_trace_path(path_or_url, cleanup_manager):
    """Resolve a trace path or URL to a local file path (downloaded if URL)."""
    if is_url(path_or_url):
        return download_trace(path_or_url, cleanup_manager)
    return Path(path_or_url)
