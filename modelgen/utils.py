"""Utility functions for loading generator input text.

Field specs, DDL scripts and struct selections can come from a local
file, a URL or standard input.
"""

import sys
from pathlib import Path
from typing import TextIO
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)


class TextLoaderError(Exception):
    """Custom exception for input loading errors."""

    pass


def load_text_from_file(file_path: str | Path) -> tuple[str, str]:
    """Load text from a local file.

    Args:
        file_path: Path to the file.

    Returns:
        Tuple of (source description, file contents).

    Raises:
        FileNotFoundError: If file doesn't exist.
        TextLoaderError: If file cannot be read.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load text from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        text = file_path.read_text(encoding="utf-8")
        logger.info(f"Loaded {len(text)} characters from {file_path}")
        return f"📄 {file_path}", text
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise TextLoaderError(f"Error reading file {file_path}: {e}") from e


def load_text_from_url(url: str, timeout: int = 30) -> tuple[str, str]:
    """Load text from a URL.

    Args:
        url: URL to fetch.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, response body).

    Raises:
        TextLoaderError: If URL is invalid or the request fails.
    """
    logger.debug(f"Attempting to load text from URL: {url}")

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error(f"Invalid URL format: {url}")
        raise TextLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        logger.info(f"Successfully loaded text from {url}")
        return f"🌐 {url}", response.text

    except requests.exceptions.Timeout as e:
        logger.error(f"Request timeout for URL: {url}")
        raise TextLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error for URL {url}: {e}")
        raise TextLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"HTTP error {e.response.status_code} for URL: {url}")
        raise TextLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}", exc_info=True)
        raise TextLoaderError(f"Request error for URL {url}: {e}") from e


def load_text_from_stream(stream: TextIO | None = None) -> tuple[str, str]:
    """Read everything from ``stream`` (standard input by default)."""
    stream = stream or sys.stdin
    text = stream.read()
    logger.info(f"Read {len(text)} characters from standard input")
    return "⌨️  stdin", text


def load_text(
    file_path: str | Path | None = None,
    url: str | None = None,
    stdin: bool = False,
    timeout: int = 30,
) -> tuple[str, str]:
    """Load input text from exactly one of a file, a URL or standard input.

    A ``file_path`` of ``"-"`` reads standard input.

    Returns:
        Tuple of (source description, text).

    Raises:
        TextLoaderError: If no source or more than one source is given, or
            loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    if file_path == "-":
        file_path, stdin = None, True

    sources = [bool(file_path), bool(url), stdin]
    if sum(sources) == 0:
        logger.error("No input source provided")
        raise TextLoaderError("One of file, url or stdin must be provided")
    if sum(sources) > 1:
        logger.error("More than one input source provided")
        raise TextLoaderError("Specify only one of file, url or stdin")

    if file_path:
        return load_text_from_file(file_path)
    if url:
        return load_text_from_url(url, timeout)
    return load_text_from_stream()
