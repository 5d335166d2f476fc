"""
Document loader: files, standard input and http(s) URLs.
"""

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse

import requests

logger = logging.getLogger(__name__)

STDIN_NAME = "stdin"
DEFAULT_TIMEOUT = 30


class SourceError(Exception):
    """Raised when a source cannot be fetched."""
    pass


@dataclass(frozen=True)
class Document:
    """Loaded markdown text and the name used for a synthesized title."""
    name: str
    text: str


def is_url(source: str) -> bool:
    """Check if the source looks like a URL."""
    parsed = urlparse(source)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def load_document(source=None) -> Document:
    """
    Load a markdown document.

    Args:
        source: File path, http(s) URL, or "-"/None for standard input

    Returns:
        The Document

    Raises:
        FileNotFoundError: if a file source does not exist
        SourceError: if a URL cannot be fetched
    """
    if source is None or source == "-":
        logger.debug("Reading standard input")
        return Document(STDIN_NAME, sys.stdin.read())

    if is_url(source):
        return _load_url(source)

    path = Path(source)
    if not path.is_file():
        raise FileNotFoundError(f"No such file: {source}")
    logger.debug("Reading %s", path)
    return Document(path.stem, path.read_text(encoding="utf-8", errors="replace"))


def _load_url(url: str) -> Document:
    logger.debug("Fetching %s", url)
    try:
        response = requests.get(url, timeout=DEFAULT_TIMEOUT, allow_redirects=True)
        response.raise_for_status()
    except requests.RequestException as e:
        raise SourceError(f"Failed to fetch {url}: {e}") from e

    stem = os.path.splitext(os.path.basename(urlparse(url).path.rstrip("/")))[0]
    return Document(stem or "index", response.text)
