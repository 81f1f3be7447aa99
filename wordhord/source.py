# source.py - wordhord document loading
# Resolves a local path or a URL into HTML text

import logging
from urllib.parse import urlparse

import requests

from wordhord import config
from wordhord.errors import SourceUnavailable

log = logging.getLogger("wordhord.source")


def read_file(path) -> str:
    log.info(f"Reading {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailable(f"Couldn't read {path}: {e}") from e


def fetch_url(url: str, timeout: float = config.FETCH_TIMEOUT) -> str:
    """Download an HTML page. Any transport or HTTP error is a SourceUnavailable."""
    parsed = urlparse(url)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise SourceUnavailable(f"Not an http(s) URL: {url}")

    log.info(f"Fetching {url}")
    try:
        resp = requests.get(url, timeout=timeout, headers=config.HEADERS, allow_redirects=True)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise SourceUnavailable(f"Couldn't fetch {url}: {e}") from e

    # requests falls back to ISO-8859-1 for text/* without a charset
    if "charset" not in resp.headers.get("Content-Type", "").lower():
        resp.encoding = resp.apparent_encoding
    log.info(f"Fetched {len(resp.content)} bytes from {url}")
    return resp.text


def load_source(path=None, url=None) -> str:
    if (path is None) == (url is None):
        raise ValueError("Exactly one of path or url is required")
    if url is not None:
        return fetch_url(url)
    return read_file(path)
