from __future__ import annotations
import json
from pathlib import Path
from typing import Dict, Optional, Tuple

import requests

from ..config import DEFAULT_USER_AGENT, HTTP_TIMEOUT, NO_CACHE_HEADERS


class FeedLoadError(RuntimeError):
    """A feed could not be fetched or parsed (transport, HTTP status, or JSON)."""


def http_get(
    url: str,
    headers: Optional[Dict[str, str]] = None,
    timeout: float | Tuple[float, float] = HTTP_TIMEOUT,
) -> Tuple[int, str, Dict[str, str]]:
    """
    Single GET that bypasses caches. No retries: a failed feed stays failed
    until the page is requested again. Returns (status_code, text, response_headers).

    Raises FeedLoadError when the request itself fails.
    """
    hdrs = {"User-Agent": DEFAULT_USER_AGENT, "Accept": "application/json", **NO_CACHE_HEADERS}
    hdrs.update(headers or {})
    try:
        r = requests.get(url, headers=hdrs, timeout=timeout)
    except requests.RequestException as e:
        raise FeedLoadError(f"GET {url} failed: {e}") from e
    return r.status_code, r.text, dict(r.headers or {})


def parse_feed(text: str, source: str) -> list:
    """Parse a feed body; the top-level value must be a JSON array."""
    try:
        data = json.loads(text)
    except ValueError as e:
        raise FeedLoadError(f"{source}: invalid JSON ({e})") from e
    if not isinstance(data, list):
        raise FeedLoadError(f"{source}: expected a JSON array, got {type(data).__name__}")
    return data


def fetch_json(url: str, timeout: float | Tuple[float, float] = HTTP_TIMEOUT) -> list:
    """
    Fetch a JSON array from `url`.

    Raises FeedLoadError on transport failure, non-2xx status or bad JSON.
    """
    status, text, _ = http_get(url, timeout=timeout)
    if not 200 <= status < 300:
        raise FeedLoadError(f"GET {url} -> HTTP {status}")
    return parse_feed(text, url)


def read_json_file(path: Path) -> list:
    """Local-file counterpart of fetch_json (used when the source is a directory)."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FeedLoadError(f"{path}: {e}") from e
    return parse_feed(text, str(path))


def load_feed(source: str, resource: str, timeout: float | Tuple[float, float] = HTTP_TIMEOUT) -> list:
    """
    Load `resource` from `source`, which is either a base URL or a local directory.
    """
    if source.startswith(("http://", "https://")):
        base = source if source.endswith("/") else source + "/"
        return fetch_json(base + resource, timeout=timeout)
    return read_json_file(Path(source).expanduser() / resource)


def feed_url(source: str, resource: str) -> str:
    """Human-readable location of a resource, for log lines."""
    if source.startswith(("http://", "https://")):
        return (source if source.endswith("/") else source + "/") + resource
    return str(Path(source).expanduser() / resource)