from __future__ import annotations
from urllib.parse import urljoin

def resolve_link(href: str | None, base: str | None) -> str | None:
    """
    Resolve a relative-or-absolute link against the page's base URL.

    'papers/a.pdf' on 'https://example.org/sub/' -> 'https://example.org/sub/papers/a.pdf'.
    Absolute URLs pass through; a blank link gives None.
    """
    if not href:
        return None
    h = href.strip()
    if not h:
        return None
    if not base:
        return h
    return urljoin(base, h)
