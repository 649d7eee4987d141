from __future__ import annotations

# Feed resources (relative to the feed base URL or data directory)
PUBLICATIONS_RESOURCE = "publications.json"
"""The publication list resource name."""
SPECIALS_RESOURCE = "specials.json"
"""The talks / awards / service resource name."""
DEFAULT_FEED_BASE = "http://127.0.0.1:8000/"
"""The default base URL the feeds are fetched from (the feed API)."""

DEFAULT_USER_AGENT = "pubsite/0.1 (+https://example.org/contact)"
"""The User-Agent string used for feed requests."""
NO_CACHE_HEADERS = {"Cache-Control": "no-cache", "Pragma": "no-cache"}
"""Request headers that make every feed fetch bypass intermediate caches."""
HTTP_TIMEOUT = (10, 30)  # (connect, read)
"""The HTTP client timeout; no other timeout is enforced."""

# View state
ALL_FILTER = "all"
"""The filter value that selects every record."""
DEFAULT_ROLE = "other"
"""The role given to a specials record without one."""
UNKNOWN_YEAR = "Unknown"
"""The display label for records without a year."""
SCROLL_STEP = 0.9
"""Fraction of the strip's visible width moved by one arrow press."""

# Venue classes, in display order
VENUE_CLASS_RANK = {"J": 0, "C": 1, "Z": 2}
"""Journal before conference before unclassified."""
NO_CODE_NUMBER = -1
"""The sentinel number for records without a venue code."""

# User-facing messages
PUBLICATIONS_ERROR = "Could not load publications. Please try again later."
SPECIALS_ERROR = "Could not load talks and awards. Please try again later."
ADD_PUBLICATION_NOTE = (
    "Quick note: with the JSON approach, edits are done by updating publications.json. "
    "This button only simulates adding at runtime."
)
CONTACT_MISSING_FIELDS = "Please fill in all fields."
CONTACT_THANKS = "Thanks! Your message has been captured (demo)."
