from __future__ import annotations
from typing import Any, Dict, List, Tuple

from ..config import HTTP_TIMEOUT
from ..utils.http import feed_url, load_feed
from ..utils.logging import SiteLogger


class FeedAgent:
    """
    Shared fetch + error policy for one JSON feed.

    Subclasses set `resource`, `error_message` and `name`, and build
    their own records and view state from the raw rows.
    """
    resource: str = ""
    error_message: str = ""
    name: str = "feed"

    def __init__(
        self,
        source: str,
        logger: SiteLogger | None = None,
        timeout: float | Tuple[float, float] = HTTP_TIMEOUT,
        show_error_detail: bool = False,
    ):
        """
        Args:
            source (str): Base URL (http/https) or local directory holding the feed.
            logger (SiteLogger | None): Where diagnostics go; a console-only logger by default.
            timeout: HTTP client timeout, the only timeout applied.
            show_error_detail (bool): Append the raw error text to the user-facing message.
        """
        self.source = source
        self.logger = logger or SiteLogger()
        self.timeout = timeout
        self.show_error_detail = show_error_detail

    @property
    def url(self) -> str:
        return feed_url(self.source, self.resource)

    def _load_rows(self) -> List[Dict[str, Any]]:
        """
        Fetch the feed and keep the object rows. A non-object row is skipped,
        never fatal.
        """
        raw = load_feed(self.source, self.resource, timeout=self.timeout)
        rows = [r for r in raw if isinstance(r, dict)]
        skipped = len(raw) - len(rows)
        if skipped:
            self.logger.warn(f"{self.name}: skipped non-object rows", url=self.url, skipped=skipped)
        return rows

    def _failure_message(self, err: Exception) -> str:
        """Log the diagnostic and return what the visitor sees."""
        self.logger.error(
            f"{self.name} load error",
            url=self.url,
            error=str(err),
            error_type=type(err).__name__,
        )
        if self.show_error_detail:
            return f"{self.error_message} ({err})"
        return self.error_message
