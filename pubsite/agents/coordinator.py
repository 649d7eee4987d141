# pubsite/agents/coordinator.py
from __future__ import annotations
import concurrent.futures as _fut
import os
from pathlib import Path
from typing import Tuple

from ..config import ALL_FILTER, DEFAULT_FEED_BASE, HTTP_TIMEOUT
from ..models import PageState
from ..utils.logging import SiteLogger
from .publications import PublicationFeedAgent
from .specials import SpecialsFeedAgent


class PageCoordinator:
    """
    Loads both page regions. The two feeds are independent: they are fetched
    in parallel, neither waits for the other, and one failing leaves the
    other untouched.
    """

    def __init__(
        self,
        source: str | None = None,
        timeout: float | Tuple[float, float] = HTTP_TIMEOUT,
        log_dir: Path | None = None,
        show_error_detail: bool = False,
    ):
        """
        Initializes the PageCoordinator.

        Args:
            source: Feed base URL or directory; defaults to PUBSITE_FEED_BASE, then the local feed API.
            timeout: HTTP client timeout for each feed request.
            log_dir: Optional directory for the JSON-lines log file.
            show_error_detail: Echo raw error text in the user-facing messages.
        """
        self.source = source or os.environ.get("PUBSITE_FEED_BASE", DEFAULT_FEED_BASE)
        self.logger = SiteLogger(log_dir)
        kw = dict(logger=self.logger, timeout=timeout, show_error_detail=show_error_detail)
        self.publications = PublicationFeedAgent(self.source, **kw)
        self.specials = SpecialsFeedAgent(self.source, **kw)

    def load(self, year_filter: str | None = ALL_FILTER, role_filter: str | None = ALL_FILTER) -> PageState:
        """
        Runs both feed loads concurrently and waits for both.

        Returns:
            PageState: One view per region; each carries its own error, if any.
        """
        with _fut.ThreadPoolExecutor(max_workers=2) as pool:
            pubs = pool.submit(self.publications.view, year_filter)
            specials = pool.submit(self.specials.view, role_filter)
            return PageState(publications=pubs.result(), specials=specials.result())
