from __future__ import annotations
from typing import List

from ..config import ALL_FILTER, PUBLICATIONS_ERROR, PUBLICATIONS_RESOURCE
from ..models import PublicationRecord, PublicationView, YearChip
from ..ordering import distinct_years, filter_by_year
from ..utils.http import FeedLoadError
from .feed import FeedAgent


class PublicationFeedAgent(FeedAgent):
    """
    Loads publications.json and builds the year-filterable strip.
    Every render pass rebuilds the whole view; nothing is cached between passes.
    """
    resource = PUBLICATIONS_RESOURCE
    error_message = PUBLICATIONS_ERROR
    name = "publications"

    def load(self) -> List[PublicationRecord]:
        """
        Fetches the feed (cache bypassed) and parses each row.

        Returns:
            List[PublicationRecord]: Records in source order.

        Raises:
            FeedLoadError: On transport, HTTP status or JSON failure.
        """
        return [PublicationRecord.from_dict(r) for r in self._load_rows()]

    @staticmethod
    def render(records: List[PublicationRecord], year_filter: str | None = ALL_FILTER) -> PublicationView:
        """
        Pure view construction: chips ('all' + one per year present) and the
        ordered, filtered items. A year with no records gives an empty strip
        and no active chip.
        """
        years = distinct_years(records)
        wanted = (year_filter or ALL_FILTER).strip() or ALL_FILTER
        chips = [YearChip(value=ALL_FILTER, active=wanted == ALL_FILTER)]
        chips += [YearChip(value=y, active=wanted == y) for y in years]
        return PublicationView(year_filter=wanted, chips=chips, items=filter_by_year(records, wanted))

    def view(self, year_filter: str | None = ALL_FILTER) -> PublicationView:
        """load() + render(); on failure an error view with no chips and no items."""
        try:
            records = self.load()
        except FeedLoadError as e:
            return PublicationView(year_filter=ALL_FILTER, error=self._failure_message(e))
        self.logger.info("publications loaded", url=self.url, count=len(records))
        return self.render(records, year_filter)
