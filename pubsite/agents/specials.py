from __future__ import annotations
from typing import List

from ..config import ALL_FILTER, SPECIALS_ERROR, SPECIALS_RESOURCE
from ..models import SpecialCard, SpecialRecord, SpecialsView
from ..ordering import order_specials
from ..utils.http import FeedLoadError
from .feed import FeedAgent


def role_visible(card_role: str, requested: str | None) -> bool:
    """'all' shows every card; otherwise only cards whose role matches exactly."""
    if not requested or requested == ALL_FILTER:
        return True
    return card_role == requested


class SpecialsFeedAgent(FeedAgent):
    """
    Loads specials.json (talks, awards, service) into role-tagged cards.
    The role filter only toggles visibility; it never re-sorts or re-fetches.
    """
    resource = SPECIALS_RESOURCE
    error_message = SPECIALS_ERROR
    name = "specials"

    def load(self) -> List[SpecialRecord]:
        return [SpecialRecord.from_dict(r) for r in self._load_rows()]

    @staticmethod
    def render(records: List[SpecialRecord], role_filter: str | None = ALL_FILTER) -> SpecialsView:
        wanted = (role_filter or ALL_FILTER).strip() or ALL_FILTER
        ordered = order_specials(records)
        roles: List[str] = []
        for s in ordered:
            if s.role not in roles:
                roles.append(s.role)
        cards = [SpecialCard(record=s, visible=role_visible(s.role, wanted)) for s in ordered]
        return SpecialsView(role_filter=wanted, roles=roles, cards=cards)

    def view(self, role_filter: str | None = ALL_FILTER) -> SpecialsView:
        try:
            records = self.load()
        except FeedLoadError as e:
            return SpecialsView(role_filter=ALL_FILTER, error=self._failure_message(e))
        self.logger.info("specials loaded", url=self.url, count=len(records))
        return self.render(records, role_filter)
