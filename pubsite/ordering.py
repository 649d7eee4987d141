# pubsite/ordering.py
"""
Display order for publications and specials.

Publications sort on four keys, in priority order:
  1. year, descending (missing / non-numeric year counts as 0)
  2. venue class, J before C before Z (no code)
  3. code number, descending ("J10" before "J9")
  4. title, ascending and case-sensitive

The sort is stable, so the order is total and re-sorting is a no-op.
"""
from __future__ import annotations
import math
import re
from typing import Any, Iterable, List, Sequence, Tuple

from .config import ALL_FILTER, NO_CODE_NUMBER, UNKNOWN_YEAR, VENUE_CLASS_RANK
from .models import PublicationRecord, SortKey, SpecialRecord

_CODE_RE = re.compile(r"([JC])\s*(\d+)", re.I)


def year_number(value: Any) -> float:
    """
    Numeric value of a year field for sorting.

    Args:
        value: The raw year (int, float, str or None).

    Returns:
        float: The year, or 0 when it is missing or not a number.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        try:
            return value if math.isfinite(value) else 0
        except OverflowError:
            # int beyond float range
            return 0
    s = str(value).strip()
    if not s:
        return 0
    try:
        n = float(s)
    except ValueError:
        return 0
    return n if math.isfinite(n) else 0


def display_year(value: Any) -> str:
    """Year as shown on chips and cards; 'Unknown' when missing."""
    if value is None or isinstance(value, bool):
        return UNKNOWN_YEAR
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    s = str(value).strip()
    return s or UNKNOWN_YEAR


def extract_code(pub: PublicationRecord) -> SortKey:
    """
    Venue class and number from the first of id / code / pdf that carries
    a 'J' or 'C' code (case-insensitive, optional space before the digits).
    """
    for text in (pub.id, pub.code, pub.pdf):
        if not text:
            continue
        m = _CODE_RE.search(text)
        if not m:
            continue
        try:
            num = int(m.group(2))
        except ValueError:
            # digit run past the int conversion limit; not a usable code
            continue
        return SortKey(prefix=m.group(1).upper(), num=num)
    return SortKey(prefix="Z", num=NO_CODE_NUMBER)


def sort_key(pub: PublicationRecord) -> Tuple[float, int, int, str]:
    code = extract_code(pub)
    return (-year_number(pub.year), VENUE_CLASS_RANK[code.prefix], -code.num, pub.title or "")


def order_publications(pubs: Iterable[PublicationRecord]) -> List[PublicationRecord]:
    """Return a new list in display order; the input is left untouched."""
    return sorted(pubs, key=sort_key)


def filter_by_year(pubs: Iterable[PublicationRecord], year_filter: str | None = ALL_FILTER) -> List[PublicationRecord]:
    """
    Records whose year (as a string) equals `year_filter`, in display order.
    'all' (or an empty filter) keeps everything.
    """
    wanted = str(year_filter).strip() if year_filter is not None else ALL_FILTER
    if not wanted or wanted == ALL_FILTER:
        return order_publications(pubs)
    return order_publications(p for p in pubs if display_year(p.year) == wanted)


def _year_label_order(label: str) -> Tuple[bool, float, str]:
    # newest first, 'Unknown' last
    return (label == UNKNOWN_YEAR, -year_number(label), label)


def distinct_years(pubs: Iterable[Any]) -> List[str]:
    """One label per distinct year present, newest first."""
    labels = {display_year(p.year) for p in pubs}
    return sorted(labels, key=_year_label_order)


def group_by_year(pubs: Sequence[PublicationRecord]) -> List[Tuple[str, List[PublicationRecord]]]:
    """
    Year groups newest first, each group in display order.
    """
    groups: dict[str, List[PublicationRecord]] = {}
    for p in order_publications(pubs):
        groups.setdefault(display_year(p.year), []).append(p)
    return [(y, groups[y]) for y in sorted(groups, key=_year_label_order)]


def order_specials(items: Iterable[SpecialRecord]) -> List[SpecialRecord]:
    """Specials by numeric year, newest first; ties keep source order."""
    return sorted(items, key=lambda s: -year_number(s.year))
