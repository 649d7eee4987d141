# pubsite/models.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .config import ALL_FILTER, DEFAULT_ROLE

Year = Union[int, float, str, None]


def _text(v: Any) -> str:
    """Coerce a loose JSON value to display text; absent -> ''."""
    if v is None:
        return ""
    if isinstance(v, list):
        return ", ".join(str(a) for a in v if a)
    return str(v)


def _opt_text(v: Any) -> str | None:
    if v is None:
        return None
    s = str(v).strip()
    return s or None


def _year(v: Any) -> Year:
    if isinstance(v, bool):
        return None
    if isinstance(v, (int, float, str)):
        return v
    return None


@dataclass(frozen=True)
class PublicationRecord:
    """
    A publication as it appears in publications.json. Read-only.
    """
    title: str = ""
    """The title; absent renders empty."""
    authors: str = ""
    """The author line (a list of names is joined with ', ')."""
    venue: str = ""
    """The venue line."""
    year: Year = None
    """The publication year, numeric or string; may be missing."""
    pdf: str | None = None
    """Relative or absolute link to the PDF."""
    best_paper: bool = False
    """Whether to show the best-paper badge."""
    id: str | None = None
    """Free-text identifier, e.g. 'J10' or 'C3'."""
    code: str | None = None
    """Alternate free-text code field."""

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "PublicationRecord":
        return cls(
            title=_text(d.get("title")),
            authors=_text(d.get("authors")),
            venue=_text(d.get("venue")),
            year=_year(d.get("year")),
            pdf=_opt_text(d.get("pdf")),
            best_paper=bool(d.get("best_paper")),
            id=_opt_text(d.get("id")),
            code=_opt_text(d.get("code")),
        )


@dataclass(frozen=True)
class SpecialRecord:
    """
    A talk, award or service entry from specials.json. Read-only.
    """
    title: str = ""
    venue: str = ""
    year: Year = None
    url: str | None = None
    role: str = DEFAULT_ROLE
    """Category tag used by the role filter; defaults to 'other'."""

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "SpecialRecord":
        return cls(
            title=_text(d.get("title")),
            venue=_text(d.get("venue")),
            year=_year(d.get("year")),
            url=_opt_text(d.get("url")),
            role=_opt_text(d.get("role")) or DEFAULT_ROLE,
        )


@dataclass(frozen=True)
class SortKey:
    """
    Venue code derived from a record's id / code / pdf field.
    Computed on every ordering pass, never stored on the record.
    """
    prefix: str
    """'J', 'C', or 'Z' when nothing matched."""
    num: int
    """The digits after the letter, or -1 when nothing matched."""


@dataclass(frozen=True)
class YearChip:
    """One year filter control."""
    value: str
    active: bool


@dataclass(frozen=True)
class PublicationView:
    """
    Everything the publications region needs for one render pass.
    """
    year_filter: str = ALL_FILTER
    chips: List[YearChip] = field(default_factory=list)
    items: List[PublicationRecord] = field(default_factory=list)
    error: Optional[str] = None


@dataclass(frozen=True)
class SpecialCard:
    record: SpecialRecord
    visible: bool = True


@dataclass(frozen=True)
class SpecialsView:
    """
    Everything the specials region needs for one render pass.
    """
    role_filter: str = ALL_FILTER
    roles: List[str] = field(default_factory=list)
    cards: List[SpecialCard] = field(default_factory=list)
    error: Optional[str] = None


@dataclass(frozen=True)
class PageState:
    """Both regions of the page; each loaded independently."""
    publications: PublicationView
    specials: SpecialsView
