from __future__ import annotations
import os
from dataclasses import asdict
from datetime import datetime, UTC
from pathlib import Path
from typing import List, Optional, Union

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from pydantic import BaseModel, Field

from . import __version__
from .agents.publications import PublicationFeedAgent
from .agents.specials import SpecialsFeedAgent
from .config import ADD_PUBLICATION_NOTE, ALL_FILTER, PUBLICATIONS_RESOURCE, SPECIALS_RESOURCE
from .ordering import extract_code
from .utils.http import FeedLoadError
from .utils.logging import SiteLogger

from dotenv import load_dotenv
ROOT_DIR = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=ROOT_DIR / ".env", override=False)

NO_STORE = {"Cache-Control": "no-store"}

app = FastAPI(title="pubsite feed API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # the feeds are public, read-only data
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# ---------- helpers & models ----------

def _data_root() -> Path:
    """Directory holding publications.json / specials.json (read on every request)."""
    return Path(os.environ.get("PUBSITE_DATA_ROOT", "data")).expanduser().resolve()

def _logger() -> SiteLogger:
    log_dir = os.environ.get("PUBSITE_LOG_DIR")
    return SiteLogger(Path(log_dir) if log_dir else None)

def _feed_file(resource: str) -> Path:
    p = _data_root() / resource
    if not p.is_file():
        raise HTTPException(404, f"{resource} not found")
    return p

YearValue = Union[int, float, str, None]

class PublicationOut(BaseModel):
    """A publication with its derived venue class and number."""
    title: str = ""
    authors: str = ""
    venue: str = ""
    year: YearValue = None
    pdf: Optional[str] = None
    best_paper: bool = False
    id: Optional[str] = None
    code: Optional[str] = None
    venue_class: str = Field("Z", description="J (journal), C (conference) or Z (no code)")
    code_number: int = -1

class PublicationList(BaseModel):
    year_filter: str = ALL_FILTER
    years: List[str] = Field(default_factory=list)
    items: List[PublicationOut] = Field(default_factory=list)

class SpecialOut(BaseModel):
    title: str = ""
    venue: str = ""
    year: YearValue = None
    url: Optional[str] = None
    role: str = "other"
    visible: bool = True

class SpecialsList(BaseModel):
    role_filter: str = ALL_FILTER
    roles: List[str] = Field(default_factory=list)
    items: List[SpecialOut] = Field(default_factory=list)

class PublicationIn(BaseModel):
    """Body accepted by the add-publication stub (never stored)."""
    title: str = Field(..., min_length=1)
    authors: Optional[str] = None
    venue: Optional[str] = None
    year: YearValue = None
    pdf: Optional[str] = None

# ---------- routes ----------

@app.get("/", include_in_schema=False)
def root():
    """Root endpoint."""
    return {"service": "pubsite-feed-api", "docs": "/docs", "health": "/health"}

@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "ok", "time": datetime.now(UTC).isoformat(), "data_root": str(_data_root())}

@app.get(f"/{PUBLICATIONS_RESOURCE}", include_in_schema=False)
def publications_file():
    """The raw publications feed, never cached."""
    return FileResponse(_feed_file(PUBLICATIONS_RESOURCE), media_type="application/json", headers=NO_STORE)

@app.get(f"/{SPECIALS_RESOURCE}", include_in_schema=False)
def specials_file():
    """The raw specials feed, never cached."""
    return FileResponse(_feed_file(SPECIALS_RESOURCE), media_type="application/json", headers=NO_STORE)

@app.get("/publications", response_model=PublicationList)
def list_publications(year: str = Query(ALL_FILTER, description="Year filter, or 'all'")):
    """Publications in display order, filtered by year."""
    _feed_file(PUBLICATIONS_RESOURCE)
    agent = PublicationFeedAgent(str(_data_root()), logger=_logger())
    try:
        records = agent.load()
    except FeedLoadError as e:
        agent.logger.error("publications load error", error=str(e))
        raise HTTPException(502, f"Could not read {PUBLICATIONS_RESOURCE}: {e}")
    view = agent.render(records, year)
    items = []
    for p in view.items:
        code = extract_code(p)
        items.append(PublicationOut(**asdict(p), venue_class=code.prefix, code_number=code.num))
    body = PublicationList(
        year_filter=view.year_filter,
        years=[c.value for c in view.chips if c.value != ALL_FILTER],
        items=items,
    )
    return JSONResponse(body.model_dump(), headers=NO_STORE)

@app.get("/specials", response_model=SpecialsList)
def list_specials(role: str = Query(ALL_FILTER, description="Role filter, or 'all'")):
    """Specials by year (newest first); the role filter only sets `visible`."""
    _feed_file(SPECIALS_RESOURCE)
    agent = SpecialsFeedAgent(str(_data_root()), logger=_logger())
    try:
        records = agent.load()
    except FeedLoadError as e:
        agent.logger.error("specials load error", error=str(e))
        raise HTTPException(502, f"Could not read {SPECIALS_RESOURCE}: {e}")
    view = agent.render(records, role)
    body = SpecialsList(
        role_filter=view.role_filter,
        roles=view.roles,
        items=[SpecialOut(**asdict(c.record), visible=c.visible) for c in view.cards],
    )
    return JSONResponse(body.model_dump(), headers=NO_STORE)

@app.post("/publications", status_code=202)
def add_publication(pub: PublicationIn):
    """Accepts the request and changes nothing; edit publications.json to add entries."""
    return {"ok": False, "stored": False, "note": ADD_PUBLICATION_NOTE, "title": pub.title}
