# webapp/app.py
from __future__ import annotations
import os
from pathlib import Path
from flask import (
    Flask, render_template, request, redirect, url_for, flash
)

from pubsite.agents.coordinator import PageCoordinator
from pubsite.config import (
    ADD_PUBLICATION_NOTE, ALL_FILTER, CONTACT_MISSING_FIELDS, CONTACT_THANKS,
    DEFAULT_FEED_BASE, HTTP_TIMEOUT, SCROLL_STEP,
)
from pubsite.ordering import display_year, extract_code
from pubsite.utils.mailto import mailto_href
from pubsite.utils.normalise import resolve_link

from dotenv import load_dotenv
load_dotenv(override=False)

APP = Flask(__name__)
APP.secret_key = os.environ.get("PUBSITE_SECRET_KEY", "dev-secret")
FEED_BASE = os.environ.get("PUBSITE_FEED_BASE", DEFAULT_FEED_BASE)
SITE_URL = (os.environ.get("PUBSITE_SITE_URL") or "").strip() or None
LOG_DIR = os.environ.get("PUBSITE_LOG_DIR")
SHOW_ERROR_DETAIL = os.environ.get("PUBSITE_SHOW_ERROR_DETAIL", "").lower() in ("true", "1", "yes")
CONTACT_EMAIL = (os.environ.get("PUBSITE_CONTACT_EMAIL") or "").strip()  # base64 token

# ---------------------- Feed helpers ----------------------
def coordinator() -> PageCoordinator:
    """A coordinator for the configured feed base; cheap, built per request."""
    return PageCoordinator(
        source=FEED_BASE,
        timeout=HTTP_TIMEOUT,
        log_dir=Path(LOG_DIR) if LOG_DIR else None,
        show_error_detail=SHOW_ERROR_DETAIL,
    )

def page_base() -> str:
    """Base URL relative pdf/url links resolve against."""
    return SITE_URL or request.url_root

def _filters() -> tuple[str, str]:
    year = (request.args.get("year") or ALL_FILTER).strip()
    role = (request.args.get("role") or ALL_FILTER).strip()
    return year, role

# ---------------------- Routes ----------------------
@APP.route("/")
def index():
    """Full page: publications strip, talks & awards, contact section."""
    year, role = _filters()
    state = coordinator().load(year_filter=year, role_filter=role)
    return render_template(
        "index.html",
        pubs=state.publications,
        specials=state.specials,
        scroll_step=SCROLL_STEP,
        has_email=bool(CONTACT_EMAIL),
        year_filter=year,
        role_filter=role,
    )

@APP.route("/partials/publications")
def publications_partial():
    """Publications region only; re-rendered from scratch on each filter change."""
    year, role = _filters()
    view = coordinator().publications.view(year)
    return render_template(
        "_publications.html", pubs=view, scroll_step=SCROLL_STEP, year_filter=year, role_filter=role,
    )

@APP.route("/partials/specials")
def specials_partial():
    """Specials region only."""
    year, role = _filters()
    view = coordinator().specials.view(role)
    return render_template("_specials.html", specials=view, year_filter=year, role_filter=role)

@APP.route("/contact", methods=["POST"])
def contact():
    """Demo contact form: validates, thanks the visitor, stores and sends nothing."""
    name = (request.form.get("name") or "").strip()
    email = (request.form.get("email") or "").strip()
    message = (request.form.get("message") or "").strip()
    if not name or not email or not message:
        flash(CONTACT_MISSING_FIELDS, "error")
    else:
        flash(CONTACT_THANKS, "success")
    return redirect(url_for("index", _anchor="contact"))

@APP.route("/contact/email")
def contact_email():
    """Decode the obfuscated address only when the visitor asks for it."""
    if not CONTACT_EMAIL:
        flash("No contact email configured.", "error")
        return redirect(url_for("index", _anchor="contact"))
    try:
        href = mailto_href(CONTACT_EMAIL)
    except ValueError as e:
        APP.logger.error("contact email token invalid: %s", e)
        flash("Contact email is unavailable.", "error")
        return redirect(url_for("index", _anchor="contact"))
    return redirect(href)

@APP.route("/publications/add", methods=["POST"])
def add_publication():
    """Stub: the list lives in publications.json and is never changed here."""
    flash(ADD_PUBLICATION_NOTE, "info")
    return redirect(url_for("index", _anchor="publications"))

@APP.route("/healthz")
def healthz():
    return "ok", 200

# ---- Jinja filters ----
@APP.template_filter("resolve_link")
def resolve_link_filter(href):
    """Absolute URL for a relative-or-absolute pdf/url link."""
    return resolve_link(href, page_base())

@APP.template_filter("display_year")
def display_year_filter(year):
    return display_year(year)

@APP.template_filter("venue_code")
def venue_code(pub):
    """'J10', 'C3', or '' for unclassified records."""
    code = extract_code(pub)
    return "" if code.prefix == "Z" else f"{code.prefix}{code.num}"

# ---- Entrypoint ----
if __name__ == "__main__":
    APP.run(host="0.0.0.0", port=int(os.environ.get("PORT", 5000)), debug=True)
