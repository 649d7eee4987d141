from __future__ import annotations
import argparse
import json
import os
import sys
from dataclasses import asdict

from .agents.publications import PublicationFeedAgent
from .agents.specials import SpecialsFeedAgent
from .config import ALL_FILTER, DEFAULT_FEED_BASE, HTTP_TIMEOUT
from .ordering import display_year, extract_code, group_by_year
from .utils.http import FeedLoadError
from .utils.normalise import resolve_link


def build_parser() -> argparse.ArgumentParser:
    """
    Builds and returns an argument parser for the command-line interface.

    Returns:
        argparse.ArgumentParser: An argument parser configured with all the available command-line options.
    """
    p = argparse.ArgumentParser(
        prog="pubsite",
        description="Print the publication and talks/awards lists in display order",
    )
    p.add_argument("--source", "-s", default=os.getenv("PUBSITE_FEED_BASE", DEFAULT_FEED_BASE),
                   help="Feed base URL or a directory holding publications.json/specials.json "
                        "(default from env PUBSITE_FEED_BASE)")
    p.add_argument("--year", "-y", default=ALL_FILTER, help="Only publications from this year (default: all)")
    p.add_argument("--role", "-r", default=ALL_FILTER, help="Only specials with this role (default: all)")
    p.add_argument("--site-url", default=os.getenv("PUBSITE_SITE_URL"),
                   help="Resolve relative pdf/url links against this page URL")
    p.add_argument("--timeout", type=float, default=HTTP_TIMEOUT,
                   help="HTTP timeout seconds per request (default: 10s connect, 30s read)")
    p.add_argument("--json", action="store_true", help="Emit JSON instead of text")
    p.add_argument("--no-specials", action="store_true", help="Skip the specials feed")
    return p


def _pub_line(p, site_url: str | None) -> str:
    code = extract_code(p)
    tag = f"{code.prefix}{code.num}" if code.prefix != "Z" else "-"
    badge = " [best paper]" if p.best_paper else ""
    line = f"  [{tag}] {p.title}{badge}"
    if p.authors:
        line += f"\n      {p.authors}"
    if p.venue:
        line += f"\n      {p.venue}"
    link = resolve_link(p.pdf, site_url)
    if link:
        line += f"\n      {link}"
    return line


def main(argv: list[str] | None = None) -> int:
    """
    Loads the feeds, applies the filters and prints the result.

    Returns:
        int: 0 on success, 1 when any requested feed failed to load.
    """
    args = build_parser().parse_args(argv)
    failed = False
    out: dict = {}

    pubs_agent = PublicationFeedAgent(args.source, timeout=args.timeout)
    try:
        pubs = pubs_agent.load()
    except FeedLoadError as e:
        print(f"⚠ Could not load publications: {e}", file=sys.stderr)
        pubs, failed = None, True

    if pubs is not None:
        view = pubs_agent.render(pubs, args.year)
        if args.json:
            out["publications"] = {
                "year_filter": view.year_filter,
                "items": [dict(asdict(p), pdf=resolve_link(p.pdf, args.site_url)) for p in view.items],
            }
        else:
            print(f"Publications ({view.year_filter}): {len(view.items)}")
            for year, group in group_by_year(view.items):
                print(f"{year}")
                for p in group:
                    print(_pub_line(p, args.site_url))

    if not args.no_specials:
        sp_agent = SpecialsFeedAgent(args.source, timeout=args.timeout)
        try:
            specials = sp_agent.load()
        except FeedLoadError as e:
            print(f"⚠ Could not load talks and awards: {e}", file=sys.stderr)
            specials, failed = None, True
        if specials is not None:
            sview = sp_agent.render(specials, args.role)
            shown = [c.record for c in sview.cards if c.visible]
            if args.json:
                out["specials"] = {
                    "role_filter": sview.role_filter,
                    "items": [dict(asdict(s), url=resolve_link(s.url, args.site_url)) for s in shown],
                }
            else:
                print(f"\nTalks & awards ({sview.role_filter}): {len(shown)}")
                for s in shown:
                    venue = f", {s.venue}" if s.venue else ""
                    print(f"  {display_year(s.year)}  [{s.role}] {s.title}{venue}")

    if args.json:
        print(json.dumps(out, ensure_ascii=False, indent=2))
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
