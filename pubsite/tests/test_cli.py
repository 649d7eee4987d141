import json
from pubsite.cli import build_parser, main

def _seed(root):
    (root / "publications.json").write_text(json.dumps([
        {"title": "Later", "id": "C2", "year": 2022, "pdf": "papers/c2.pdf"},
        {"title": "Lead", "id": "J7", "year": 2022, "best_paper": True},
        {"title": "Early", "year": 2019},
    ]), encoding="utf-8")
    (root / "specials.json").write_text(json.dumps([
        {"title": "Invited talk", "year": 2021, "role": "talk"},
        {"title": "Reviewer", "year": 2023, "role": "service"},
    ]), encoding="utf-8")

def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.year == "all" and args.role == "all"
    assert args.json is False

def test_text_output_grouped_by_year(tmp_path, capsys):
    """
    Tests that text output lists year groups newest first with J before C inside a year.
    """
    _seed(tmp_path)
    assert main(["--source", str(tmp_path), "--site-url", "https://example.org/sub/"]) == 0
    out = capsys.readouterr().out
    assert out.index("2022") < out.index("2019")
    assert out.index("[J7] Lead [best paper]") < out.index("[C2] Later")
    assert "https://example.org/sub/papers/c2.pdf" in out
    assert out.index("Reviewer") < out.index("Invited talk")

def test_json_output_with_filters(tmp_path, capsys):
    _seed(tmp_path)
    assert main(["-s", str(tmp_path), "--year", "2022", "--role", "talk", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [p["title"] for p in data["publications"]["items"]] == ["Lead", "Later"]
    assert [s["title"] for s in data["specials"]["items"]] == ["Invited talk"]

def test_missing_feed_exit_code(tmp_path, capsys):
    """
    Tests that a feed that cannot be loaded makes the command exit with status 1.
    """
    assert main(["--source", str(tmp_path), "--no-specials"]) == 1
    assert "Could not load publications" in capsys.readouterr().err

def test_timeout_default_matches_shared_setting():
    from pubsite.config import HTTP_TIMEOUT
    assert build_parser().parse_args([]).timeout == HTTP_TIMEOUT
    assert build_parser().parse_args(["--timeout", "5"]).timeout == 5.0
