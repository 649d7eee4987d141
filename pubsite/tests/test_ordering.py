from pubsite.models import PublicationRecord, SpecialRecord
from pubsite.ordering import (
    display_year, distinct_years, extract_code, filter_by_year, group_by_year,
    order_publications, order_specials, year_number,
)

def P(**kw):
    return PublicationRecord.from_dict(kw)

def titles(pubs):
    return [p.title for p in pubs]

def test_year_descending_missing_year_last():
    """
    Tests that newer years come first and a missing or non-numeric year sorts as 0.
    """
    pubs = [P(title="old", year=2019), P(title="none"), P(title="new", year="2023"), P(title="tba", year="in press")]
    assert titles(order_publications(pubs)) == ["new", "old", "none", "tba"]

def test_journal_before_conference_same_year():
    """
    Tests that a C3 record sorts after a J1 record of the same year.
    """
    pubs = [P(title="conf", id="C3", year=2020), P(title="journal", id="J1", year=2020)]
    assert titles(order_publications(pubs)) == ["journal", "conf"]

def test_higher_number_first_within_class():
    """
    Tests that J10 precedes J9 (numeric, not lexicographic, descending).
    """
    pubs = [P(title="nine", id="J9", year=2021), P(title="ten", id="J10", year=2021)]
    assert titles(order_publications(pubs)) == ["ten", "nine"]

def test_no_code_sorts_after_j_and_c():
    """
    Tests that a record without id/code/pdf falls into class Z after all J and C records of its year.
    """
    pubs = [P(title="z", year=2022), P(title="c", code="C1", year=2022), P(title="j", id="J2", year=2022)]
    assert titles(order_publications(pubs)) == ["j", "c", "z"]
    assert extract_code(pubs[0]).prefix == "Z"
    assert extract_code(pubs[0]).num == -1

def test_title_tiebreak_is_case_sensitive():
    """
    Tests that identical year/class/number fall back to code-point title order ('Alpha' before 'beta').
    """
    pubs = [P(title="beta", id="C1", year=2020), P(title="Alpha", id="C1", year=2020)]
    assert titles(order_publications(pubs)) == ["Alpha", "beta"]
    # uppercase sorts before every lowercase letter
    pubs = [P(title="alpha", year=2020), P(title="Zulu", year=2020)]
    assert titles(order_publications(pubs)) == ["Zulu", "alpha"]

def test_code_field_priority_and_pattern():
    """
    Tests code extraction: id before code before pdf, case-insensitive, optional whitespace.
    """
    assert extract_code(P(id="j 12", code="C99")).prefix == "J"
    assert extract_code(P(id="j 12")).num == 12
    assert extract_code(P(id="misc", code="c7")).prefix == "C"
    assert extract_code(P(pdf="papers/C5_paper.pdf")).num == 5
    # a field without a match defers to the next one
    assert extract_code(P(id="draft", pdf="J3.pdf")).prefix == "J"
    assert extract_code(P(id="X12")).prefix == "Z"

def test_resorting_is_identity():
    """
    Tests that ordering already-ordered output changes nothing.
    """
    pubs = [
        P(title="b", id="C2", year=2021), P(title="a", id="C2", year=2021),
        P(title="x", year=2020), P(title="y", id="J1", year=2020), P(title="dup", year=2019),
        P(title="dup", year=2019, venue="other"),
    ]
    once = order_publications(pubs)
    assert order_publications(once) == once
    assert titles(order_publications(list(reversed(once)))) == titles(once)

def test_filter_by_year_exact_string_match():
    """
    Tests that a year filter keeps exactly the records whose year string matches, in display order.
    """
    pubs = [
        P(title="a", year=2023, id="C1"), P(title="b", year="2023", id="J4"),
        P(title="c", year=2022), P(title="d"),
    ]
    assert titles(filter_by_year(pubs, "2023")) == ["b", "a"]
    assert titles(filter_by_year(pubs, "all")) == ["b", "a", "c", "d"]
    assert titles(filter_by_year(pubs, "Unknown")) == ["d"]
    assert filter_by_year(pubs, "1999") == []

def test_distinct_years_and_groups():
    """
    Tests that year chips and groups run newest first with 'Unknown' last.
    """
    pubs = [P(title="a", year=2021), P(title="b"), P(title="c", year=2023), P(title="d", year="2021")]
    assert distinct_years(pubs) == ["2023", "2021", "Unknown"]
    groups = group_by_year(pubs)
    assert [y for y, _ in groups] == ["2023", "2021", "Unknown"]
    assert titles(groups[1][1]) == ["a", "d"]

def test_year_helpers():
    assert year_number(" 2020 ") == 2020
    assert year_number(True) == 0
    assert year_number("nan") == 0
    assert display_year(2020.0) == "2020"
    assert display_year("  ") == "Unknown"

def test_specials_numeric_year_order():
    """
    Tests that specials sort by numeric year, so 999 sorts after 2000 and ties keep source order.
    """
    items = [
        SpecialRecord.from_dict({"title": "ancient", "year": "999"}),
        SpecialRecord.from_dict({"title": "first", "year": 2000}),
        SpecialRecord.from_dict({"title": "second", "year": "2000"}),
        SpecialRecord.from_dict({"title": "none"}),
    ]
    assert [s.title for s in order_specials(items)] == ["first", "second", "ancient", "none"]

def test_year_too_large_for_float_sorts_as_zero():
    """
    Tests that an integer year beyond float range counts as 0 instead of raising.
    """
    huge = 10 ** 400
    assert year_number(huge) == 0
    pubs = [P(title="bad", year=huge), P(title="ok", year=2024)]
    assert titles(order_publications(pubs)) == ["ok", "bad"]

def test_overlong_code_digits_fall_back():
    """
    Tests that a digit run past the int conversion limit is skipped like no code at all.
    """
    assert extract_code(P(id="J" + "9" * 5000)) == extract_code(P())
    assert extract_code(P(id="J" + "9" * 5000, code="C4")).num == 4
    pubs = [P(title="long", id="J" + "9" * 5000, year=2020), P(title="conf", id="C1", year=2020)]
    assert titles(order_publications(pubs)) == ["conf", "long"]
