import pytest
from pubsite.utils.mailto import deobfuscate_email, mailto_href, obfuscate_email
from pubsite.utils.normalise import resolve_link

def test_relative_pdf_resolves_against_page_base():
    """
    Tests that a relative pdf link resolves under the page's directory.
    """
    assert resolve_link("papers/a.pdf", "https://example.org/sub/") == "https://example.org/sub/papers/a.pdf"
    assert resolve_link("/papers/a.pdf", "https://example.org/sub/") == "https://example.org/papers/a.pdf"

def test_absolute_and_blank_links():
    assert resolve_link("https://cdn.example.com/x.pdf", "https://example.org/sub/") == "https://cdn.example.com/x.pdf"
    assert resolve_link("  ", "https://example.org/") is None
    assert resolve_link(None, "https://example.org/") is None
    assert resolve_link("a.pdf", None) == "a.pdf"

def test_email_obfuscation_round_trip():
    """
    Tests that the obfuscated token hides the address and decodes to a mailto link.
    """
    token = obfuscate_email("me@example.org")
    assert "@" not in token
    assert deobfuscate_email(token) == "me@example.org"
    assert mailto_href(token) == "mailto:me@example.org"

@pytest.mark.parametrize("token", ["not base64!!", "aGVsbG8=", ""])
def test_bad_email_token_rejected(token):
    with pytest.raises(ValueError):
        deobfuscate_email(token)
