from __future__ import annotations
import base64, binascii

def obfuscate_email(address: str) -> str:
    """Encode an address so it never appears in page source in clear text."""
    return base64.b64encode(address.strip().encode("utf-8")).decode("ascii")

def deobfuscate_email(token: str) -> str:
    """
    Decode a token made by `obfuscate_email`.

    Raises ValueError when the token is not valid base64 or not an address.
    """
    try:
        raw = base64.b64decode((token or "").strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise ValueError(f"Invalid email token: {e}") from e
    if "@" not in raw:
        raise ValueError("Invalid email token: not an address")
    return raw

def mailto_href(token: str) -> str:
    return f"mailto:{deobfuscate_email(token)}"
