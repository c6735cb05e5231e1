import re

_NON_PRINTABLE = re.compile(r"[^\x20-\x7e]")


def is_printable(text: str) -> bool:
    """True when every character is printable US-ASCII (0x20..0x7E)."""
    return _NON_PRINTABLE.search(text) is None
