"""Header field name grammar (RFC 5322 section 2.2: printable US-ASCII except colon)."""
from .exceptions import InvalidName


def _legal(ch: str) -> bool:
    o = ord(ch)
    return 33 <= o <= 126 and o != 58


def filter(name: str) -> str:  # noqa: A001 - mirrors value.filter
    """Drop every character not permitted in a field name."""
    return "".join(ch for ch in name if _legal(ch))


def is_valid(name: str) -> bool:
    if not isinstance(name, str) or not name:
        return False
    return all(_legal(ch) for ch in name)


def assert_valid(name: str) -> None:
    if not is_valid(name):
        raise InvalidName("Invalid header name detected")
