"""Header field value grammar.

A valid value holds US-ASCII characters only. CR is allowed solely as part of a
folding sequence (CRLF followed by SP or HTAB); a bare LF is never allowed.
"""
from .exceptions import InvalidValue

_WSP = (" ", "\t")


def _is_fold(value: str, i: int) -> bool:
    return value[i:i + 2] == "\r\n" and i + 2 < len(value) and value[i + 2] in _WSP


def filter(value: str) -> str:  # noqa: A001
    """Remove characters that can never appear in a header value, keeping legal folds."""
    out = []
    i = 0
    n = len(value)
    while i < n:
        ch = value[i]
        o = ord(ch)
        if ch == "\r":
            if _is_fold(value, i):
                out.append(value[i:i + 3])
                i += 3
                continue
            i += 1
            continue
        # non-visible controls (tab is kept), DEL, BOM
        if (o < 32 and ch != "\t") or o == 127 or o == 0xFEFF:
            i += 1
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def is_valid(value: str) -> bool:
    i = 0
    n = len(value)
    while i < n:
        o = ord(value[i])
        if o == 13:
            if not _is_fold(value, i):
                return False
            i += 3
            continue
        # bare LF, other controls except tab, DEL and anything non-ASCII
        if (o < 32 and o != 9) or o >= 127:
            return False
        i += 1
    return True


def assert_valid(value: str) -> None:
    if not is_valid(value):
        raise InvalidValue("Invalid header value detected")
