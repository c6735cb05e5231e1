"""Folding and RFC 2047 encoded-word handling for header values.

Encoding is delegated to the stdlib ``email.header`` machinery; this module only
decides between plain word wrapping (printable ASCII) and Q-encoded words, and
keeps the first line short enough to leave room for ``Name: ``.
"""
from __future__ import annotations

import re
from email.charset import QP, Charset
from email.errors import HeaderParseError
from email.header import Header, decode_header
from typing import Optional

from . import value as value_grammar
from .interface import Encoding, HeaderInterface, Unstructured
from ..utils.logging import get_logger

EOL = "\r\n"
FOLDING = "\r\n "
LINE_LENGTH = 78

_UNFOLD = re.compile(r"\r\n(?=[ \t])")
_NON_ASCII = re.compile(r"[^\x00-\x7f]")

log = get_logger()


def wordwrap(text: str, width: int = LINE_LENGTH, brk: str = FOLDING) -> str:
    """Break ``text`` at spaces so lines stay within ``width`` where possible.

    The space a line is broken at is replaced by ``brk``; words longer than
    ``width`` are never cut. Break sequences already present reset the count.
    """
    out = []
    n = len(text)
    laststart = lastspace = 0
    current = 0
    while current < n:
        ch = text[current]
        if ch == brk[0] and current + len(brk) < n and text.startswith(brk, current):
            out.append(text[laststart:current + len(brk)])
            current += len(brk) - 1
            laststart = lastspace = current + 1
        elif ch == " ":
            if current - laststart >= width:
                out.append(text[laststart:current])
                out.append(brk)
                laststart = current + 1
            lastspace = current
        elif current - laststart >= width and laststart < lastspace:
            out.append(text[laststart:lastspace])
            out.append(brk)
            laststart = lastspace = lastspace + 1
        current += 1
    if laststart != n:
        out.append(text[laststart:])
    return "".join(out)


def wrap(value: str, header: HeaderInterface, encoding: Optional[Encoding] = None) -> str:
    """Return ``value`` folded/encoded for the wire, as appropriate for ``header``."""
    if isinstance(header, Unstructured):
        return _wrap_unstructured(value, header, encoding)
    return value


def _wrap_unstructured(value: str, header: HeaderInterface, encoding: Optional[Encoding]) -> str:
    name = header.get_field_name() or ""
    gap = len(name) + 2
    if encoding is None:
        encoding = header.get_encoding()
    if encoding == Encoding.ASCII:
        # pad with a stub the width of "Name: " so the first line folds correctly
        folded = wordwrap("0" * gap + value, LINE_LENGTH, FOLDING)
        return folded[gap:]
    return mime_encode_value(value, str(encoding), LINE_LENGTH, header_name=name)


def mime_encode_value(value: str, encoding: str = "UTF-8", line_length: int = 998, header_name: Optional[str] = None) -> str:
    """Q-encode ``value`` as RFC 2047 encoded words folded at ``line_length``."""
    cs = Charset(encoding.lower())
    cs.header_encoding = QP
    h = Header(value, charset=cs, maxlinelen=line_length, header_name=header_name)
    return h.encode(linesep=EOL)


def mime_decode_value(value: str) -> str:
    """Unfold ``value`` and decode any encoded words it contains.

    Malformed encoded words are left as they are.
    """
    value = _UNFOLD.sub("", value)
    if "=?" not in value:
        return value
    try:
        parts = []
        for chunk, charset in decode_header(value):
            if charset == "us-ascii":
                charset = None
            if isinstance(chunk, bytes):
                # plain text chunks come back as raw-unicode-escape bytes and may be non-ASCII
                chunk = chunk.decode(charset or "raw-unicode-escape")
            parts.append((chunk, charset))
    except (HeaderParseError, LookupError, UnicodeDecodeError) as e:
        log.debug("encoded-word decode failed, keeping raw value: %s", e)
        return value
    return _join_decoded(parts)


def _nonctext(s: str) -> bool:
    return s.isspace() or s in ("(", ")", "\\")


def _join_decoded(parts) -> str:
    """Join decoded chunks, separating plain text from encoded text by one space."""
    out = []
    last_cs = None
    last_space = False
    for text, charset in parts:
        if out:
            has_space = bool(text) and _nonctext(text[0])
            if last_cs is not None:
                if charset is None and not has_space:
                    out.append(" ")
            elif charset is not None and not last_space:
                out.append(" ")
        last_space = bool(text) and _nonctext(text[-1])
        last_cs = charset
        out.append(text)
    return "".join(out)


def can_be_encoded(value: str) -> bool:
    """True when ``value`` can be put on the wire, as ASCII or as encoded words."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    # non-ASCII text is encoded as a whole; only the ASCII skeleton is checked
    return value_grammar.is_valid(_NON_ASCII.sub("x", value))
