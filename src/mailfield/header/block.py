"""Helpers for a whole header section (several ``Name: Value`` lines)."""
from __future__ import annotations

from typing import Iterable, List

from .exceptions import InvalidFormat
from .generic import HeaderField, parse_line
from .wrap import EOL


def split_header_block(text: str) -> List[str]:
    """Split a header section into logical lines, keeping folds as CRLF + WSP.

    Parsing stops at the first empty line (the header/body separator).
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    lines: List[str] = []
    for physical in text.split("\n"):
        if physical == "":
            break
        if physical[0] in (" ", "\t"):
            if not lines:
                raise InvalidFormat("Header block starts with a continuation line")
            lines[-1] = lines[-1] + EOL + physical
            continue
        lines.append(physical)
    return lines


def parse_headers(text: str) -> List[HeaderField]:
    return [parse_line(line) for line in split_header_block(text)]


def render_headers(fields: Iterable[HeaderField]) -> str:
    return "".join(f.to_string() + EOL for f in fields)
