"""Generic (unstructured) header field: ``Name: Value``.

Parsing goes line -> split_header_line -> mime_decode_value -> HeaderField;
serialization goes HeaderField -> wrap -> ``Name: EncodedValue``.
"""
from __future__ import annotations

from typing import Optional, Tuple, Union

from . import name as name_grammar
from . import value as value_grammar
from .exceptions import InvalidFormat, InvalidName, InvalidValue, MissingName, ParseError
from .interface import Encoding, Format, Unstructured
from .mime import is_printable
from .translit import transliterate
from .wrap import can_be_encoded, mime_decode_value, wrap
from ..config import POLICY_PROPAGATE, TRANSLITERATION_POLICIES, transliteration_policy
from ..obs.prom import observe_parse, observe_render
from ..utils.logging import get_logger

log = get_logger()

# leading whitespace removed from a split value
_LTRIM = " \t\n\r\0\x0b"

_REASONS = {
    InvalidFormat: "invalid_format",
    InvalidName: "invalid_name",
    InvalidValue: "invalid_value",
}


def _to_text(line: Union[str, bytes]) -> Tuple[str, bool]:
    """Return (text, is_utf8). Undecodable bytes survive as surrogates."""
    if isinstance(line, bytes):
        try:
            return line.decode("utf-8"), True
        except UnicodeDecodeError:
            return line.decode("utf-8", "surrogateescape"), False
    return line, True


def split_header_line(line: Union[str, bytes], policy: Optional[str] = None) -> Tuple[str, str]:
    """Split a raw header line into ``(name, value)``.

    Non-ASCII UTF-8 lines are checked against a transliterated copy (so
    ``Subject: café`` passes the ASCII value grammar). With the default
    ``validate-only`` policy the original text is returned; with ``propagate``
    the transliterated text is.
    """
    if policy is None:
        policy = transliteration_policy()
    elif policy not in TRANSLITERATION_POLICIES:
        raise ValueError(f"unknown transliteration policy: {policy}")

    text, is_utf8 = _to_text(line)
    checked = text
    if is_utf8 and not text.isascii():
        checked = transliterate(text)

    parts = checked.split(":", 1)
    if len(parts) != 2:
        raise InvalidFormat('Header must match with the format "name:value"')
    if not name_grammar.is_valid(parts[0]):
        raise InvalidName("Invalid header name detected")
    if not value_grammar.is_valid(parts[1]):
        raise InvalidValue("Invalid header value detected")

    if policy != POLICY_PROPAGATE:
        # transliteration never adds or removes a colon, so the split lines up
        parts = text.split(":", 1)
    return parts[0], parts[1].lstrip(_LTRIM)


class HeaderField(Unstructured):
    """One unstructured header field.

    ``name`` is normalized to Title-Case-With-Dashes, ``value`` is kept raw
    (unencoded, possibly non-ASCII) and the value's encoding is classified
    lazily and cached until the value changes.
    """

    def __init__(self, name: Optional[str] = None, value: Optional[str] = None):
        self._name: Optional[str] = None
        self._value: Optional[str] = None
        self._encoding: Optional[Encoding] = None
        if name is not None:
            self.set_field_name(name)
        if value is not None:
            self.set_field_value(value)

    @classmethod
    def from_string(cls, line: Union[str, bytes], policy: Optional[str] = None) -> "HeaderField":
        name, value = split_header_line(line, policy)
        return cls(name, mime_decode_value(value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, value={self._value!r})"

    def __str__(self) -> str:
        return self.to_string()

    # -- name -------------------------------------------------------------

    def set_field_name(self, name: str) -> None:
        if not isinstance(name, str) or not name:
            raise InvalidName("Header name must be a string")
        # underscores and dashes both become word separators
        words = name.replace("_", " ").replace("-", " ").split(" ")
        normalized = "-".join(w[:1].upper() + w[1:] for w in words)
        if not name_grammar.is_valid(normalized):
            raise InvalidName(
                "Header name must be composed of printable US-ASCII characters, except colon."
            )
        self._name = normalized

    def get_field_name(self) -> Optional[str]:
        return self._name

    @property
    def name(self) -> Optional[str]:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        self.set_field_name(name)

    # -- value ------------------------------------------------------------

    def set_field_value(self, value) -> None:
        if value is None:
            value = ""
        elif isinstance(value, bytes):
            value = value.decode("utf-8", "surrogateescape")
        value = str(value)
        if not can_be_encoded(value):
            raise InvalidValue(
                "Header value must be composed of printable US-ASCII characters and valid folding sequences."
            )
        self._value = value
        self._encoding = None

    def get_field_value(self, fmt: Format = Format.RAW) -> Optional[str]:
        if fmt == Format.ENCODED:
            return wrap(self._value or "", self, self._classify())
        return self._value

    @property
    def value(self) -> Optional[str]:
        return self._value

    @value.setter
    def value(self, value) -> None:
        self.set_field_value(value)

    # -- encoding ---------------------------------------------------------

    def _classify(self) -> Encoding:
        if self._encoding is not None:
            return self._encoding
        return Encoding.ASCII if is_printable(self._value or "") else Encoding.UTF8

    def set_encoding(self, encoding) -> None:
        """Request an encoding; unusable requests fall back to lazy detection."""
        if encoding == self._encoding:
            return
        if encoding is None:
            self._encoding = None
            return
        if isinstance(encoding, str):
            requested = encoding.upper()
            if requested == Encoding.UTF8.value:
                self._encoding = Encoding.UTF8
                return
            if requested == Encoding.ASCII.value and is_printable(self._value or ""):
                self._encoding = Encoding.ASCII
                return
        self._encoding = None

    def get_encoding(self) -> Encoding:
        if self._encoding is None:
            self._encoding = self._classify()
        return self._encoding

    # -- serialization ----------------------------------------------------

    def to_string(self) -> str:
        name = self.get_field_name()
        if not name:
            raise MissingName("Header name is not set, use set_field_name()")
        encoding = self._classify()
        value = self.get_field_value(Format.ENCODED)
        observe_render(encoding.value)
        return f"{name}: {value}"


def parse_line(line: Union[str, bytes], policy: Optional[str] = None) -> HeaderField:
    """Parse one raw header line into a validated :class:`HeaderField`."""
    try:
        field = HeaderField.from_string(line, policy)
    except ParseError as e:
        reason = _REASONS.get(type(e), "invalid")
        log.debug("header line rejected (%s): %s", reason, e)
        observe_parse(ok=False, reason=reason)
        raise
    observe_parse(ok=True, value_bytes=len(field.value.encode("utf-8")))
    return field
