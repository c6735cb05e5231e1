"""Error types raised while parsing, validating and serializing header fields."""


class HeaderError(Exception):
    """Base for every header field failure."""


class ParseError(HeaderError, ValueError):
    """A raw line, name or value was rejected."""


class InvalidFormat(ParseError):
    """The line has no ``name:value`` separator."""


class InvalidName(ParseError):
    """The field name is empty or not printable US-ASCII without colon."""


class InvalidValue(ParseError):
    """The field value fails the value grammar or cannot be transport encoded."""


class MissingName(HeaderError, RuntimeError):
    """Serialization attempted before a field name was set."""
