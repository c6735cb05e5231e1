from __future__ import annotations

from enum import Enum
from typing import Optional, Protocol, runtime_checkable


class Format(str, Enum):
    RAW = "raw"
    ENCODED = "encoded"


class Encoding(str, Enum):
    ASCII = "ASCII"
    UTF8 = "UTF-8"

    def __str__(self) -> str:
        return self.value


@runtime_checkable
class HeaderInterface(Protocol):
    """Capability set shared by every header kind (generic or structured)."""

    def get_field_name(self) -> Optional[str]: ...
    def get_field_value(self, fmt: Format = Format.RAW) -> Optional[str]: ...
    def set_encoding(self, encoding) -> None: ...
    def get_encoding(self) -> Encoding: ...
    def to_string(self) -> str: ...


class Unstructured:
    """Marker for headers whose value is free text (folded/encoded as a whole)."""
