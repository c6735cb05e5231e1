from pydantic import BaseModel
from typing import Optional, Literal

from .exceptions import MissingName
from .generic import HeaderField


class HeaderSnapshot(BaseModel):
    name: Optional[str] = None
    value: Optional[str] = None
    encoding: Literal["ASCII", "UTF-8"]
    wire: Optional[str] = None


def snapshot(field: HeaderField) -> HeaderSnapshot:
    try:
        wire = field.to_string()
    except MissingName:
        wire = None
    return HeaderSnapshot(
        name=field.get_field_name(),
        value=field.get_field_value(),
        encoding=field.get_encoding().value,
        wire=wire,
    )
