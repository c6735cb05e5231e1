import pytest

from mailfield.header import name as header_name
from mailfield.header import value as header_value
from mailfield.header.exceptions import InvalidName, InvalidValue
from mailfield.header.mime import is_printable
from mailfield.header.translit import TRANSLITERATION, transliterate
from mailfield.header.wrap import can_be_encoded


@pytest.mark.parametrize("name", ["Subject", "X-Custom-Header", "a!#$%&'*+.^_`|~"])
def test_name_valid(name):
    assert header_name.is_valid(name)


@pytest.mark.parametrize("name", ["", "X Test", "X:Test", "Café", "X\tTest", "X\x7fTest"])
def test_name_invalid(name):
    assert not header_name.is_valid(name)
    with pytest.raises(InvalidName):
        header_name.assert_valid(name)


def test_name_filter_drops_illegal_chars():
    assert header_name.filter("X Te:sté") == "XTest"


@pytest.mark.parametrize("value", ["", "plain text", "a\tb", "folded\r\n continuation", "tab\r\n\tfold"])
def test_value_valid(value):
    assert header_value.is_valid(value)


@pytest.mark.parametrize(
    "value",
    ["bare\nlf", "bare\rcr", "crlf\r\nnofold", "trailing\r\n", "café", "bell\x07", "del\x7f"],
)
def test_value_invalid(value):
    assert not header_value.is_valid(value)
    with pytest.raises(InvalidValue):
        header_value.assert_valid(value)


def test_value_filter_keeps_folding():
    assert header_value.filter("a\x00b\r\n c\rd\ne\x7f") == "ab\r\n cde"


def test_is_printable():
    assert is_printable("Hello, World ~")
    assert is_printable("")
    assert not is_printable("tab\there")
    assert not is_printable("café")


def test_transliteration_table():
    assert len(TRANSLITERATION) == 120
    assert transliterate("ÀÄßŒ") == "AAEssOE"
    assert transliterate("Grüße aus Köln") == "Gruesse aus Koeln"
    assert transliterate("中") == "中"
    with pytest.raises(TypeError):
        TRANSLITERATION["À"] = "B"  # type: ignore[index]


@pytest.mark.parametrize("value", ["plain", "café", "中文", "a\tb", "fold\r\n ok", ""])
def test_can_be_encoded(value):
    assert can_be_encoded(value)


@pytest.mark.parametrize("value", ["lone \udc80 surrogate", "bare\nlf", "ctl\x01", "del\x7f", "cr\r"])
def test_cannot_be_encoded(value):
    assert not can_be_encoded(value)
