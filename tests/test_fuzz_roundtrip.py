from hypothesis import given, strategies as st

from mailfield.header.generic import HeaderField, parse_line
from mailfield.header.interface import Encoding

# Already-normalized names: capitalized alphanumeric words joined by dashes
normalized_names = st.from_regex(r"[A-Z][a-z0-9]{0,8}(-[A-Z][a-z0-9]{0,8}){0,3}", fullmatch=True)

value_chars = st.sampled_from(
    list("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")
    + list(" .,;:!?()<>@\"'/_-+=*&%$#~[]{}|")
    + list("éèüößÆœł中文ЖΩ")
)
# no leading whitespace (the parser left-trims) and no encoded-word opener in plain text
values = st.text(alphabet=value_chars, max_size=200).filter(
    lambda s: s == s.lstrip() and "=?" not in s
)


@given(name=normalized_names, value=values)
def test_to_string_parse_round_trip(name, value):
    field = HeaderField(name, value)
    line = field.to_string()
    assert line.isascii()
    parsed = parse_line(line)
    assert parsed.name == field.name
    assert parsed.value == value


@given(normalized_names)
def test_name_normalization_idempotent(name):
    field = HeaderField(name)
    assert field.name == name
    field.set_field_name(field.name)
    assert field.name == name


@given(values, values)
def test_set_value_resets_encoding(first, second):
    field = HeaderField("X-Fuzz", first)
    field.set_encoding("UTF-8")
    field.get_encoding()
    field.set_field_value(second)
    expected = Encoding.ASCII if second.isascii() else Encoding.UTF8
    assert field.get_encoding() == expected
