import pytest

from mailfield.header.exceptions import InvalidFormat, InvalidName, InvalidValue, ParseError
from mailfield.header.generic import parse_line, split_header_line


def test_split_basic():
    assert split_header_line("Subject: hello world") == ("Subject", "hello world")


def test_split_only_on_first_colon():
    assert split_header_line("X-Time: 12:30:00") == ("X-Time", "12:30:00")


def test_split_left_trims_value_only():
    assert split_header_line("X-Pad:  \t padded  ") == ("X-Pad", "padded  ")


def test_split_keeps_folding():
    assert split_header_line("X-Long: one\r\n two") == ("X-Long", "one\r\n two")


def test_empty_value():
    assert split_header_line("X-Test:") == ("X-Test", "")
    field = parse_line("X-Test:")
    assert field.get_field_value() == ""


def test_no_colon():
    with pytest.raises(InvalidFormat):
        parse_line("NoColonHere")


def test_raw_name_is_not_normalized_before_validation():
    with pytest.raises(InvalidName):
        parse_line("X Invalid Name: v")


def test_empty_name_rejected():
    with pytest.raises(InvalidName):
        parse_line(": value")


@pytest.mark.parametrize("line", ["X-Test: bare\nlf", "X-Test: ctl\x01", "X-Test: 中文"])
def test_invalid_value(line):
    with pytest.raises(InvalidValue):
        parse_line(line)


def test_errors_share_parse_error_base():
    for line in ("nocolon", "bad name: v", "X: \x00"):
        with pytest.raises(ParseError):
            parse_line(line)
    with pytest.raises(ValueError):
        parse_line("nocolon")


def test_validate_only_keeps_original_text():
    assert split_header_line("Subject: Grüße", policy="validate-only") == ("Subject", "Grüße")
    field = parse_line("Subject: café", policy="validate-only")
    assert field.value == "café"
    assert field.get_encoding() == "UTF-8"


def test_propagate_returns_transliterated_text():
    assert split_header_line("Subject: Grüße", policy="propagate") == ("Subject", "Gruesse")
    field = parse_line("Subject: café", policy="propagate")
    assert field.value == "cafe"
    assert field.get_encoding() == "ASCII"


def test_accented_name_rejected_in_both_policies():
    with pytest.raises(InvalidName):
        parse_line("Naïve: x", policy="validate-only")
    field = parse_line("Naïve: x", policy="propagate")
    assert field.name == "Naive"


def test_policy_from_environment(monkeypatch):
    monkeypatch.setenv("MAILFIELD_TRANSLITERATION_POLICY", "propagate")
    assert split_header_line("Subject: été")[1] == "ete"
    monkeypatch.setenv("MAILFIELD_TRANSLITERATION_POLICY", "validate-only")
    assert split_header_line("Subject: été")[1] == "été"


def test_unknown_policy(monkeypatch):
    with pytest.raises(ValueError):
        split_header_line("Subject: x", policy="bogus")
    monkeypatch.setenv("MAILFIELD_TRANSLITERATION_POLICY", "bogus")
    with pytest.raises(ValueError):
        split_header_line("Subject: x")


def test_bytes_input():
    assert split_header_line(b"Subject: caf\xc3\xa9") == ("Subject", "café")
    with pytest.raises(InvalidValue):
        split_header_line(b"Subject: caf\xe9")
    with pytest.raises(InvalidName):
        split_header_line(b"Subj\xe9ct: cafe")


def test_parse_decodes_encoded_words():
    field = parse_line("Subject: =?UTF-8?Q?caf=C3=A9?=")
    assert field.value == "café"
    field = parse_line("Subject: =?utf-8?b?Y2Fmw6k=?=")
    assert field.value == "café"


def test_parse_unfolds_value():
    field = parse_line("X-Long: one\r\n two")
    assert field.value == "one two"


def test_parse_normalizes_name():
    assert parse_line("content-type: text/plain").name == "Content-Type"


def test_validate_only_decodes_encoded_words_next_to_raw_text():
    field = parse_line("Subject: café =?utf-8?q?na=C3=AFve?=", policy="validate-only")
    assert field.value == "café naïve"
    field = parse_line("Subject: =?utf-8?q?na=C3=AFve?= Grüße", policy="validate-only")
    assert field.value == "naïve Grüße"
