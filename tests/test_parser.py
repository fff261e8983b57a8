import pytest

from inicfg import parser
from inicfg.errors import (
    EmptyInputError,
    ErrorKind,
    GlobalDataNotAllowedError,
    InvalidFormatError,
)

VALID = """
[section 1]
key key = value value
[section 2]
key1 = value1
key2 = value2
"""


def test_valid_document():
    assert parser.loads(VALID) == {
        "section 1": {"key key": "value value"},
        "section 2": {"key1": "value1", "key2": "value2"},
    }


def test_two_sections_example():
    cfg = parser.loads("[a]\nx = 1\n[b]\ny = 2\n")
    assert cfg == {"a": {"x": "1"}, "b": {"y": "2"}}


def test_comments_and_blank_lines_skipped():
    text = "; leading comment\n\n[db]\n  ; indented comment\nhost = localhost\n\n"
    assert parser.loads(text) == {"db": {"host": "localhost"}}


def test_values_are_trimmed_and_keep_extra_equals():
    cfg = parser.loads("[s]\n  url =  a=b=c  \n")
    assert cfg == {"s": {"url": "a=b=c"}}


def test_empty_value():
    assert parser.loads("[s]\nkey =\n") == {"s": {"key": ""}}


def test_last_write_wins():
    cfg = parser.loads("[s]\nk = 1\nk = 2\n")
    assert cfg == {"s": {"k": "2"}}


def test_repeated_section_is_reset():
    cfg = parser.loads("[s]\na = 1\n[t]\n[s]\nb = 2\n")
    assert cfg == {"s": {"b": "2"}, "t": {}}


def test_section_without_keys():
    assert parser.loads("[s]\n[t]") == {"s": {}, "t": {}}


def test_section_name_whitespace_preserved():
    cfg = parser.loads("[ spaced name ]\nk = v\n")
    assert cfg == {" spaced name ": {"k": "v"}}


def test_windows_line_endings():
    cfg = parser.loads("[s]\r\nk = v\r\n")
    assert cfg == {"s": {"k": "v"}}


def test_empty_section_name_allowed():
    assert parser.loads("[]\nk = v\n") == {"": {"k": "v"}}


def test_empty_section_name_rejected_in_strict_mode():
    with pytest.raises(InvalidFormatError) as exc_info:
        parser.loads("[]\nk = v\n", strict=True)
    assert exc_info.value.lineno == 1


@pytest.mark.parametrize("text", [";comment", "", "   ", "  ; note  "])
def test_single_blank_or_comment_line_is_empty(text):
    with pytest.raises(EmptyInputError) as exc_info:
        parser.loads(text)
    assert exc_info.value.kind is ErrorKind.EMPTY_INPUT


def test_only_comments_on_several_lines_is_not_empty():
    assert parser.loads(";a\n;b") == {}
    assert parser.loads("\n") == {}


def test_global_data_not_allowed():
    with pytest.raises(GlobalDataNotAllowedError):
        parser.loads("key key = value value")


def test_global_data_checked_before_separator():
    with pytest.raises(GlobalDataNotAllowedError) as exc_info:
        parser.loads("; header\nnovalue\n[s]\n")
    assert exc_info.value.lineno == 2


@pytest.mark.parametrize(
    "text",
    [
        "\n[section 1\nkey key = value value\n",
        "[s]\nbroken]\n",
        "[\n",
    ],
)
def test_malformed_section_header(text):
    with pytest.raises(InvalidFormatError):
        parser.loads(text)


def test_key_line_without_separator():
    with pytest.raises(InvalidFormatError) as exc_info:
        parser.loads("\n[section 1]\nkey key  value value\n")
    err = exc_info.value
    assert err.lineno == 3
    assert err.line == "key key  value value"
    assert "line 3" in str(err)
