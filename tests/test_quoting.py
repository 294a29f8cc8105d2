from __future__ import annotations

import pytest

from curl_parser.errors import MalformedArgumentError
from curl_parser.quoting import (
    argument_value,
    double_quoted,
    is_curl_command,
    line_continuation,
    quoted,
    quoted_values,
    single_quoted,
    skip_line_continuation,
    strip_curl_prefix,
    unquoted,
)

PAYLOAD = " hhdf,\\fjsdfjl**''"


def _swap_quotes(text: str) -> str:
    return text.translate(str.maketrans({'"': "'", "'": '"'}))


def test_double_quoted_skips_surrounding_whitespace():
    rest, value = double_quoted(f'\t \r  \n \n "{PAYLOAD}" woaini " \r \n \'nmihao\'')
    assert value == PAYLOAD
    assert rest.startswith("woaini")


def test_single_quoted_mirrors_double_quoted():
    text = _swap_quotes(f'\t \r  \n \n "{PAYLOAD}" woaini')
    rest, value = single_quoted(text)
    assert value == _swap_quotes(PAYLOAD)
    assert rest == "woaini"


def test_unterminated_quote_fails():
    with pytest.raises(MalformedArgumentError):
        double_quoted('  "never closed')
    with pytest.raises(MalformedArgumentError):
        single_quoted("  'never closed")


def test_quoted_picks_the_style_that_opens_the_argument():
    _, value = quoted(f'\t \n "{PAYLOAD}" woaini " \r \n \'nmihao\'')
    assert value == PAYLOAD

    _, value = quoted("'a \"b\" c' rest")
    assert value == 'a "b" c'


def test_quoted_requires_a_quote():
    with pytest.raises(MalformedArgumentError):
        quoted("bare-word")


def test_unquoted_stops_at_whitespace_and_backslash():
    rest, value = unquoted("  name=value  -H 'Accept: */*'")
    assert value == "name=value"
    assert rest == "  -H 'Accept: */*'"

    rest, value = unquoted("@payload.json\\\n")
    assert value == "@payload.json"
    assert rest == "\\\n"


def test_unquoted_does_not_swallow_an_unclosed_quote():
    with pytest.raises(MalformedArgumentError):
        unquoted('"abc')


def test_argument_value_prefers_quotes_then_bare():
    assert argument_value(' "a b" c') == ("c", "a b")
    assert argument_value(" 'a b' c") == ("c", "a b")
    assert argument_value(" a=b c") == (" c", "a=b")
    with pytest.raises(MalformedArgumentError):
        argument_value("   ")


def test_quoted_values_collects_consecutive_arguments():
    rest, values = quoted_values(f'\t \r  \n \n "{PAYLOAD}"   \r \n \'nmihao\'')
    assert values == [PAYLOAD, "nmihao"]
    assert rest == ""

    rest, values = quoted_values("'one' \"two\" three")
    assert values == ["one", "two"]
    assert rest == "three"


def test_quoted_values_allows_zero_matches():
    assert quoted_values("nothing quoted") == ("nothing quoted", [])


def test_line_continuation():
    rest, marker = line_continuation("  \\ \r\n  -H 'a: b'")
    assert marker == "  \\ \r\n  "
    assert rest == "-H 'a: b'"
    with pytest.raises(MalformedArgumentError):
        line_continuation("-H 'a: b'")


def test_skip_line_continuation_is_optional():
    assert skip_line_continuation(" \\\n--insecure") == "--insecure"
    assert skip_line_continuation(" --insecure") == " --insecure"


def test_is_curl_command_is_case_insensitive():
    cmd = "\t \r  \n Curl asdjfnv\n"
    assert is_curl_command(cmd)
    assert is_curl_command(cmd.strip().upper())
    assert not is_curl_command("wget https://example.com")
    assert not is_curl_command("")


def test_strip_curl_prefix():
    stripped = strip_curl_prefix("\t \r  \n Curl asdjfnv\n")
    assert stripped == " asdjfnv\n"
    assert strip_curl_prefix("  wget x") == "wget x"
