import pytest

from minitalk.printf import printf, sprintf


def test_plain_text_is_copied():
    assert sprintf("Server started.\n") == "Server started.\n"


def test_server_banner():
    assert sprintf("Server started. PID: %d\n", 4242) == "Server started. PID: 4242\n"


def test_percent_literal():
    assert sprintf("100%%") == "100%"


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -2147483647, 2147483647])
def test_signed_decimal_matches_str(n):
    assert sprintf("%d", n) == str(n)
    assert sprintf("%i", n) == str(n)


def test_signed_wraps_to_32_bits():
    assert sprintf("%d", 2**31) == "-2147483648"


def test_unsigned_of_negative_wraps():
    assert int(sprintf("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 9, 255, 4096, 2**32 - 1])
def test_hex_round_trip(n):
    assert int(sprintf("%x", n), 16) == n
    assert sprintf("%X", n) == sprintf("%x", n).upper()


def test_hex_digits_lowercase_and_uppercase():
    assert sprintf("%x", 255) == "ff"
    assert sprintf("%X", 255) == "FF"


def test_string_and_null_string():
    assert sprintf("[%s]", "abc") == "[abc]"
    assert sprintf("%s", None) == "(null)"


def test_string_stops_at_nul():
    assert sprintf("%s", "ab\0cd") == "ab"


def test_char_from_int_and_str():
    assert sprintf("%c%c", ord("h"), "i") == "hi"


def test_pointer_null_and_value():
    assert sprintf("%p", 0) == "(nil)"
    assert sprintf("%p", None) == "(nil)"
    out = sprintf("%p", 0xDEAD)
    assert out.startswith("0x")
    assert int(out[2:], 16) == 0xDEAD


def test_unknown_conversion_consumes_nothing():
    assert sprintf("a%qb%d", 5) == "ab5"


def test_trailing_percent_is_ignored():
    assert sprintf("abc%") == "abc"


def test_extra_arguments_ignored():
    assert sprintf("%d", 1, 2, 3) == "1"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_wrong_type_raises():
    with pytest.raises(TypeError):
        sprintf("%d", "x")
    with pytest.raises(TypeError):
        sprintf("%s", 3)


def test_char_with_long_string_raises():
    with pytest.raises(ValueError):
        sprintf("%c", "ab")


def test_printf_writes_and_counts(capsys):
    count = printf("PID: %d %s%%\n", 99, "ok")
    out = capsys.readouterr().out
    assert out == sprintf("PID: %d %s%%\n", 99, "ok")
    assert count == len(out)


def test_printf_nil_pointer_count(capsys):
    count = printf("%p", 0)
    assert capsys.readouterr().out == "(nil)"
    assert count == len("(nil)")