import pytest

from pypipex.printf import printf, sprintf


def test_plain_text_passes_through():
    assert sprintf("hello world") == "hello world"


def test_percent_literal():
    assert sprintf("100%%") == "100%"


def test_char_from_str_and_int():
    assert sprintf("%c", "Z") == "Z"
    assert sprintf("%c", ord("q")) == "q"


def test_string_and_null_string():
    assert sprintf("[%s]", "abc") == "[abc]"
    assert sprintf("%s", None) == "(null)"


@pytest.mark.parametrize("n", [0, 1, -1, 42, 2147483647, -2147483648])
def test_decimal_round_trip(n):
    assert int(sprintf("%d", n)) == n
    assert sprintf("%i", n) == sprintf("%d", n)


def test_decimal_wraps_to_int32():
    assert sprintf("%d", 2**31) == "-2147483648"
    assert int(sprintf("%d", 2**32 + 5)) == 5


def test_unsigned_wraps():
    assert int(sprintf("%u", -1)) == 2**32 - 1
    assert int(sprintf("%u", 123)) == 123


@pytest.mark.parametrize("n", [0, 9, 10, 15, 16, 255, 4096, 2**32 - 1])
def test_hex_round_trip(n):
    assert int(sprintf("%x", n), 16) == n
    assert sprintf("%X", n) == sprintf("%x", n).upper()


def test_hex_of_negative_is_twos_complement():
    assert int(sprintf("%x", -1), 16) == 2**32 - 1


def test_hex_lowercase_digits():
    assert sprintf("%x", 255) == "ff"


def test_pointer():
    text = sprintf("%p", 0x1234)
    assert text.startswith("0x")
    assert int(text, 16) == 0x1234


def test_null_pointer():
    assert sprintf("%p", None) == "(nil)"
    assert sprintf("%p", 0) == "(nil)"


def test_pointer_of_object_uses_identity():
    obj = object()
    assert int(sprintf("%p", obj), 16) == id(obj)


def test_mixed_format():
    assert sprintf("%s=%d (%c)", "x", 7, "y") == "x=7 (y)"


def test_extra_arguments_ignored():
    assert sprintf("%d", 1, 2, 3) == "1"


@pytest.mark.parametrize("fmt", ["%", "abc%", "%q", "%5d", "%l"])
def test_invalid_format_raises(fmt):
    with pytest.raises(ValueError):
        sprintf(fmt, 1)


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        sprintf("%d %d", 1)


def test_wrong_type_raises():
    with pytest.raises(TypeError):
        sprintf("%d", "1")
    with pytest.raises(TypeError):
        sprintf("%s", 5)


def test_printf_writes_and_counts(capsys):
    count = printf("%s:%d\n", "abc", 12)
    out = capsys.readouterr().out
    assert out == "abc:12\n"
    assert count == len(out)


def test_printf_error_writes_nothing(capsys):
    with pytest.raises(ValueError):
        printf("ok %z")
    assert capsys.readouterr().out == ""