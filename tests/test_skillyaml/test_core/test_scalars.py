import pytest

from skillyaml.core.scalars import coerce, encode, is_loose_numeric


@pytest.mark.parametrize("text, expected", [
    ("42", 42),
    ("-7", -7),
    ("0", 0),
])
def test_coerce_integer(text, expected):
    value = coerce(text)
    assert value == expected
    assert type(value) is int


@pytest.mark.parametrize("text, expected", [
    ("3.5", 3.5),
    ("-0.25", -0.25),
])
def test_coerce_float(text, expected):
    value = coerce(text)
    assert value == expected
    assert type(value) is float


def test_coerce_boolean():
    assert coerce("true") is True
    assert coerce("false") is False
    assert coerce("True") == "True"


def test_quoted_text_stays_string():
    assert coerce("'42'") == "42"
    assert coerce('"3.5"') == "3.5"
    assert coerce("'true'") == "true"
    assert coerce("''") == ""


def test_blank_is_zero():
    # Long-standing reader behavior that existing files depend on
    assert coerce("") == 0
    assert type(coerce("")) is int
    assert coerce("   ") == 0


def test_other_numeric_text_is_float():
    assert coerce("1e3") == 1000.0
    assert type(coerce("1e3")) is float
    assert coerce("1e-05") == 0.00001
    assert coerce("5.") == 5.0


def test_padded_number():
    assert coerce(" 5") == 5
    assert type(coerce(" 5")) is int
    assert coerce(" 2.5") == 2.5


def test_non_decimal_spellings_stay_strings():
    assert coerce("inf") == "inf"
    assert coerce("nan") == "nan"
    assert coerce("1_000") == "1_000"
    assert coerce("1.5.2") == "1.5.2"


def test_plain_text():
    assert coerce("Dirt") == "Dirt"


def test_only_first_escaped_quote_is_restored():
    assert coerce(r"it\'s") == "it's"
    assert coerce(r"'a \'b\' c'") == r"a 'b\' c"


def test_is_loose_numeric():
    assert is_loose_numeric("")
    assert is_loose_numeric("12")
    assert is_loose_numeric("1e3")
    assert is_loose_numeric(" -4.5 ")
    assert not is_loose_numeric("abc")
    assert not is_loose_numeric("Infinity")


def test_encode():
    assert encode("a") == '"a"'
    assert encode(5) == "5"
    assert encode(True) == "true"
    assert encode(3.0) == "3.0"
    assert encode('say "hi"') == '"say \\"hi\\""'
