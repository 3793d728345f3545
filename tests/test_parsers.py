import pytest
from sdp_repeat_parser import parsers as P


# Natural


def test_natural_parses_whole_number():
    assert P.natural.parse("42") == ("", 42)


def test_natural_returns_unconsumed_tail():
    assert P.natural.parse("25h") == ("h", 25)


def test_natural_accepts_plus_sign():
    assert P.natural.parse("+7") == ("", 7)


def test_natural_does_not_skip_whitespace():
    assert not P.natural.matches(" 42")


def test_natural_fails_on_negative_number():
    with pytest.raises(P.SimpleParseError) as e:
        P.natural.parse("-1")
    assert e.value.message == "Expected a non-negative integer, got: '-1'"


def test_natural_fails_on_empty_input():
    assert not P.natural.matches("")


# Duration


@pytest.mark.parametrize(
    "token, seconds",
    [
        ("0", 0),
        ("7d", 604800),
        ("1h", 3600),
        ("25h", 90000),
        ("90m", 5400),
        ("15s", 15),
        ("0d", 0),
    ],
)
def test_duration_expands_units_to_seconds(token, seconds):
    assert P.duration.parse(token) == ("", seconds)


def test_duration_rejects_bare_number_other_than_zero():
    with pytest.raises(P.UnitError) as e:
        P.duration.parse("3")
    assert e.value.unit == ""


def test_duration_rejects_unknown_unit():
    with pytest.raises(P.UnitError) as e:
        P.duration.parse("1x")
    assert e.value == P.UnitError("x")
    assert e.value.describe() == "Unknown time unit: 'x'"


def test_duration_rejects_doubled_unit():
    with pytest.raises(P.UnitError) as e:
        P.duration.parse("1hh")
    assert e.value.unit == "hh"


def test_duration_reports_whole_token_without_magnitude():
    with pytest.raises(P.UnitError) as e:
        P.duration.parse("d")
    assert e.value.unit == "d"


def test_duration_rejects_negative_magnitude():
    with pytest.raises(P.UnitError) as e:
        P.duration.parse("-1h")
    assert e.value.unit == "-1h"


# Descriptions


def test_token_descriptions():
    assert P.natural.description() == P.OpaqueDescription("non-negative integer")
    assert P.duration.description() == P.OpaqueDescription("integer with a unit suffix (d/h/m/s)")


# Long digit runs


def test_natural_parses_digits_beyond_int_conversion_limit():
    digits = "1" + "0" * 5000
    assert P.natural.parse(digits + "h") == ("h", 10 ** 5000)


def test_duration_expands_very_long_magnitude():
    assert P.duration.parse("9" * 1300 + "m") == ("", (10 ** 1300 - 1) * 60)
