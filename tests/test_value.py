import pytest

from sqltree.value import (
    Boolean,
    DateTimeField,
    DoubleQuotedString,
    HexStringLiteral,
    Interval,
    NationalStringLiteral,
    Null,
    Number,
    Placeholder,
    SingleQuotedString,
    TrimWhereField,
    escape_single_quote_string,
)


@pytest.mark.parametrize("text", ["", "plain", "it's", "''", "a'b'c'"])
def test_escape_round_trip(text):
    escaped = escape_single_quote_string(text)
    assert escaped.count("'") == 2 * text.count("'")
    assert escaped.replace("''", "'") == text


def test_number_display():
    assert str(Number("5")) == "5"
    assert str(Number("5", True)) == "5L"


def test_single_quoted_string_escapes():
    text = "it's"
    rendered = str(SingleQuotedString(text))
    assert rendered == "'" + escape_single_quote_string(text) + "'"
    assert str(SingleQuotedString("data.csv")) == "'data.csv'"


def test_hex_literal():
    assert str(HexStringLiteral("deadBEEF")) == "X'deadBEEF'"


def test_national_and_double_quoted():
    assert str(NationalStringLiteral("abc")).startswith("N'")
    assert str(NationalStringLiteral("abc"))[2:-1] == "abc"
    assert str(DoubleQuotedString("es_ES")) == '"es_ES"'


def test_boolean_null_placeholder():
    assert str(Boolean(True)) == "true"
    assert str(Boolean(False)) == "false"
    assert str(Null()) == "NULL"
    assert str(Placeholder("$1")) == "$1"


def test_values_compare_and_hash():
    assert Number("1") == Number("1")
    assert Number("1") != Number("1", True)
    assert len({SingleQuotedString("a"), SingleQuotedString("a"), Null(), Null()}) == 2


def test_interval_second_with_precisions():
    iv = Interval("1", DateTimeField.SECOND, 5, None, 3)
    assert str(iv) == "INTERVAL '1' SECOND (5, 3)"


def test_interval_second_with_last_field_is_error():
    valid = Interval("1", DateTimeField.SECOND, 5, None, 3)
    assert str(valid) == "INTERVAL '1' SECOND (5, 3)"
    with pytest.raises(ValueError):
        str(Interval("1", DateTimeField.SECOND, 5, DateTimeField.MINUTE, 3))


def test_interval_range():
    iv = Interval("1-1", DateTimeField.YEAR, last_field=DateTimeField.MONTH)
    assert str(iv) == "INTERVAL '1-1' YEAR TO MONTH"


def test_interval_value_only_escapes():
    iv = Interval("it's")
    assert str(iv) == "INTERVAL '" + escape_single_quote_string("it's") + "'"


def test_datetime_field_display():
    assert str(Interval("1", DateTimeField.TIMEZONE_HOUR)) == "INTERVAL '1' TIMEZONE_HOUR"
    assert str(Interval("1", DateTimeField.MILLENIUM)) == "INTERVAL '1' MILLENIUM"
    assert [DateTimeField(f.value) for f in DateTimeField] == list(DateTimeField)
    assert all(str(f) == f.name for f in DateTimeField)


def test_trim_where_field_display():
    assert [TrimWhereField(f.value) for f in TrimWhereField] == list(TrimWhereField)
    assert [str(f) for f in TrimWhereField] == ["BOTH", "LEADING", "TRAILING"]