from datetime import date

from pharmavault.utils.parsing import (
    celsius_to_fahrenheit,
    format_measurement,
    format_rupees,
    leading_number,
    parse_date,
    parse_float_token,
    parse_int_token,
    round_half_up,
)


def test_parse_int_token_valid():
    assert parse_int_token("72") == 72


def test_parse_int_token_rejects_non_digits():
    assert parse_int_token("7.2") is None
    assert parse_int_token(None) is None


def test_parse_float_token():
    assert parse_float_token("98.6") == 98.6
    assert parse_float_token("abc") is None


def test_leading_number():
    assert leading_number("500mg") == 500.0
    assert leading_number("Take 2.5 ml") == 2.5
    assert leading_number("as needed") is None


def test_celsius_to_fahrenheit():
    assert celsius_to_fahrenheit(100) == 212
    assert celsius_to_fahrenheit(0) == 32


def test_parse_date_formats():
    assert parse_date("2024-01-15") == date(2024, 1, 15)
    assert parse_date("20240115") == date(2024, 1, 15)
    assert parse_date("15/01/2024") == date(2024, 1, 15)


def test_parse_date_invalid_returns_none():
    assert parse_date("not-a-date") is None
    assert parse_date(None) is None


def test_format_measurement():
    assert format_measurement(None) == "-"
    assert format_measurement(75.0) == "75"
    assert format_measurement(98.60000000000001) == "98.6"


def test_parse_int_token_rejects_oversized_tokens():
    assert parse_int_token("999999") == 999999
    assert parse_int_token("1234567") is None
    assert parse_int_token("9" * 5000) is None


def test_parse_float_token_rejects_non_finite_values():
    assert parse_float_token("nan") is None
    assert parse_float_token("inf") is None
    assert parse_float_token("9" * 400 + ".5") is None


def test_round_half_up():
    assert round_half_up(62.5) == 63
    assert round_half_up(62.4) == 62
    assert round_half_up(0.5) == 1


def test_format_rupees():
    assert format_rupees(25.5) == "₹25.5"
    assert format_rupees(24.0) == "₹24"
    assert format_rupees(1_000_000) == "₹1000000"
