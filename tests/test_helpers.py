"""Tests for parsing and formatting helpers."""

from datetime import date, datetime

import pytest

from outvoice.lib import objects
from outvoice.utils import (
    address_lines,
    format_currency,
    format_date,
    format_quantity,
    matches_query,
    parse_date,
    to_number,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-12-25", date(2024, 12, 25)),
        ("2024-12-25T23:00:00.000Z", date(2024, 12, 25)),
        ("12/25/2024", date(2024, 12, 25)),
        ("12/25/24", date(2024, 12, 25)),
        (datetime(2024, 12, 25, 8), date(2024, 12, 25)),
        (date(2024, 12, 25), date(2024, 12, 25)),
        ("", None),
        ("tomorrow", None),
        (None, None),
        (20241225, None),
    ],
)
def test_parse_date(value, expected):
    assert parse_date(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("12.5", 12.5),
        (" 3 ", 3.0),
        ("1,200", 1200.0),
        (7, 7.0),
        ("abc", 0.0),
        ("", 0.0),
        (None, 0.0),
        (True, 0.0),
        ("nan", 0.0),
        (float("inf"), 0.0),
        ("-4", -4.0),
    ],
)
def test_to_number(value, expected):
    assert to_number(value) == expected


@pytest.mark.parametrize(
    "value, currency, expected",
    [
        (1575, "USD", "$1,575.00"),
        (-100, "USD", "-$100.00"),
        (1234.5, "EUR", "€1,234.50"),
        (99.999, "GBP", "£100.00"),
        (1500, "JPY", "¥1,500"),
        (-0.001, "USD", "$0.00"),
        (1, "XXX", "XXX 1.00"),
    ],
)
def test_format_currency(value, currency, expected):
    assert format_currency(value, currency) == expected


def test_format_date():
    assert format_date(date(2025, 1, 5)) == "Jan 05, 2025"
    assert format_date(None) == "N/A"


def test_format_quantity():
    assert format_quantity(10.0) == "10"
    assert format_quantity(2.5) == "2.5"


def test_address_lines():
    assert address_lines(" 1 Road \n\n  Town\n") == ["1 Road", "Town"]
    assert address_lines("") == []


def test_matches_query(make_invoice):
    invoice = make_invoice(client_name="Globex Corp", invoice_number="INV-202501-0042")

    assert matches_query(invoice, "")
    assert matches_query(invoice, "  GLOBEX ")
    assert matches_query(invoice, "0042")
    assert not matches_query(invoice, "initech")


def test_to_json_handles_dates():
    assert objects.to_json({"when": date(2025, 1, 2)}) == '{"when": "2025-01-02"}'


def test_from_json_blank_is_none():
    assert objects.from_json(None) is None
    assert objects.from_json("  ") is None
    assert objects.from_json(b"[1]") == [1]


def test_to_number_integer_too_large_for_float():
    assert to_number(10**400) == 0.0
    assert to_number(-(10**400)) == 0.0
