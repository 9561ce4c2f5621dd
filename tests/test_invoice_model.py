"""Tests for the invoice model and its derived totals."""

import random
import re
from datetime import date

import pytest

from outvoice.models.invoice import (
    PLACEHOLDER_DESCRIPTION,
    Invoice,
    InvoiceItem,
    compute_subtotal,
    compute_tax,
    compute_total,
    default_due_date,
    generate_invoice_number,
)


def test_totals_for_single_line(make_invoice):
    invoice = make_invoice(
        items=[InvoiceItem(description="Design", quantity=10, unit_price=150)],
        tax_rate_percent=5,
    )

    assert invoice.subtotal == pytest.approx(1500.0)
    assert invoice.tax_amount == pytest.approx(75.0)
    assert invoice.total == pytest.approx(1575.0)


def test_negative_line_offsets_subtotal(make_invoice):
    invoice = make_invoice(
        items=[
            InvoiceItem(quantity=1, unit_price=100),
            InvoiceItem(quantity=-1, unit_price=100),
        ],
        tax_rate_percent=5,
    )

    assert invoice.subtotal == 0
    assert invoice.tax_amount == 0
    assert invoice.total == 0


def test_no_items_is_zero(make_invoice):
    invoice = make_invoice(items=[], tax_rate_percent=20)

    assert invoice.subtotal == 0.0
    assert invoice.total == 0.0


def test_totals_follow_item_edits(make_invoice):
    invoice = make_invoice(tax_rate_percent=0)
    assert invoice.total == pytest.approx(100.0)

    invoice.items[0].quantity = 3

    assert invoice.total == pytest.approx(150.0)


def test_compute_helpers():
    items = [
        InvoiceItem(quantity=2.5, unit_price=4),
        InvoiceItem(quantity=1, unit_price=1),
    ]

    subtotal = compute_subtotal(items)

    assert subtotal == pytest.approx(11.0)
    assert compute_tax(subtotal, 10) == pytest.approx(1.1)
    assert compute_total(subtotal, 1.1) == pytest.approx(12.1)
    assert compute_subtotal([]) == 0.0


def test_invoice_number_format():
    number = generate_invoice_number(date(2024, 12, 1), random.Random(7))

    assert re.fullmatch(r"INV-202412-\d{4}", number)


def test_invoice_number_is_zero_padded():
    class Fixed:
        def randrange(self, stop):
            return 42

    assert generate_invoice_number(date(2025, 3, 1), Fixed()) == "INV-202503-0042"


def test_add_and_remove_item(make_invoice):
    invoice = make_invoice(items=[])

    item = invoice.add_item()

    assert item.description == PLACEHOLDER_DESCRIPTION
    assert item.quantity == 1.0
    assert item.unit_price == 100.0
    assert invoice.find_item(item.id) is item
    assert invoice.remove_item(item.id) is True
    assert invoice.items == []
    assert invoice.remove_item(item.id) is False


def test_item_ids_are_unique():
    assert InvoiceItem().id != InvoiceItem().id


def test_default_due_date_is_thirty_days_later():
    assert default_due_date(date(2025, 1, 15)) == date(2025, 2, 14)


def test_searchable_terms_are_lowercase(make_invoice):
    invoice = make_invoice(client_name="Globex Corp", invoice_number="INV-1")

    assert invoice.searchable_terms() == ["globex corp", "inv-1"]


def test_invoice_equality_covers_items(make_invoice):
    first = make_invoice()
    second = make_invoice()
    assert first == second

    second.items[0].description = "Changed"

    assert first != second


def test_invoice_requires_dates():
    with pytest.raises(TypeError):
        Invoice(id="x", invoice_number="INV")
