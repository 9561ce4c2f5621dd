"""Shared fixtures for the OutVoice test suite."""

import random
from datetime import date, datetime

import pytest

from outvoice.models.invoice import Invoice, InvoiceItem
from outvoice.services import MemoryInvoiceStore
from outvoice.session import SessionController

FIXED_NOW = datetime(2025, 3, 14, 9, 30)


@pytest.fixture
def store() -> MemoryInvoiceStore:
    return MemoryInvoiceStore()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def session(store, clock, rng) -> SessionController:
    controller = SessionController(store, clock=clock, rng=rng)
    controller.start()
    return controller


@pytest.fixture
def make_invoice():
    """Build an Invoice with sensible defaults for the fields a test ignores."""

    def _make(invoice_id="inv-1", **overrides) -> Invoice:
        values = dict(
            id=invoice_id,
            invoice_number="INV-202501-0001",
            issue_date=date(2025, 1, 10),
            due_date=date(2025, 2, 9),
            issuer_name="Acme Ltd",
            issuer_address="1 Main St\nSpringfield",
            client_name="Globex",
            client_address="9 Side Rd",
            items=[
                InvoiceItem(id="item-1", description="Work", quantity=2, unit_price=50)
            ],
            notes="",
            tax_rate_percent=10,
        )
        values.update(overrides)
        return Invoice(**values)

    return _make
