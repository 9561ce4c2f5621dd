"""
Invoice domain models, derived totals and the stored record codec.

The hierarchy is:

    Invoice
    ├── identity (id, invoice_number)
    ├── dates (issue_date, due_date)
    ├── parties (issuer_*, client_*)
    ├── InvoiceItem[] (description, quantity, unit price)
    └── presentation (theme_id, currency_code, notes)

Totals are never stored: subtotal, tax and total are properties computed
from the items and tax rate on every read.

Serialization functions convert between dataclasses and the JSON-ready
records kept under the ``invoices`` store key. Records carry a schema
version so that older shapes can be migrated when they are read back.
"""

import random
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Any, Callable, Iterable, List, Mapping

from benedict import benedict

from outvoice.themes import DEFAULT_THEME_ID
from outvoice.utils import parse_date, to_number

CURRENCY_CODES = ("USD", "EUR", "GBP", "JPY", "CAD", "AUD", "INR")
DEFAULT_CURRENCY = "USD"
DEFAULT_DUE_DAYS = 30

PLACEHOLDER_DESCRIPTION = "Service Description"
PLACEHOLDER_QUANTITY = 1.0
PLACEHOLDER_UNIT_PRICE = 100.0

CURRENT_SCHEMA_VERSION = 1


class InvoiceRecordError(ValueError):
    """Raised when a stored record cannot be turned back into an Invoice."""


def new_id() -> str:
    """Return a random opaque identifier for invoices and line items."""
    return uuid.uuid4().hex


def generate_invoice_number(
    now: datetime | date, rng: random.Random | None = None
) -> str:
    """
    Return a display number of the form INV-YYYYMM-RRRR.

    The suffix is a uniformly drawn, zero padded 4 digit value. Numbers are
    labels, not keys; two invoices may share one.
    """
    suffix = (rng or random).randrange(10000)
    return f"INV-{now.year}{now.month:02d}-{suffix:04d}"


@dataclass(slots=True)
class InvoiceItem:
    """Represents a single billable row on the invoice."""

    id: str = field(default_factory=new_id)
    description: str = ""
    quantity: float = 0.0
    unit_price: float = 0.0

    @property
    def line_total(self) -> float:
        return self.quantity * self.unit_price


def compute_subtotal(items: Iterable[InvoiceItem]) -> float:
    """Sum quantity * unit price over the items; 0 for no items."""
    return sum((item.quantity * item.unit_price for item in items), 0.0)


def compute_tax(subtotal: float, rate_percent: float) -> float:
    """Return the tax owed on subtotal at rate_percent."""
    return subtotal * rate_percent / 100


def compute_total(subtotal: float, tax: float) -> float:
    """Return the amount due."""
    return subtotal + tax


@dataclass(slots=True)
class Invoice:
    """Primary dataclass for invoices."""

    id: str
    invoice_number: str
    issue_date: date
    due_date: date
    issuer_name: str = ""
    issuer_address: str = ""
    client_name: str = ""
    client_address: str = ""
    items: List[InvoiceItem] = field(default_factory=list)
    notes: str = ""
    tax_rate_percent: float = 0.0
    theme_id: str = DEFAULT_THEME_ID
    currency_code: str = DEFAULT_CURRENCY

    @property
    def subtotal(self) -> float:
        return compute_subtotal(self.items)

    @property
    def tax_amount(self) -> float:
        return compute_tax(self.subtotal, self.tax_rate_percent)

    @property
    def total(self) -> float:
        return compute_total(self.subtotal, self.tax_amount)

    def add_item(
        self,
        description: str = PLACEHOLDER_DESCRIPTION,
        quantity: float = PLACEHOLDER_QUANTITY,
        unit_price: float = PLACEHOLDER_UNIT_PRICE,
    ) -> InvoiceItem:
        """Append a new line item and return it."""
        item = InvoiceItem(
            description=description, quantity=quantity, unit_price=unit_price
        )
        self.items.append(item)
        return item

    def remove_item(self, item_id: str) -> bool:
        """Remove the item with item_id. Returns False if there was none."""
        for index, item in enumerate(self.items):
            if item.id == item_id:
                del self.items[index]
                return True
        return False

    def find_item(self, item_id: str) -> InvoiceItem | None:
        return next((item for item in self.items if item.id == item_id), None)

    def searchable_terms(self) -> List[str]:
        """Return the terms that should be matched when filtering history."""
        terms = [self.client_name, self.invoice_number]
        return [value.lower() for value in terms if value]


# Editable fields, by kind, used when applying form input.
TEXT_FIELDS = frozenset(
    {
        "invoice_number",
        "issuer_name",
        "issuer_address",
        "client_name",
        "client_address",
        "notes",
        "theme_id",
    }
)
NUMBER_FIELDS = frozenset({"tax_rate_percent"})
CURRENCY_FIELDS = frozenset({"currency_code"})
DATE_FIELDS = frozenset({"issue_date", "due_date"})
ITEM_TEXT_FIELDS = frozenset({"description"})
ITEM_NUMBER_FIELDS = frozenset({"quantity", "unit_price"})


def default_due_date(issue_date: date) -> date:
    return issue_date + timedelta(days=DEFAULT_DUE_DAYS)


def is_supported_currency(code: Any) -> bool:
    return isinstance(code, str) and code in CURRENCY_CODES


def currency_or_default(code: Any) -> str:
    """Return code if it is a supported currency, else the default."""
    return code if is_supported_currency(code) else DEFAULT_CURRENCY


def serialize_invoice(invoice: Invoice) -> dict:
    """Convert an Invoice into the JSON-ready record stored in history."""
    return {
        "schemaVersion": CURRENT_SCHEMA_VERSION,
        "id": invoice.id,
        "invoiceNumber": invoice.invoice_number,
        "date": invoice.issue_date.isoformat(),
        "dueDate": invoice.due_date.isoformat(),
        "fromName": invoice.issuer_name,
        "fromAddress": invoice.issuer_address,
        "clientName": invoice.client_name,
        "clientAddress": invoice.client_address,
        "items": [
            {
                "id": item.id,
                "description": item.description,
                "quantity": item.quantity,
                "price": item.unit_price,
            }
            for item in invoice.items
        ],
        "notes": invoice.notes,
        "gstRate": invoice.tax_rate_percent,
        "theme": invoice.theme_id,
        "currency": invoice.currency_code,
    }


def _migrate_v0(record: benedict) -> None:
    """v0 records named the theme ``template``."""
    if "template" in record:
        if "theme" in record:
            record.remove("template")
        else:
            record.rename("template", "theme")


_MIGRATIONS: dict[int, Callable[[benedict], None]] = {
    0: _migrate_v0,
}


def migrate_record(payload: Mapping[str, Any]) -> benedict:
    """
    Bring a stored record up to the current schema version.

    Each migration upgrades one version in place; records newer than this
    build are read as-is.
    """
    record = benedict(dict(payload), keypath_separator=None)
    version = max(record.get_int("schemaVersion", 0), 0)
    while version < CURRENT_SCHEMA_VERSION:
        _MIGRATIONS[version](record)
        version += 1
    return record


def deserialize_invoice(payload: Any) -> Invoice:
    """
    Convert a stored record back into an Invoice.

    Dates are rehydrated from their ISO string form. Missing fields fall
    back to defaults so that partially written or older records still load.

    Raises:
        InvoiceRecordError: If the record is not a mapping or has no id.
    """
    if not isinstance(payload, Mapping):
        raise InvoiceRecordError(
            f"Invoice record must be an object, got {type(payload).__name__}"
        )
    record = migrate_record(payload)

    invoice_id = record.get("id")
    if not invoice_id:
        raise InvoiceRecordError("Invoice record has no id")

    issue_date = parse_date(record.get("date")) or date.today()
    due_date = parse_date(record.get("dueDate")) or default_due_date(issue_date)

    return Invoice(
        id=str(invoice_id),
        invoice_number=_text(record.get("invoiceNumber")),
        issue_date=issue_date,
        due_date=due_date,
        issuer_name=_text(record.get("fromName")),
        issuer_address=_text(record.get("fromAddress")),
        client_name=_text(record.get("clientName")),
        client_address=_text(record.get("clientAddress")),
        items=[_deserialize_item(item) for item in _list(record.get("items"))],
        notes=_text(record.get("notes")),
        tax_rate_percent=to_number(record.get("gstRate")),
        theme_id=_text(record.get("theme")) or DEFAULT_THEME_ID,
        currency_code=currency_or_default(record.get("currency")),
    )


def _deserialize_item(payload: Any) -> InvoiceItem:
    if not isinstance(payload, Mapping):
        raise InvoiceRecordError(
            f"Line item must be an object, got {type(payload).__name__}"
        )
    return InvoiceItem(
        id=_text(payload.get("id")) or new_id(),
        description=_text(payload.get("description")),
        quantity=to_number(payload.get("quantity")),
        unit_price=to_number(payload.get("price")),
    )


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _list(value: Any) -> list:
    return list(value) if isinstance(value, (list, tuple)) else []
