"""
Printable invoice document model.

build_document() turns an Invoice into everything the preview needs to
draw it: display strings for every value, the derived totals and the style
tokens of the invoice's theme. It is a pure function of the invoice (and
the static theme registry), so the on-screen preview and the printed copy
always match the data that was just saved.
"""

from dataclasses import asdict, dataclass, field
from typing import List

from outvoice.models.invoice import Invoice
from outvoice.themes import lookup
from outvoice.utils import (
    address_lines,
    format_currency,
    format_date,
    format_quantity,
)

DOCUMENT_TITLE = "Invoice"


@dataclass(slots=True)
class DocumentRow:
    """One rendered line item."""

    id: str
    description: str
    quantity: str
    unit_price: str
    line_total: str


@dataclass(slots=True)
class InvoiceDocument:
    """Display-ready representation of an invoice in a theme."""

    title: str
    invoice_number: str
    issue_date: str
    due_date: str
    issuer_name: str
    issuer_address: List[str]
    client_name: str
    client_address: List[str]
    rows: List[DocumentRow]
    subtotal: str
    tax_label: str
    tax: str
    total: str
    currency_code: str
    notes: str | None
    theme_id: str
    theme_name: str
    font: str
    styles: dict[str, dict[str, str]] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dictionary."""
        return asdict(self)


def build_document(invoice: Invoice) -> InvoiceDocument:
    """
    Build the display model for an invoice.

    Unknown theme ids render with the default theme. Blank notes are left
    out of the document.
    """
    theme = lookup(invoice.theme_id)
    currency = invoice.currency_code

    subtotal = invoice.subtotal
    tax = invoice.tax_amount

    return InvoiceDocument(
        title=DOCUMENT_TITLE,
        invoice_number=invoice.invoice_number,
        issue_date=format_date(invoice.issue_date),
        due_date=format_date(invoice.due_date),
        issuer_name=invoice.issuer_name,
        issuer_address=address_lines(invoice.issuer_address),
        client_name=invoice.client_name,
        client_address=address_lines(invoice.client_address),
        rows=[
            DocumentRow(
                id=item.id,
                description=item.description,
                quantity=format_quantity(item.quantity),
                unit_price=format_currency(item.unit_price, currency),
                line_total=format_currency(item.line_total, currency),
            )
            for item in invoice.items
        ],
        subtotal=format_currency(subtotal, currency),
        tax_label=f"Tax ({format_quantity(invoice.tax_rate_percent)}%)",
        tax=format_currency(tax, currency),
        total=format_currency(subtotal + tax, currency),
        currency_code=currency,
        notes=invoice.notes if invoice.notes and invoice.notes.strip() else None,
        theme_id=theme.id,
        theme_name=theme.name,
        font=theme.font,
        styles=theme.styles.to_dict(),
    )
