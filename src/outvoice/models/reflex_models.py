"""
Reflex-compatible models for the OutVoice UI.

These models extend rx.Base so they can be used with rx.foreach and
other Reflex reactive components. They are display/form mirrors of the
dataclasses in outvoice.models and outvoice.document; the dataclasses stay
the source of truth.
"""

import reflex as rx

from outvoice.document import InvoiceDocument
from outvoice.models.invoice import Invoice
from outvoice.models.settings import Settings
from outvoice.themes import THEMES, theme_ids
from outvoice.utils import format_currency


class InvoiceItemModel(rx.Base):
    """Editable line item."""

    id: str = ""
    description: str = ""
    quantity: float = 0.0
    unit_price: float = 0.0


class InvoiceModel(rx.Base):
    """Editable invoice fields. Dates are ISO strings for date inputs."""

    id: str = ""
    invoice_number: str = ""
    issue_date: str = ""
    due_date: str = ""
    issuer_name: str = ""
    issuer_address: str = ""
    client_name: str = ""
    client_address: str = ""
    items: list[InvoiceItemModel] = []
    notes: str = ""
    tax_rate_percent: float = 0.0
    theme_id: str = ""
    currency_code: str = ""


class HistoryEntryModel(rx.Base):
    """One row of the history sidebar."""

    id: str = ""
    invoice_number: str = ""
    client_name: str = ""
    total: str = ""


class SettingsModel(rx.Base):
    """Editable default settings."""

    default_issuer_name: str = ""
    default_issuer_address: str = ""
    default_tax_rate_percent: float = 0.0
    default_currency_code: str = ""


class DocumentRowModel(rx.Base):
    """Rendered line item."""

    id: str = ""
    description: str = ""
    quantity: str = ""
    unit_price: str = ""
    line_total: str = ""


class DocumentModel(rx.Base):
    """Rendered invoice document."""

    title: str = ""
    invoice_number: str = ""
    issue_date: str = ""
    due_date: str = ""
    issuer_name: str = ""
    issuer_address: list[str] = []
    client_name: str = ""
    client_address: list[str] = []
    rows: list[DocumentRowModel] = []
    subtotal: str = ""
    tax_label: str = ""
    tax: str = ""
    total: str = ""
    currency_code: str = ""
    notes: str = ""
    has_notes: bool = False
    theme_id: str = ""
    theme_name: str = ""
    font: str = ""
    styles: dict[str, dict[str, str]] = {}


class ThemeOptionModel(rx.Base):
    """Entry in the theme selector."""

    id: str = ""
    name: str = ""
    background: str = ""
    primary: str = ""
    secondary: str = ""


def invoice_to_model(invoice: Invoice) -> InvoiceModel:
    """Convert an Invoice to its form model."""
    return InvoiceModel(
        id=invoice.id,
        invoice_number=invoice.invoice_number,
        issue_date=invoice.issue_date.isoformat(),
        due_date=invoice.due_date.isoformat(),
        issuer_name=invoice.issuer_name,
        issuer_address=invoice.issuer_address,
        client_name=invoice.client_name,
        client_address=invoice.client_address,
        items=[
            InvoiceItemModel(
                id=item.id,
                description=item.description,
                quantity=item.quantity,
                unit_price=item.unit_price,
            )
            for item in invoice.items
        ],
        notes=invoice.notes,
        tax_rate_percent=invoice.tax_rate_percent,
        theme_id=invoice.theme_id,
        currency_code=invoice.currency_code,
    )


def history_entry(invoice: Invoice) -> HistoryEntryModel:
    """Summarize a saved invoice for the history list."""
    return HistoryEntryModel(
        id=invoice.id,
        invoice_number=invoice.invoice_number,
        client_name=invoice.client_name,
        total=format_currency(invoice.total, invoice.currency_code),
    )


def settings_to_model(settings: Settings) -> SettingsModel:
    return SettingsModel(
        default_issuer_name=settings.default_issuer_name,
        default_issuer_address=settings.default_issuer_address,
        default_tax_rate_percent=settings.default_tax_rate_percent,
        default_currency_code=settings.default_currency_code,
    )


def document_to_model(document: InvoiceDocument) -> DocumentModel:
    """
    Convert a built InvoiceDocument to its Reflex model.

    Args:
        document: Output of outvoice.document.build_document.

    Returns:
        DocumentModel instance.
    """
    return DocumentModel(
        title=document.title,
        invoice_number=document.invoice_number,
        issue_date=document.issue_date,
        due_date=document.due_date,
        issuer_name=document.issuer_name,
        issuer_address=list(document.issuer_address),
        client_name=document.client_name,
        client_address=list(document.client_address),
        rows=[
            DocumentRowModel(
                id=row.id,
                description=row.description,
                quantity=row.quantity,
                unit_price=row.unit_price,
                line_total=row.line_total,
            )
            for row in document.rows
        ],
        subtotal=document.subtotal,
        tax_label=document.tax_label,
        tax=document.tax,
        total=document.total,
        currency_code=document.currency_code,
        notes=document.notes or "",
        has_notes=document.notes is not None,
        theme_id=document.theme_id,
        theme_name=document.theme_name,
        font=document.font,
        styles=document.styles,
    )


def theme_options() -> list[ThemeOptionModel]:
    """Return the selector entries for every registered theme."""
    return [
        ThemeOptionModel(
            id=theme_id,
            name=THEMES[theme_id].name,
            background=THEMES[theme_id].preview.background,
            primary=THEMES[theme_id].preview.primary,
            secondary=THEMES[theme_id].preview.secondary,
        )
        for theme_id in theme_ids()
    ]
