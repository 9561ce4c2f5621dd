"""
Reflex invoice preview component.

Draws the current DocumentModel: header, from/to blocks, line item table,
totals and notes, each region styled with the active theme's tokens. The
same markup is what the browser prints.
"""

import reflex as rx

from outvoice.models.reflex_models import DocumentRowModel
from outvoice.state import InvoiceState

_DOC = InvoiceState.document


def invoice_preview() -> rx.Component:
    """
    Build the printable invoice document.

    Returns:
        The invoice document component.
    """
    return rx.box(
        _build_header(),
        _build_parties(),
        _build_line_items(),
        _build_totals(),
        rx.cond(_DOC.has_notes, _build_notes()),
        id="invoice-document",
        class_name="invoice-document",
        style=_DOC.styles["container"],
        font_family=_DOC.font,
    )


def _build_header() -> rx.Component:
    """Build the title row with issuer name, number and dates."""
    return rx.box(
        rx.box(
            rx.box(
                rx.heading(_DOC.title, size="7", as_="h1", class_name="doc-title"),
                rx.box(
                    rx.icon("file-text", class_name="title-icon"),
                    rx.text(_DOC.issuer_name, class_name="doc-issuer"),
                    class_name="title-row",
                ),
            ),
            rx.box(
                rx.text(_DOC.invoice_number),
                rx.text("Date: ", _DOC.issue_date),
                rx.text("Due: ", _DOC.due_date),
                class_name="doc-meta",
            ),
            class_name="doc-header-row",
        ),
        style=_DOC.styles["header"],
    )


def _build_parties() -> rx.Component:
    """Build the From and To blocks."""
    return rx.box(
        _party_block("From:", _DOC.issuer_name, _DOC.issuer_address),
        _party_block("To:", _DOC.client_name, _DOC.client_address, align="right"),
        class_name="party-grid",
        style=_DOC.styles["from_to"],
    )


def _build_line_items() -> rx.Component:
    """Build the line item table."""
    return rx.el.table(
        rx.el.thead(
            rx.el.tr(
                rx.el.th("Description"),
                rx.el.th("Qty", class_name="center"),
                rx.el.th("Unit Price", class_name="right"),
                rx.el.th("Total", class_name="right"),
                style=_DOC.styles["table_header"],
            ),
        ),
        rx.el.tbody(rx.foreach(_DOC.rows, _line_item_row)),
        class_name="doc-table",
    )


def _line_item_row(row: DocumentRowModel) -> rx.Component:
    """Build an individual line item row."""
    return rx.el.tr(
        rx.el.td(row.description),
        rx.el.td(row.quantity, class_name="center"),
        rx.el.td(row.unit_price, class_name="right"),
        rx.el.td(row.line_total, class_name="right"),
        key=row.id,
        style=_DOC.styles["table_row"],
    )


def _build_totals() -> rx.Component:
    """Build the totals section."""
    return rx.box(
        rx.box(
            _totals_row("Subtotal", _DOC.subtotal),
            _totals_row(_DOC.tax_label, _DOC.tax),
            rx.box(
                rx.text("Total"),
                rx.text(_DOC.total),
                class_name="totals-row emphasize",
                style=_DOC.styles["total_row"],
            ),
            class_name="totals",
        ),
        class_name="totals-wrapper",
        style=_DOC.styles["totals"],
    )


def _build_notes() -> rx.Component:
    return rx.box(
        rx.text("Notes", class_name="label"),
        rx.text(_DOC.notes, white_space="pre-line"),
        class_name="doc-notes",
        style=_DOC.styles["footer"],
    )


def _totals_row(label, value) -> rx.Component:
    """Build a row within the totals section."""
    return rx.box(
        rx.text(label),
        rx.text(value),
        class_name="totals-row",
    )


def _party_block(label: str, name, address, align: str = "left") -> rx.Component:
    """Build a party block (issuer, client)."""
    return rx.box(
        rx.text(label, class_name="label"),
        rx.text(name, class_name="value"),
        rx.foreach(address, lambda line: rx.text(line, class_name="muted")),
        class_name="party-block",
        text_align=align,
    )
