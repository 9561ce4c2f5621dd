"""
Invoice editor page.

Header with the save actions, then the form next to the live preview. Shows
an empty state when no invoice is active.
"""

import reflex as rx

from outvoice.components.invoice_form import invoice_form
from outvoice.components.invoice_preview import invoice_preview
from outvoice.state import APP_SUBTITLE, InvoiceState


def invoice_page() -> rx.Component:
    """
    Build the editor view.

    Returns:
        The invoice page component.
    """
    return rx.box(
        _build_header(),
        rx.cond(
            InvoiceState.has_invoice,
            rx.box(
                invoice_form(),
                rx.box(
                    rx.heading(
                        "Live Preview", size="3", as_="h2", class_name="no-print"
                    ),
                    invoice_preview(),
                    class_name="card preview-card",
                ),
                class_name="editor-grid",
            ),
            _empty(),
        ),
        class_name="invoice-page",
    )


def _build_header() -> rx.Component:
    return rx.box(
        rx.box(
            rx.heading("Invoice Generator", size="7", as_="h1"),
            rx.text(APP_SUBTITLE, class_name="muted"),
        ),
        rx.box(
            rx.cond(
                InvoiceState.unsaved,
                rx.text("Unsaved changes", class_name="badge secondary"),
            ),
            rx.button(
                rx.icon("save", size=16),
                "Save",
                variant="outline",
                disabled=~InvoiceState.has_invoice,
                on_click=InvoiceState.save_invoice,
            ),
            rx.button(
                rx.icon("download", size=16),
                "Save & Download PDF",
                disabled=~InvoiceState.has_invoice,
                on_click=InvoiceState.save_and_print,
            ),
            class_name="header-actions",
        ),
        class_name="page-header no-print",
    )


def _empty() -> rx.Component:
    """Build the empty state shown when no invoice is active."""
    return rx.box(
        rx.icon("file-x", class_name="empty-icon", size=60),
        rx.heading("No invoice selected", size="3", as_="h3"),
        rx.text("Create a new invoice or pick one from history.", class_name="muted"),
        rx.button(
            rx.icon("plus", size=16),
            "New Invoice",
            on_click=InvoiceState.new_invoice,
        ),
        class_name="card empty-state",
    )
