"""
History panel component.

Lists saved invoices (newest first) with a client/number search box. Each
entry loads the invoice on click and can be deleted after confirmation.
"""

import reflex as rx

from outvoice.models.reflex_models import HistoryEntryModel
from outvoice.state import InvoiceState


def history_panel() -> rx.Component:
    """
    Build the searchable history list.

    Returns:
        The history panel component.
    """
    return rx.box(
        rx.box(
            rx.icon("search", class_name="input-icon"),
            rx.input(
                placeholder="Search by client or number...",
                value=InvoiceState.search_term,
                on_change=InvoiceState.set_search_term,
                class_name="search-input",
                debounce_timeout=300,
            ),
            class_name="input-with-icon",
        ),
        rx.text(InvoiceState.history_summary, class_name="muted small"),
        rx.cond(
            InvoiceState.is_history_empty,
            _empty(),
            rx.scroll_area(
                rx.box(
                    rx.foreach(InvoiceState.history, _history_entry),
                    class_name="history-list",
                ),
                class_name="history-scroll",
            ),
        ),
        class_name="history-panel",
    )


def _history_entry(entry: HistoryEntryModel) -> rx.Component:
    """Build one history row."""
    return rx.box(
        rx.box(
            rx.icon("file-text", size=16),
            rx.box(
                rx.text(entry.invoice_number, class_name="value truncate"),
                rx.text(entry.client_name, class_name="muted small truncate"),
            ),
            rx.text(entry.total, class_name="muted small"),
            on_click=InvoiceState.load_invoice(entry.id),
            class_name="history-entry-main",
        ),
        _delete_dialog(entry),
        key=entry.id,
        class_name=rx.cond(
            InvoiceState.invoice.id == entry.id,
            "history-entry active",
            "history-entry",
        ),
    )


def _delete_dialog(entry: HistoryEntryModel) -> rx.Component:
    """Build the delete button with its confirmation dialog."""
    return rx.alert_dialog.root(
        rx.alert_dialog.trigger(
            rx.icon_button(
                rx.icon("trash-2", size=14),
                variant="ghost",
                color_scheme="red",
                size="1",
                title="Delete invoice",
            ),
        ),
        rx.alert_dialog.content(
            rx.alert_dialog.title("Are you sure?"),
            rx.alert_dialog.description(
                "This will permanently delete the invoice ",
                rx.text.strong(entry.invoice_number),
                ". This action cannot be undone.",
            ),
            rx.flex(
                rx.alert_dialog.cancel(rx.button("Cancel", variant="soft")),
                rx.alert_dialog.action(
                    rx.button(
                        "Delete",
                        color_scheme="red",
                        on_click=InvoiceState.delete_invoice(entry.id),
                    ),
                ),
                gap="3",
                justify="end",
            ),
        ),
    )


def _empty() -> rx.Component:
    """Build the empty state when no saved invoices match."""
    return rx.box(
        rx.cond(
            InvoiceState.search_term != "",
            rx.text("No invoices match your search.", class_name="muted"),
            rx.text("No saved invoices.", class_name="muted"),
        ),
        class_name="empty-state small",
    )
