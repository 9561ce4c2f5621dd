"""
Invoice form component.

Inputs for every editable invoice field and the line item editor. Inputs
are debounced so the session is not updated on every keystroke.
"""

import reflex as rx

from outvoice.models.reflex_models import InvoiceItemModel
from outvoice.state import CURRENCIES, InvoiceState

_INVOICE = InvoiceState.invoice


def invoice_form() -> rx.Component:
    """
    Build the editor card for the active invoice.

    Returns:
        The invoice form component.
    """
    return rx.box(
        _section(
            "Details",
            _text_field("Invoice Number", "invoice_number", _INVOICE.invoice_number),
            rx.box(
                _date_field("Issue Date", "issue_date", _INVOICE.issue_date),
                _date_field("Due Date", "due_date", _INVOICE.due_date),
                class_name="field-grid",
            ),
        ),
        _section(
            "From",
            _text_field("Your Name/Company", "issuer_name", _INVOICE.issuer_name),
            _text_area("Your Address", "issuer_address", _INVOICE.issuer_address),
        ),
        _section(
            "Bill To",
            _text_field("Client Name", "client_name", _INVOICE.client_name),
            _text_area("Client Address", "client_address", _INVOICE.client_address),
        ),
        _section(
            "Items",
            rx.box(
                rx.foreach(_INVOICE.items, _item_editor),
                class_name="item-list",
            ),
            rx.button(
                rx.icon("circle-plus", size=16),
                "Add Item",
                variant="outline",
                on_click=InvoiceState.add_item,
                class_name="add-item-button",
            ),
        ),
        _section(
            "Totals",
            rx.box(
                _field(
                    "Tax Rate (%)",
                    rx.input(
                        type="number",
                        value=_INVOICE.tax_rate_percent.to_string(),
                        on_change=InvoiceState.set_tax_rate,
                        debounce_timeout=300,
                    ),
                ),
                _field(
                    "Currency",
                    rx.select(
                        CURRENCIES,
                        value=_INVOICE.currency_code,
                        on_change=lambda value: InvoiceState.set_invoice_field(
                            "currency_code", value
                        ),
                    ),
                ),
                class_name="field-grid",
            ),
        ),
        _section(
            "Notes",
            _text_area("Notes", "notes", _INVOICE.notes),
        ),
        class_name="card invoice-form no-print",
    )


def _item_editor(item: InvoiceItemModel) -> rx.Component:
    """Build the inputs for one line item."""
    return rx.box(
        rx.input(
            value=item.description,
            placeholder="Description",
            on_change=lambda value: InvoiceState.set_item_description(item.id, value),
            debounce_timeout=300,
            class_name="item-description",
        ),
        rx.input(
            type="number",
            value=item.quantity.to_string(),
            on_change=lambda value: InvoiceState.set_item_quantity(item.id, value),
            debounce_timeout=300,
            class_name="item-quantity",
        ),
        rx.input(
            type="number",
            value=item.unit_price.to_string(),
            on_change=lambda value: InvoiceState.set_item_unit_price(item.id, value),
            debounce_timeout=300,
            class_name="item-price",
        ),
        rx.icon_button(
            rx.icon("trash-2", size=16),
            variant="ghost",
            color_scheme="red",
            on_click=InvoiceState.remove_item(item.id),
            title="Remove item",
        ),
        key=item.id,
        class_name="item-row",
    )


def _section(title: str, *children: rx.Component) -> rx.Component:
    return rx.box(
        rx.heading(title, size="3", as_="h3"),
        *children,
        class_name="form-section",
    )


def _field(label: str, control: rx.Component) -> rx.Component:
    return rx.box(
        rx.text(label, class_name="label"),
        control,
        class_name="field",
    )


def _text_field(label: str, field: str, value) -> rx.Component:
    return _field(
        label,
        rx.input(
            value=value,
            on_change=lambda text: InvoiceState.set_invoice_field(field, text),
            debounce_timeout=300,
        ),
    )


def _text_area(label: str, field: str, value) -> rx.Component:
    return _field(
        label,
        rx.text_area(
            value=value,
            on_change=lambda text: InvoiceState.set_invoice_field(field, text),
            debounce_timeout=300,
        ),
    )


def _date_field(label: str, field: str, value) -> rx.Component:
    return _field(
        label,
        rx.input(
            type="date",
            value=value,
            on_change=lambda text: InvoiceState.set_invoice_field(field, text),
        ),
    )
