"""
Settings page component.

Edits the defaults applied to new invoices. Changes are kept in memory
until "Save Settings" is pressed.
"""

import reflex as rx

from outvoice.state import CURRENCIES, InvoiceState

_SETTINGS = InvoiceState.settings


def settings_page() -> rx.Component:
    """
    Build the settings view.

    Returns:
        The settings page component.
    """
    return rx.box(
        rx.box(
            rx.heading("Settings", size="7", as_="h1"),
            rx.text("Manage your default invoice information.", class_name="muted"),
            class_name="page-header",
        ),
        rx.box(
            rx.heading("Default Invoice Details", size="4", as_="h2"),
            rx.text(
                "This information will be pre-filled on new invoices.",
                class_name="muted",
            ),
            _field(
                "Your Name/Company",
                rx.input(
                    value=_SETTINGS.default_issuer_name,
                    placeholder="e.g. Acme Inc.",
                    on_change=lambda value: InvoiceState.set_settings_field(
                        "default_issuer_name", value
                    ),
                    debounce_timeout=300,
                ),
            ),
            _field(
                "Your Address",
                rx.text_area(
                    value=_SETTINGS.default_issuer_address,
                    placeholder="e.g. 123 Main St, Anytown, USA 12345",
                    on_change=lambda value: InvoiceState.set_settings_field(
                        "default_issuer_address", value
                    ),
                    debounce_timeout=300,
                ),
            ),
            rx.box(
                _field(
                    "Default Tax Rate (%)",
                    rx.input(
                        type="number",
                        value=_SETTINGS.default_tax_rate_percent.to_string(),
                        on_change=InvoiceState.set_default_tax_rate,
                        debounce_timeout=300,
                    ),
                ),
                _field(
                    "Default Currency",
                    rx.select(
                        CURRENCIES,
                        value=_SETTINGS.default_currency_code,
                        on_change=lambda value: InvoiceState.set_settings_field(
                            "default_currency_code", value
                        ),
                    ),
                ),
                class_name="field-grid",
            ),
            rx.button("Save Settings", on_click=InvoiceState.save_settings),
            class_name="card settings-card",
        ),
        class_name="settings-page",
    )


def _field(label: str, control: rx.Component) -> rx.Component:
    return rx.box(
        rx.text(label, class_name="label"),
        control,
        class_name="field",
    )
