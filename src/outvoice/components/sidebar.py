"""
Application sidebar.

Holds the new invoice and settings actions, the theme selector and the
history panel. Hidden when printing.
"""

import reflex as rx

from outvoice.components.history_panel import history_panel
from outvoice.components.theme_selector import theme_selector
from outvoice.state import APP_TITLE, InvoiceState


def sidebar() -> rx.Component:
    """Build the sidebar."""
    return rx.box(
        rx.box(
            rx.icon("file-text", class_name="brand-icon"),
            rx.heading(APP_TITLE, size="5", as_="h1"),
            class_name="brand",
        ),
        rx.box(
            rx.button(
                rx.icon("plus", size=16),
                "New Invoice",
                on_click=InvoiceState.new_invoice,
                class_name="full-width",
            ),
            rx.button(
                rx.icon("settings", size=16),
                "Settings",
                variant="ghost",
                on_click=InvoiceState.show_settings,
                class_name="full-width",
            ),
            class_name="sidebar-group",
        ),
        _group("Themes", theme_selector()),
        _group("History", history_panel()),
        class_name="sidebar no-print",
    )


def _group(label: str, child: rx.Component) -> rx.Component:
    return rx.box(
        rx.text(label, class_name="sidebar-label"),
        child,
        class_name="sidebar-group",
    )
