"""Theme selector: one swatch button per registered theme."""

import reflex as rx

from outvoice.models.reflex_models import ThemeOptionModel
from outvoice.state import InvoiceState


def theme_selector() -> rx.Component:
    """Build the grid of theme swatches for the active invoice."""
    return rx.box(
        rx.foreach(InvoiceState.themes, _theme_swatch),
        class_name="theme-grid",
    )


def _theme_swatch(theme: ThemeOptionModel) -> rx.Component:
    return rx.button(
        rx.box(
            rx.box(background=theme.primary, class_name="swatch-bar"),
            rx.box(background=theme.secondary, class_name="swatch-bar short"),
            background=theme.background,
            class_name="swatch",
        ),
        rx.text(theme.name, class_name="small"),
        variant=rx.cond(InvoiceState.invoice.theme_id == theme.id, "solid", "outline"),
        disabled=~InvoiceState.has_invoice,
        on_click=InvoiceState.set_theme(theme.id),
        key=theme.id,
        class_name="theme-button",
    )
