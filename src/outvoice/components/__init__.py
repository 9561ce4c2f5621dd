"""
Reflex UI components for OutVoice.

This package provides modular, composable components:
- sidebar: actions, theme selector and history
- history_panel: searchable list of saved invoices with delete
- theme_selector: swatch buttons for the registered themes
- invoice_page: editor header, form and live preview
- invoice_form: inputs for invoice fields and line items
- invoice_preview: the printable document
- settings_page: default settings editor

All components are functions that return rx.Component trees bound to
InvoiceState.
"""

from outvoice.components.invoice_page import invoice_page
from outvoice.components.settings_page import settings_page
from outvoice.components.sidebar import sidebar

__all__ = [
    "invoice_page",
    "settings_page",
    "sidebar",
]
