"""
Reflex state management for the OutVoice application.

InvoiceState is a thin event layer over the process-level SessionController:
each handler performs one controller operation, then mirrors the
controller's state into Reflex vars. Invalid numeric input is coerced to 0
here, at the input boundary, so the core only ever sees numbers.
"""

import os
from functools import cache

import reflex as rx

from outvoice.document import build_document
from outvoice.lib import logs
from outvoice.models.common import OperationResult, ViewMode
from outvoice.models.invoice import CURRENCY_CODES
from outvoice.models.reflex_models import (
    DocumentModel,
    HistoryEntryModel,
    InvoiceModel,
    SettingsModel,
    ThemeOptionModel,
    document_to_model,
    history_entry,
    invoice_to_model,
    settings_to_model,
    theme_options,
)
from outvoice.services import get_invoice_store
from outvoice.session import SessionController
from outvoice.utils import to_number

LOG = logs.logger(__file__)

APP_TITLE = os.getenv("OUTVOICE_TITLE", "OutVoice")
APP_SUBTITLE = "Fill in the details to generate your invoice."

CURRENCIES = list(CURRENCY_CODES)


@cache
def _get_session() -> SessionController:
    """Get the application's session controller (created and started once)."""
    session = SessionController(get_invoice_store())
    session.start()
    return session


class InvoiceState(rx.State):
    """
    Main application state for OutVoice.

    Handles the active invoice, history list, theme and settings views.
    """

    has_invoice: bool = False
    invoice: InvoiceModel = InvoiceModel()
    document: DocumentModel = DocumentModel()
    unsaved: bool = False

    history: list[HistoryEntryModel] = []
    history_count: int = 0
    search_term: str = ""

    view: str = ViewMode.INVOICE.value
    settings: SettingsModel = SettingsModel()
    themes: list[ThemeOptionModel] = theme_options()

    @rx.var
    def is_history_empty(self) -> bool:
        """Check if the history list should show its empty state."""
        return len(self.history) == 0

    @rx.var
    def history_summary(self) -> str:
        noun = "invoice" if self.history_count == 1 else "invoices"
        return f"{self.history_count} saved {noun}"

    @rx.event
    def on_load(self):
        """Event handler for initial page load."""
        self._sync()

    @rx.event
    def new_invoice(self):
        invoice = _get_session().create_new()
        self._sync()
        return rx.toast.info(f"New invoice {invoice.invoice_number} created.")

    @rx.event
    def load_invoice(self, invoice_id: str):
        loaded = _get_session().load(invoice_id)
        self._sync()
        if loaded is None:
            return rx.toast.error("That invoice is no longer in history.")
        return rx.toast.info(f"Invoice {loaded.invoice_number} is now active.")

    @rx.event
    def save_invoice(self):
        """Save the active invoice into history."""
        return self._save()

    @rx.event
    def save_and_print(self):
        """
        Save, then print.

        The print script is returned from the handler, so it only runs
        after the save has been written and the state synced.
        """
        toast = self._save()
        if not self.has_invoice:
            return toast
        return [toast, rx.call_script("window.print()")]

    @rx.event
    def delete_invoice(self, invoice_id: str):
        result = _get_session().delete(invoice_id)
        self._sync()
        if result is OperationResult.NOT_FOUND:
            return rx.toast.error("That invoice is no longer in history.")
        return rx.toast.warning("The invoice has been removed from history.")

    @rx.event
    def set_theme(self, theme_id: str):
        _get_session().set_theme(theme_id)
        self._sync()

    @rx.event
    def set_invoice_field(self, field: str, value: str):
        _get_session().update_invoice(**{field: value})
        self._sync()

    @rx.event
    def set_tax_rate(self, value: str):
        _get_session().update_invoice(tax_rate_percent=to_number(value))
        self._sync()

    @rx.event
    def add_item(self):
        _get_session().add_item()
        self._sync()

    @rx.event
    def remove_item(self, item_id: str):
        _get_session().remove_item(item_id)
        self._sync()

    @rx.event
    def set_item_description(self, item_id: str, value: str):
        _get_session().update_item(item_id, description=value)
        self._sync()

    @rx.event
    def set_item_quantity(self, item_id: str, value: str):
        _get_session().update_item(item_id, quantity=to_number(value))
        self._sync()

    @rx.event
    def set_item_unit_price(self, item_id: str, value: str):
        _get_session().update_item(item_id, unit_price=to_number(value))
        self._sync()

    @rx.event
    def set_search_term(self, term: str):
        self.search_term = term or ""
        self._sync_history()

    @rx.event
    def show_settings(self):
        _get_session().show_settings()
        self._sync()

    @rx.event
    def show_invoice(self):
        _get_session().show_invoice()
        self._sync()

    @rx.event
    def set_settings_field(self, field: str, value: str):
        _get_session().update_settings(**{field: value})
        self._sync()

    @rx.event
    def set_default_tax_rate(self, value: str):
        _get_session().update_settings(default_tax_rate_percent=to_number(value))
        self._sync()

    @rx.event
    def save_settings(self):
        _get_session().save_settings()
        self._sync()
        return rx.toast.success("Your default settings have been updated.")

    def _save(self):
        session = _get_session()
        result = session.save()
        self._sync()
        if result is OperationResult.NO_ACTIVE_INVOICE:
            return rx.toast.error("There is no invoice to save.")
        invoice = session.active_invoice
        return rx.toast.success(
            f"Invoice {invoice.invoice_number} has been saved successfully."
        )

    def _sync(self):
        """Mirror the controller's state into the Reflex vars."""
        session = _get_session()
        active = session.active_invoice
        self.has_invoice = active is not None
        if active is not None:
            self.invoice = invoice_to_model(active)
            self.document = document_to_model(build_document(active))
        else:
            self.invoice = InvoiceModel()
            self.document = DocumentModel()
        self.unsaved = session.has_unsaved_changes
        self.view = session.view.value
        self.settings = settings_to_model(session.settings)
        self._sync_history()

    def _sync_history(self):
        session = _get_session()
        self.history = [
            history_entry(invoice)
            for invoice in session.search_history(self.search_term)
        ]
        self.history_count = len(session.history)
