"""
Invoice session controller.

The controller is the single owner of the in-memory session: the active
invoice being edited, the saved history and the current view. Every
mutation goes through it, and the ones that change history write the whole
history through to the store before returning.

History holds snapshots. Saving stores a copy of the active invoice and
loading activates a copy of the history entry, so edits made after a save
stay out of history (and out of the store) until the next save.

Operations never raise for unknown ids; they return an OperationResult
(or None for load) so the UI can tell success, no-op and not-found apart.
"""

import copy
import random
from datetime import datetime
from typing import Any, Callable, List

from outvoice.lib import logs
from outvoice.models.common import OperationResult, SessionState, ViewMode
from outvoice.models.invoice import (
    CURRENCY_FIELDS,
    DATE_FIELDS,
    ITEM_NUMBER_FIELDS,
    ITEM_TEXT_FIELDS,
    NUMBER_FIELDS,
    TEXT_FIELDS,
    Invoice,
    InvoiceItem,
    default_due_date,
    generate_invoice_number,
    is_supported_currency,
    new_id,
)
from outvoice.models.settings import (
    SETTINGS_CURRENCY_FIELDS,
    SETTINGS_NUMBER_FIELDS,
    SETTINGS_TEXT_FIELDS,
    Settings,
)
from outvoice.services.invoice_store import InvoiceStore
from outvoice.services.settings_service import SettingsService
from outvoice.themes import DEFAULT_THEME_ID
from outvoice.utils import matches_query, parse_date, to_number

LOG = logs.logger(__file__)

NEW_CLIENT_NAME = "Client Company"
NEW_CLIENT_ADDRESS = "456 Client Avenue, Client City, 54321"
NEW_NOTES = "Thank you for your business. Please make payment within 30 days."


class SessionController:
    """
    In-memory owner of the active invoice, the history and the view mode.

    Attributes:
        settings: Current (possibly unsaved) default settings.
        view: Page currently shown.
    """

    def __init__(
        self,
        store: InvoiceStore,
        settings_service: SettingsService | None = None,
        clock: Callable[[], datetime] = datetime.now,
        rng: random.Random | None = None,
    ) -> None:
        """
        Initialize the controller.

        Args:
            store: Persistence backend for history (and settings by default).
            settings_service: Settings loader/saver. Defaults to one over store.
            clock: Source of "now" for new invoices.
            rng: Random source for invoice numbers.
        """
        self._store = store
        self._settings_service = settings_service or SettingsService(store)
        self._clock = clock
        self._rng = rng
        self._history: List[Invoice] = []
        self._active: Invoice | None = None
        self.settings = Settings()
        self.view = ViewMode.INVOICE

    # -- state -----------------------------------------------------------

    @property
    def active_invoice(self) -> Invoice | None:
        return self._active

    @property
    def history(self) -> List[Invoice]:
        """A shallow copy of the saved invoices, newest first."""
        return list(self._history)

    @property
    def state(self) -> SessionState:
        if self.view is ViewMode.SETTINGS:
            return SessionState.SETTINGS_VIEW
        if self._active is None:
            return SessionState.NO_ACTIVE_INVOICE
        return SessionState.EDITING_INVOICE

    @property
    def has_unsaved_changes(self) -> bool:
        """True when the active invoice differs from its saved copy."""
        if self._active is None:
            return False
        saved = self._find(self._active.id)
        return saved is None or saved != self._active

    def start(self) -> None:
        """
        Load settings and history from the store.

        The newest saved invoice, if any, becomes the active invoice.
        """
        self.settings = self._settings_service.load()
        self._history = self._store.load_history()
        self._active = copy.deepcopy(self._history[0]) if self._history else None
        LOG.info(
            "Session started - history:%s active:%s",
            len(self._history),
            self._active.id if self._active else None,
        )

    # -- invoices --------------------------------------------------------

    def create_new(self, settings: Settings | None = None) -> Invoice:
        """
        Create a fresh invoice seeded from the default settings.

        The new invoice becomes active; history and the store are untouched
        until save() is called.
        """
        defaults = settings or self.settings
        now = self._clock()
        today = now.date() if isinstance(now, datetime) else now
        invoice = Invoice(
            id=new_id(),
            invoice_number=generate_invoice_number(now, self._rng),
            issue_date=today,
            due_date=default_due_date(today),
            issuer_name=defaults.default_issuer_name,
            issuer_address=defaults.default_issuer_address,
            client_name=NEW_CLIENT_NAME,
            client_address=NEW_CLIENT_ADDRESS,
            notes=NEW_NOTES,
            tax_rate_percent=defaults.default_tax_rate_percent,
            theme_id=DEFAULT_THEME_ID,
            currency_code=defaults.default_currency_code,
        )
        invoice.add_item()
        self._active = invoice
        self.view = ViewMode.INVOICE
        LOG.info("Created invoice %s (%s)", invoice.invoice_number, invoice.id)
        return invoice

    def load(self, invoice_id: str) -> Invoice | None:
        """
        Make the saved invoice with invoice_id active.

        Returns:
            The now-active invoice, or None if no saved invoice has that id
            (in which case the session is left unchanged).
        """
        saved = self._find(invoice_id)
        if saved is None:
            LOG.info("Load skipped, invoice %s not found", invoice_id)
            return None
        self._active = copy.deepcopy(saved)
        self.view = ViewMode.INVOICE
        LOG.info("Loaded invoice %s (%s)", saved.invoice_number, saved.id)
        return self._active

    def save(self) -> OperationResult:
        """
        Upsert the active invoice into history and persist the history.

        New invoices are prepended; already saved ones are replaced where
        they stand. History is only replaced once the store write succeeds.
        """
        if self._active is None:
            return OperationResult.NO_ACTIVE_INVOICE
        snapshot = copy.deepcopy(self._active)
        history = list(self._history)
        index = self._index(snapshot.id)
        if index is None:
            history.insert(0, snapshot)
            result = OperationResult.CREATED
        else:
            history[index] = snapshot
            result = OperationResult.UPDATED
        self._store.save_history(history)
        self._history = history
        LOG.info(
            "Saved invoice %s (%s) - %s", snapshot.invoice_number, snapshot.id, result
        )
        return result

    def delete(self, invoice_id: str) -> OperationResult:
        """
        Remove a saved invoice and persist the history.

        If the deleted invoice was active, the newest remaining invoice
        becomes active, or none if history is now empty.
        """
        index = self._index(invoice_id)
        if index is None:
            LOG.info("Delete skipped, invoice %s not found", invoice_id)
            return OperationResult.NOT_FOUND
        history = self._history[:index] + self._history[index + 1 :]
        self._store.save_history(history)
        self._history = history
        if self._active is not None and self._active.id == invoice_id:
            self._active = copy.deepcopy(self._history[0]) if self._history else None
        LOG.info("Deleted invoice %s", invoice_id)
        return OperationResult.DELETED

    def set_theme(self, theme_id: str) -> OperationResult:
        """Change the active invoice's theme. Does not save."""
        if self._active is None:
            return OperationResult.NO_ACTIVE_INVOICE
        self._active.theme_id = theme_id
        return OperationResult.UPDATED

    def search_history(self, term: str | None) -> List[Invoice]:
        """Return saved invoices whose client name or number contains term."""
        return [invoice for invoice in self._history if matches_query(invoice, term)]

    # -- editing ---------------------------------------------------------

    def update_invoice(self, **fields: Any) -> OperationResult:
        """
        Apply form values to the active invoice.

        Numeric values are coerced with to_number. Dates that cannot be
        parsed and unsupported currency codes leave the field unchanged.

        Raises:
            ValueError: If a field name is not editable.
        """
        if self._active is None:
            return OperationResult.NO_ACTIVE_INVOICE
        for name, value in fields.items():
            if name in TEXT_FIELDS:
                setattr(self._active, name, "" if value is None else str(value))
            elif name in NUMBER_FIELDS:
                setattr(self._active, name, to_number(value))
            elif name in CURRENCY_FIELDS:
                if is_supported_currency(value):
                    setattr(self._active, name, value)
            elif name in DATE_FIELDS:
                parsed = parse_date(value)
                if parsed is not None:
                    setattr(self._active, name, parsed)
            else:
                raise ValueError(f"Invoice field is not editable: {name}")
        return OperationResult.UPDATED

    def add_item(self) -> InvoiceItem | None:
        """Append a placeholder line item to the active invoice."""
        if self._active is None:
            return None
        return self._active.add_item()

    def remove_item(self, item_id: str) -> OperationResult:
        if self._active is None:
            return OperationResult.NO_ACTIVE_INVOICE
        if not self._active.remove_item(item_id):
            return OperationResult.NOT_FOUND
        return OperationResult.UPDATED

    def update_item(self, item_id: str, **fields: Any) -> OperationResult:
        """
        Apply form values to one line item of the active invoice.

        Raises:
            ValueError: If a field name is not editable.
        """
        if self._active is None:
            return OperationResult.NO_ACTIVE_INVOICE
        item = self._active.find_item(item_id)
        if item is None:
            return OperationResult.NOT_FOUND
        for name, value in fields.items():
            if name in ITEM_TEXT_FIELDS:
                setattr(item, name, "" if value is None else str(value))
            elif name in ITEM_NUMBER_FIELDS:
                setattr(item, name, to_number(value))
            else:
                raise ValueError(f"Line item field is not editable: {name}")
        return OperationResult.UPDATED

    # -- settings and views ----------------------------------------------

    def show_settings(self) -> None:
        self.view = ViewMode.SETTINGS

    def show_invoice(self) -> None:
        self.view = ViewMode.INVOICE

    def update_settings(self, **fields: Any) -> None:
        """
        Edit the in-memory settings. Nothing is persisted until save_settings().

        Raises:
            ValueError: If a field name is not a settings field.
        """
        for name, value in fields.items():
            if name in SETTINGS_TEXT_FIELDS:
                setattr(self.settings, name, "" if value is None else str(value))
            elif name in SETTINGS_NUMBER_FIELDS:
                setattr(self.settings, name, to_number(value))
            elif name in SETTINGS_CURRENCY_FIELDS:
                if is_supported_currency(value):
                    setattr(self.settings, name, value)
            else:
                raise ValueError(f"Unknown settings field: {name}")

    def save_settings(self) -> None:
        """Persist the current settings as the new defaults."""
        self._settings_service.save(self.settings)

    # -- helpers ---------------------------------------------------------

    def _index(self, invoice_id: str) -> int | None:
        for index, invoice in enumerate(self._history):
            if invoice.id == invoice_id:
                return index
        return None

    def _find(self, invoice_id: str) -> Invoice | None:
        index = self._index(invoice_id)
        return None if index is None else self._history[index]
