"""Tests for the session controller."""

from datetime import date

import pytest

from outvoice.models.common import OperationResult, SessionState, ViewMode
from outvoice.models.settings import Settings
from outvoice.services import MemoryInvoiceStore
from outvoice.session import NEW_CLIENT_NAME, SessionController


def test_new_session_is_empty(session):
    assert session.active_invoice is None
    assert session.history == []
    assert session.state is SessionState.NO_ACTIVE_INVOICE
    assert session.settings == Settings()


def test_create_new_uses_defaults(session):
    invoice = session.create_new()

    assert session.active_invoice is invoice
    assert session.state is SessionState.EDITING_INVOICE
    assert invoice.invoice_number.startswith("INV-202503-")
    assert invoice.issue_date == date(2025, 3, 14)
    assert invoice.due_date == date(2025, 4, 13)
    assert invoice.issuer_name == "Your Company"
    assert invoice.client_name == NEW_CLIENT_NAME
    assert invoice.tax_rate_percent == 5.0
    assert invoice.theme_id == "modern"
    assert invoice.currency_code == "USD"
    assert len(invoice.items) == 1
    assert invoice.total == pytest.approx(105.0)


def test_create_new_does_not_touch_store(session, store):
    session.create_new()

    assert session.history == []
    assert store.writes == 0
    assert session.has_unsaved_changes


def test_create_new_with_explicit_settings(session):
    invoice = session.create_new(Settings("Acme", "1 Road", 0, "GBP"))

    assert invoice.issuer_name == "Acme"
    assert invoice.currency_code == "GBP"
    assert invoice.tax_rate_percent == 0


def test_save_without_active_invoice(session, store):
    assert session.save() is OperationResult.NO_ACTIVE_INVOICE
    assert store.writes == 0


def test_saves_are_newest_first(session, store):
    first = session.create_new()
    assert session.save() is OperationResult.CREATED
    second = session.create_new()
    assert session.save() is OperationResult.CREATED

    assert [invoice.id for invoice in session.history] == [second.id, first.id]
    assert [invoice.id for invoice in store.load_history()] == [second.id, first.id]


def test_repeated_save_is_idempotent(session, store):
    session.create_new()
    session.save()

    assert session.save() is OperationResult.UPDATED
    assert len(session.history) == 1
    assert len(store.load_history()) == 1


def test_update_replaces_in_place(session, store):
    first = session.create_new()
    session.save()
    session.create_new()
    session.save()

    session.load(first.id)
    session.update_invoice(client_name="Renamed")
    session.save()

    history = session.history
    assert history[1].id == first.id
    assert history[1].client_name == "Renamed"
    assert store.load_history()[1].client_name == "Renamed"


def test_history_holds_snapshots(session):
    invoice = session.create_new()
    session.save()

    session.update_invoice(client_name="Draft change")

    assert session.history[0].client_name == NEW_CLIENT_NAME
    assert session.has_unsaved_changes
    session.save()
    assert session.history[0].client_name == "Draft change"
    assert session.history[0] is not invoice
    assert not session.has_unsaved_changes


def test_load_activates_copy(session):
    invoice = session.create_new()
    session.save()
    session.create_new()

    loaded = session.load(invoice.id)

    assert loaded == session.history[0]
    assert loaded is not session.history[0]
    assert session.active_invoice is loaded


def test_load_unknown_id_is_noop(session):
    active = session.create_new()

    assert session.load("missing") is None
    assert session.active_invoice is active


def test_delete_unknown_id(session, store):
    assert session.delete("missing") is OperationResult.NOT_FOUND
    assert store.writes == 0


def test_delete_active_activates_newest_remaining(session, store):
    older = session.create_new()
    session.save()
    newer = session.create_new()
    session.save()

    assert session.delete(newer.id) is OperationResult.DELETED

    assert session.active_invoice.id == older.id
    assert [invoice.id for invoice in store.load_history()] == [older.id]


def test_delete_last_clears_active(session):
    invoice = session.create_new()
    session.save()

    session.delete(invoice.id)

    assert session.active_invoice is None
    assert session.history == []
    assert session.state is SessionState.NO_ACTIVE_INVOICE


def test_delete_other_keeps_active(session):
    older = session.create_new()
    session.save()
    newer = session.create_new()
    session.save()

    session.delete(older.id)

    assert session.active_invoice.id == newer.id


def test_set_theme(session):
    assert session.set_theme("bold") is OperationResult.NO_ACTIVE_INVOICE

    session.create_new()
    session.save()

    assert session.set_theme("bold") is OperationResult.UPDATED
    assert session.active_invoice.theme_id == "bold"
    assert session.history[0].theme_id == "modern"


def test_search_history(session):
    session.create_new()
    session.update_invoice(client_name="Acme Corp")
    session.save()
    session.create_new()
    session.update_invoice(client_name="Globex", invoice_number="INV-TEST-42")
    session.save()

    assert [i.client_name for i in session.search_history("acme")] == ["Acme Corp"]
    assert [i.client_name for i in session.search_history("test-42")] == ["Globex"]
    assert len(session.search_history("")) == 2
    assert session.search_history("nobody") == []


def test_update_invoice_coerces_values(session):
    session.create_new()

    session.update_invoice(tax_rate_percent="abc", issue_date="2025-06-01")
    invoice = session.active_invoice
    assert invoice.tax_rate_percent == 0.0
    assert invoice.issue_date == date(2025, 6, 1)

    session.update_invoice(due_date="not a date", tax_rate_percent="7.5")
    assert invoice.due_date == date(2025, 4, 13)
    assert invoice.tax_rate_percent == 7.5


def test_update_invoice_rejects_unknown_field(session):
    session.create_new()

    with pytest.raises(ValueError):
        session.update_invoice(total=10)


def test_editing_without_active_invoice(session):
    assert session.update_invoice(notes="x") is OperationResult.NO_ACTIVE_INVOICE
    assert session.add_item() is None
    assert session.remove_item("x") is OperationResult.NO_ACTIVE_INVOICE
    assert session.update_item("x", quantity=1) is OperationResult.NO_ACTIVE_INVOICE


def test_item_editing(session):
    invoice = session.create_new()
    item = session.add_item()

    result = session.update_item(item.id, quantity="3", unit_price="10")

    assert result is OperationResult.UPDATED
    assert item.line_total == 30
    assert session.update_item("missing", quantity=1) is OperationResult.NOT_FOUND
    assert session.remove_item(item.id) is OperationResult.UPDATED
    assert session.remove_item(item.id) is OperationResult.NOT_FOUND
    assert len(invoice.items) == 1

    with pytest.raises(ValueError):
        session.update_item(invoice.items[0].id, price=5)


def test_start_activates_newest_saved(make_invoice, clock, rng):
    store = MemoryInvoiceStore(invoices=[make_invoice("b"), make_invoice("a")])
    controller = SessionController(store, clock=clock, rng=rng)

    controller.start()

    assert controller.active_invoice.id == "b"
    assert controller.active_invoice is not controller.history[0]
    assert not controller.has_unsaved_changes


def test_settings_view_and_save(session, store):
    session.show_settings()
    assert session.state is SessionState.SETTINGS_VIEW

    session.update_settings(default_issuer_name="Acme", default_tax_rate_percent="8")
    session.save_settings()
    session.show_invoice()

    assert session.view is ViewMode.INVOICE
    assert store.load_settings().default_tax_rate_percent == 8.0
    assert session.create_new().issuer_name == "Acme"


def test_update_settings_rejects_unknown_field(session):
    with pytest.raises(ValueError):
        session.update_settings(theme="bold")


def test_operation_result_changed():
    assert OperationResult.CREATED.changed
    assert OperationResult.DELETED.changed
    assert not OperationResult.NOT_FOUND.changed
    assert not OperationResult.NO_ACTIVE_INVOICE.changed


def test_update_invoice_currency(session):
    invoice = session.create_new()

    session.update_invoice(currency_code="EUR")
    assert invoice.currency_code == "EUR"

    session.update_invoice(currency_code="DOGE")
    assert invoice.currency_code == "EUR"


def test_update_settings_currency(session):
    session.update_settings(default_currency_code="JPY")
    session.update_settings(default_currency_code="XYZ")

    assert session.settings.default_currency_code == "JPY"


class FlakyStore(MemoryInvoiceStore):
    """Memory store whose writes can be made to fail."""

    fail = False

    def _write(self, key, value):
        if self.fail:
            raise OSError("disk full")
        super()._write(key, value)


@pytest.fixture
def flaky_session(clock, rng):
    store = FlakyStore()
    controller = SessionController(store, clock=clock, rng=rng)
    controller.start()
    return controller, store


def test_failed_save_leaves_history_unchanged(flaky_session):
    session, store = flaky_session
    first = session.create_new()
    session.save()
    session.create_new()
    store.fail = True

    with pytest.raises(OSError):
        session.save()

    assert [invoice.id for invoice in session.history] == [first.id]


def test_failed_update_keeps_saved_copy(flaky_session):
    session, store = flaky_session
    session.create_new()
    session.save()
    session.update_invoice(client_name="Changed")
    store.fail = True

    with pytest.raises(OSError):
        session.save()

    assert session.history[0].client_name == NEW_CLIENT_NAME
    assert session.has_unsaved_changes


def test_failed_delete_keeps_history_and_active(flaky_session):
    session, store = flaky_session
    invoice = session.create_new()
    session.save()
    store.fail = True

    with pytest.raises(OSError):
        session.delete(invoice.id)

    assert [saved.id for saved in session.history] == [invoice.id]
    assert session.active_invoice.id == invoice.id
