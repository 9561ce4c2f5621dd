"""Tests for the invoice stores and the settings service."""

import json

from outvoice.models.settings import DEFAULT_TAX_RATE_PERCENT, Settings
from outvoice.services import (
    HISTORY_KEY,
    SETTINGS_KEY,
    DiskInvoiceStore,
    MemoryInvoiceStore,
    SettingsService,
)


def test_empty_store_has_no_history(store):
    assert store.load_history() == []
    assert store.load_settings() is None


def test_history_round_trip_keeps_order(store, make_invoice):
    invoices = [make_invoice("b"), make_invoice("a")]

    store.save_history(invoices)

    assert [invoice.id for invoice in store.load_history()] == ["b", "a"]
    assert store.load_history() == invoices


def test_history_is_written_as_json_array(store, make_invoice):
    store.save_history([make_invoice()])

    records = json.loads(store.values[HISTORY_KEY])

    assert isinstance(records, list)
    assert records[0]["id"] == "inv-1"
    assert records[0]["date"] == "2025-01-10"


def test_malformed_history_is_empty():
    store = MemoryInvoiceStore(values={HISTORY_KEY: "{not json"})

    assert store.load_history() == []


def test_non_list_history_is_empty():
    store = MemoryInvoiceStore(values={HISTORY_KEY: '{"id": "x"}'})

    assert store.load_history() == []


def test_bad_record_is_skipped():
    records = [{"id": "good", "date": "2025-01-01"}, "junk", {"clientName": "no id"}]
    store = MemoryInvoiceStore(values={HISTORY_KEY: json.dumps(records)})

    assert [invoice.id for invoice in store.load_history()] == ["good"]


def test_seeded_store_does_not_count_writes(make_invoice):
    store = MemoryInvoiceStore(invoices=[make_invoice()])

    assert store.writes == 0
    assert len(store.load_history()) == 1


def test_settings_round_trip(store):
    settings = Settings("Acme", "1 Road", 12.5, "EUR")

    store.save_settings(settings)

    assert json.loads(store.values[SETTINGS_KEY]) == {
        "fromName": "Acme",
        "fromAddress": "1 Road",
        "gstRate": 12.5,
        "currency": "EUR",
    }
    assert store.load_settings() == settings


def test_malformed_settings_are_ignored():
    assert MemoryInvoiceStore(values={SETTINGS_KEY: "[1, 2]"}).load_settings() is None
    assert MemoryInvoiceStore(values={SETTINGS_KEY: "nope"}).load_settings() is None


def test_partial_settings_fill_defaults():
    store = MemoryInvoiceStore(values={SETTINGS_KEY: '{"fromName": "Solo"}'})

    settings = store.load_settings()

    assert settings.default_issuer_name == "Solo"
    assert settings.default_tax_rate_percent == DEFAULT_TAX_RATE_PERCENT
    assert settings.default_currency_code == "USD"


def test_settings_service_defaults(store):
    assert SettingsService(store).load() == Settings()


def test_settings_service_save(store):
    service = SettingsService(store)

    service.save(Settings(default_issuer_name="Acme"))

    assert service.load().default_issuer_name == "Acme"


def test_disk_store_survives_reopen(tmp_path, make_invoice):
    store = DiskInvoiceStore(tmp_path / "store")
    store.save_history([make_invoice("b"), make_invoice("a")])
    store.save_settings(Settings(default_issuer_name="Acme"))
    store.close()

    reopened = DiskInvoiceStore(tmp_path / "store")
    try:
        assert [invoice.id for invoice in reopened.load_history()] == ["b", "a"]
        assert reopened.load_settings().default_issuer_name == "Acme"
    finally:
        reopened.close()


def test_disk_store_uses_data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("OUTVOICE_DATA_DIR", str(tmp_path))

    store = DiskInvoiceStore()
    try:
        assert store.store_dir == tmp_path / "store"
        assert store.load_history() == []
    finally:
        store.close()


def test_oversized_integer_amount_reads_as_zero():
    huge = "1" + "0" * 400
    history = f'[{{"id": "a", "items": [{{"quantity": {huge}, "price": 1}}]}}]'
    store = MemoryInvoiceStore(values={HISTORY_KEY: history})

    invoices = store.load_history()

    assert [invoice.id for invoice in invoices] == ["a"]
    assert invoices[0].items[0].quantity == 0.0


def test_integer_literal_over_digit_limit_is_empty_history():
    history = '[{"id": "a", "gstRate": ' + "1" * 5000 + "}]"
    store = MemoryInvoiceStore(values={HISTORY_KEY: history})

    assert store.load_history() == []


def test_deeply_nested_history_is_empty():
    store = MemoryInvoiceStore(values={HISTORY_KEY: "[" * 100000 + "]" * 100000})

    assert store.load_history() == []


def test_oversized_settings_values_fall_back():
    huge = "1" + "0" * 400
    store = MemoryInvoiceStore(values={SETTINGS_KEY: f'{{"gstRate": {huge}}}'})

    assert store.load_settings().default_tax_rate_percent == 0.0

    store.values[SETTINGS_KEY] = '{"gstRate": ' + "1" * 5000 + "}"
    assert store.load_settings() is None


def test_unknown_settings_currency_falls_back():
    store = MemoryInvoiceStore(values={SETTINGS_KEY: '{"currency": "XYZ"}'})

    assert store.load_settings().default_currency_code == "USD"
