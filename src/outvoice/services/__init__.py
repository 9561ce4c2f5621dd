"""
Store factory for OutVoice.

This module provides the get_invoice_store() factory function that returns
the appropriate InvoiceStore implementation based on configuration.

Available Implementations:
- disk: diskcache-backed store in the data directory (default)
- memory: empty in-process store, nothing survives a restart
- demo: in-process store seeded with sample invoices

The store is cached at the module level, so the same instance is reused
for the lifetime of the application. Configure via the OUTVOICE_STORE
environment variable.
"""

import os
from functools import cache
from typing import Callable, Dict

from outvoice.lib import logs
from outvoice.services.invoice_store import HISTORY_KEY, SETTINGS_KEY, InvoiceStore
from outvoice.services.invoice_store_disk import DiskInvoiceStore
from outvoice.services.invoice_store_memory import MemoryInvoiceStore
from outvoice.services.settings_service import SettingsService

LOG = logs.logger(__file__)

STORE_ENV = "OUTVOICE_STORE"


def _demo_store() -> MemoryInvoiceStore:
    from outvoice.data.demo_invoices import DEMO_INVOICES

    return MemoryInvoiceStore(invoices=DEMO_INVOICES)


_STORE_REGISTRY: Dict[str, Callable[[], InvoiceStore]] = {
    "disk": lambda: DiskInvoiceStore(),
    "memory": lambda: MemoryInvoiceStore(),
    "demo": _demo_store,
}


@cache
def get_invoice_store(kind: str | None = None) -> InvoiceStore:
    """Return the configured invoice store implementation."""
    resolved_kind = (kind or os.getenv(STORE_ENV, "disk")).lower()
    LOG.info("get_invoice_store - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _STORE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown invoice store kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


__all__ = [
    "HISTORY_KEY",
    "SETTINGS_KEY",
    "DiskInvoiceStore",
    "InvoiceStore",
    "MemoryInvoiceStore",
    "STORE_ENV",
    "SettingsService",
    "get_invoice_store",
]
