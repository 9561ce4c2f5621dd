"""
In-memory implementation of InvoiceStore.

Useful for:
- Unit tests that need a store double without touching disk
- Demo mode, seeded with sample invoices

Values are kept as JSON text, exactly as the disk store writes them, so the
encode/decode path is exercised the same way.
"""

from typing import Mapping, Sequence

from outvoice.models.invoice import Invoice
from outvoice.services.invoice_store import InvoiceStore


class MemoryInvoiceStore(InvoiceStore):
    """
    Invoice store held in a process-local dictionary.

    Attributes:
        values: Raw text stored per key. Tests may read or corrupt it directly.
    """

    def __init__(
        self,
        invoices: Sequence[Invoice] | None = None,
        values: Mapping[str, str] | None = None,
    ) -> None:
        """
        Initialize the store.

        Args:
            invoices: Optional history to seed the store with.
            values: Optional raw key/value text, for simulating stored data.
        """
        self.values: dict[str, str] = dict(values or {})
        self.writes = 0
        if invoices:
            self.save_history(invoices)
            self.writes = 0

    def _read(self, key: str) -> str | None:
        return self.values.get(key)

    def _write(self, key: str, value: str) -> None:
        self.values[key] = value
        self.writes += 1
