"""
Data models and serialization helpers for OutVoice.

This package provides:
- Invoice domain models (Invoice, InvoiceItem) and derived totals
- Default settings (Settings)
- Session result and view enums (OperationResult, ViewMode, SessionState)
- Serialization/deserialization of the stored JSON records

All models use Python dataclasses. Reflex-compatible mirrors live in
``outvoice.models.reflex_models`` and are only imported by the UI.
"""

from outvoice.models.common import OperationResult, SessionState, ViewMode
from outvoice.models.invoice import (
    CURRENCY_CODES,
    Invoice,
    InvoiceItem,
    InvoiceRecordError,
    compute_subtotal,
    compute_tax,
    compute_total,
    deserialize_invoice,
    generate_invoice_number,
    new_id,
    serialize_invoice,
)
from outvoice.models.settings import Settings

__all__ = [
    "CURRENCY_CODES",
    "Invoice",
    "InvoiceItem",
    "InvoiceRecordError",
    "OperationResult",
    "SessionState",
    "Settings",
    "ViewMode",
    "compute_subtotal",
    "compute_tax",
    "compute_total",
    "deserialize_invoice",
    "generate_invoice_number",
    "new_id",
    "serialize_invoice",
]
