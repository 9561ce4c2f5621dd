"""
Abstract base class defining the invoice persistence contract.

The store is a two-key durable map: ``invoices`` holds the JSON array of
history records and ``settings`` holds the settings object. Backends only
implement raw text reads and writes; decoding, date rehydration and
fail-soft recovery live here so every backend behaves identically.

Implementations:
- DiskInvoiceStore: diskcache-backed store in the user's data directory
- MemoryInvoiceStore: in-process dict, used by tests and demo mode
"""

from abc import ABC, abstractmethod
from typing import Sequence

from outvoice.lib import logs, objects
from outvoice.models.invoice import (
    Invoice,
    InvoiceRecordError,
    deserialize_invoice,
    serialize_invoice,
)
from outvoice.models.settings import Settings

LOG = logs.logger(__file__)

HISTORY_KEY = "invoices"
SETTINGS_KEY = "settings"

# JSONDecodeError is a ValueError; so is an over-long integer literal.
# Deeply nested arrays exhaust the decoder stack.
_DECODE_ERRORS = (ValueError, UnicodeDecodeError, RecursionError)
_RECORD_ERRORS = (InvoiceRecordError, ValueError, TypeError, OverflowError)


class InvoiceStore(ABC):
    """
    Abstract base class for invoice persistence.

    Subclasses implement _read() and _write() over their storage medium.
    Whole records are always overwritten; there are no partial updates.
    """

    @abstractmethod
    def _read(self, key: str) -> str | None:
        """Return the raw text stored under key, or None if absent."""

    @abstractmethod
    def _write(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""

    def close(self) -> None:
        """Release any resources held by the backend."""

    def load_history(self) -> list[Invoice]:
        """
        Load the saved invoice history, newest first.

        Missing or malformed values yield an empty history. Records that
        cannot be rebuilt are skipped so one bad entry does not hide the rest.

        Returns:
            List of Invoice objects with dates rehydrated.
        """
        try:
            payload = objects.from_json(self._read(HISTORY_KEY))
        except _DECODE_ERRORS:
            LOG.warning("Stored invoice history is not valid JSON", exc_info=True)
            return []
        if payload is None:
            return []
        if not isinstance(payload, list):
            LOG.warning(
                "Stored invoice history is a %s, expected a list",
                type(payload).__name__,
            )
            return []

        invoices: list[Invoice] = []
        for index, record in enumerate(payload):
            try:
                invoices.append(deserialize_invoice(record))
            except _RECORD_ERRORS:
                LOG.warning("Skipping invoice record %s", index, exc_info=True)
        LOG.debug("Loaded %s invoices", len(invoices))
        return invoices

    def save_history(self, invoices: Sequence[Invoice]) -> None:
        """Serialize the full history and overwrite the stored copy."""
        records = [serialize_invoice(invoice) for invoice in invoices]
        self._write(HISTORY_KEY, objects.to_json(records))
        LOG.debug("Saved %s invoices", len(records))

    def load_settings(self) -> Settings | None:
        """Return the stored settings, or None if missing or malformed."""
        try:
            payload = objects.from_json(self._read(SETTINGS_KEY))
        except _DECODE_ERRORS:
            LOG.warning("Stored settings are not valid JSON", exc_info=True)
            return None
        if not isinstance(payload, dict):
            if payload is not None:
                LOG.warning(
                    "Stored settings are a %s, expected an object",
                    type(payload).__name__,
                )
            return None
        try:
            return Settings.from_dict(payload)
        except _RECORD_ERRORS:
            LOG.warning("Stored settings could not be read", exc_info=True)
            return None

    def save_settings(self, settings: Settings) -> None:
        """Overwrite the stored settings record."""
        self._write(SETTINGS_KEY, objects.to_json(settings.to_dict()))
