"""
Disk-backed implementation of InvoiceStore.

Stores the two records in a diskcache Cache inside the data directory.
diskcache gives durable, process-safe writes: a write returns only after
SQLite has committed it, which is the acknowledgement a save waits on.
"""

from pathlib import Path

import diskcache

from outvoice.lib import logs, paths
from outvoice.services.invoice_store import InvoiceStore

LOG = logs.logger(__file__)


class DiskInvoiceStore(InvoiceStore):
    """
    Durable invoice store backed by diskcache.

    Attributes:
        store_dir: Directory holding the cache files.
    """

    def __init__(self, store_dir: str | Path | None = None) -> None:
        """
        Open (or create) the store.

        Args:
            store_dir: Directory for the cache files. Defaults to the
                       configured data directory.
        """
        self.store_dir = Path(store_dir) if store_dir else paths.data_dir() / "store"
        self._cache = diskcache.Cache(str(self.store_dir))
        LOG.info("Invoice store opened at %s", self.store_dir)

    def _read(self, key: str) -> str | None:
        value = self._cache.get(key, default=None)
        if value is None or isinstance(value, (str, bytes)):
            return value
        # Anything else was not written by this store
        LOG.warning("Ignoring non-text value stored under %s", key)
        return None

    def _write(self, key: str, value: str) -> None:
        self._cache.set(key, value)

    def close(self) -> None:
        """Close the cache and release resources."""
        self._cache.close()
