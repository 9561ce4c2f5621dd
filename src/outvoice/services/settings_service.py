"""
Settings load/save on top of an InvoiceStore.

There is no partial update: save() always writes the whole settings record.
"""

from outvoice.lib import logs
from outvoice.models.settings import Settings
from outvoice.services.invoice_store import InvoiceStore

LOG = logs.logger(__file__)


class SettingsService:
    """Reads and writes the settings singleton."""

    def __init__(self, store: InvoiceStore) -> None:
        self._store = store

    def load(self) -> Settings:
        """Return the stored settings, or the built-in defaults."""
        settings = self._store.load_settings()
        if settings is None:
            LOG.info("No stored settings, using defaults")
            return Settings()
        return settings

    def save(self, settings: Settings) -> None:
        """Overwrite the stored settings with settings."""
        self._store.save_settings(settings)
        LOG.info("Settings saved")
