"""
Path utilities for OutVoice.

Resolves the directory that holds the local invoice store.
"""

import os
from pathlib import Path

DATA_DIR_ENV = "OUTVOICE_DATA_DIR"


def data_dir() -> Path:
    """
    Return the directory used for persisted invoices and settings.

    Honors OUTVOICE_DATA_DIR when set, otherwise uses ~/.outvoice.
    The directory is created if it does not exist.

    Returns:
        Path object pointing to the data directory.
    """
    configured = os.environ.get(DATA_DIR_ENV)
    base = Path(configured).expanduser() if configured else Path.home() / ".outvoice"
    base.mkdir(parents=True, exist_ok=True)
    return base
