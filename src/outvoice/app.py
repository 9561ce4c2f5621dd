"""
Reflex application entry point for OutVoice.

This module initializes the Reflex app and defines the main page layout.
"""

import os

import reflex as rx

from outvoice.components import invoice_page, settings_page, sidebar
from outvoice.lib import logs
from outvoice.models.common import ViewMode
from outvoice.services import STORE_ENV
from outvoice.state import APP_TITLE, InvoiceState

LOG = logs.logger(__file__)

# Configuration from environment
APP_PORT = int(os.getenv("OUTVOICE_PORT", "3000"))
LOG.info("%s: %s", STORE_ENV, os.getenv(STORE_ENV, "disk"))

_FONT_URL = (
    "https://fonts.googleapis.com/css2?family=Lato:wght@400;700"
    "&family=Merriweather:wght@400;700&family=Montserrat:wght@400;700"
    "&family=Playfair+Display:wght@400;700&family=Roboto:wght@400;500;700"
    "&display=swap"
)


def index() -> rx.Component:
    """
    Build the main page layout.

    Returns:
        The complete page with sidebar and the invoice or settings view.
    """
    return rx.box(
        sidebar(),
        rx.box(
            rx.cond(
                InvoiceState.view == ViewMode.SETTINGS.value,
                settings_page(),
                invoice_page(),
            ),
            class_name="app-container",
        ),
        class_name="app-shell",
    )


# Create the Reflex app
app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
    ),
    stylesheets=[
        _FONT_URL,
        "/styles.css",
    ],
)

# Add the index page
app.add_page(
    index,
    title=APP_TITLE,
    on_load=InvoiceState.on_load,
)


def main() -> None:
    """Entrypoint used via `uv run outvoice`."""
    # Note: `reflex run` is the usual way to start the app
    import subprocess
    import sys

    subprocess.run(
        [sys.executable, "-m", "reflex", "run", "--frontend-port", str(APP_PORT)]
    )


if __name__ == "__main__":
    main()
