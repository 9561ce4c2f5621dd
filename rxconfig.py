"""Reflex configuration for the OutVoice application."""

import os

import reflex as rx

# Get port from environment
APP_PORT = int(os.getenv("OUTVOICE_PORT", "3000"))

config = rx.Config(
    app_name="outvoice",
    # Use the src directory structure
    app_module_import="outvoice.app",
    frontend_port=APP_PORT,
)
