"""
OutVoice: a local, single-user invoice generator built with Reflex.

This package provides a form-driven invoice editor with a themed, printable
preview, plus a saved history and default settings kept in a local store.

Subpackages:
- components: Reflex UI components
- models: Invoice and settings data models and serialization
- services: Persistence stores and the settings service
- data: Demo fixtures
- lib: Logging, JSON and path helpers

Main entry points:
- session.SessionController: all invoice and history operations
- document.build_document(): display model for an invoice
- app.app: The Reflex application instance
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
