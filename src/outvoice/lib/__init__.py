"""
Local library modules shared by the OutVoice core and UI.

Modules:
    logs: Logging utilities
    objects: JSON serialization helpers
    paths: Data directory resolution
"""

from outvoice.lib import logs, objects, paths

__all__ = ["logs", "objects", "paths"]
