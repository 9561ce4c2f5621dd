"""
Common state types for the OutVoice session.

These small enums let the session controller report what an operation did
without raising: callers (the Reflex state, tests) branch on the result to
decide whether to notify the user.
"""

from enum import Enum


class OperationResult(str, Enum):
    """Outcome of a session mutation."""

    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    NO_ACTIVE_INVOICE = "no_active_invoice"

    @property
    def changed(self) -> bool:
        """True when the operation modified session state."""
        return self in (
            OperationResult.CREATED,
            OperationResult.UPDATED,
            OperationResult.DELETED,
        )


class ViewMode(str, Enum):
    """Which page of the application is showing."""

    INVOICE = "invoice"
    SETTINGS = "settings"


class SessionState(str, Enum):
    """High level state of the session."""

    NO_ACTIVE_INVOICE = "no_active_invoice"
    EDITING_INVOICE = "editing_invoice"
    SETTINGS_VIEW = "settings_view"
