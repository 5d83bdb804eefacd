"""
History Errors
==============
Recoverable failures reported to the command layer.

Everything else (removing an entity that does not exist, adding a duplicate)
is a programmer error and raises ValueError at the point of failure.
"""

UNDO_FAILURE_MESSAGE = "Undo cannot be done as there was no previous action"
REDO_FAILURE_MESSAGE = "Redo cannot be done as there was no previous action"


class HistoryError(Exception):
    """Base class for undo/redo failures."""


class NoPriorHistoryError(HistoryError):
    """Raised when undo is requested but there is nothing to undo."""

    def __init__(self, message: str = UNDO_FAILURE_MESSAGE) -> None:
        super().__init__(message)


class NoRedoAvailableError(HistoryError):
    """Raised when redo is requested but the redo stack is empty."""

    def __init__(self, message: str = REDO_FAILURE_MESSAGE) -> None:
        super().__init__(message)
