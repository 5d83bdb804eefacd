"""
Qt State Store
==============
The Qt-aware owner of the application state.

Why is this file needed?
------------------------
1. Wiring: It builds the HistoryManager, hands it to the ModelManager and
   puts a CommandExecutor in front of both, so every command is recorded.
2. Signals: The model only knows plain listeners. This class re-emits the
   filtered views and the undo/redo availability as Qt signals, so the
   views can connect to them like to any other widget signal.

Classes:
    Store: The QObject holding the model and emitting the change signals.
"""
from __future__ import annotations

from typing import Callable, Optional
import logging

from PySide6.QtCore import QObject, Signal

from clinicbook.controller.executor import CommandExecutor, CommandResult
from clinicbook.model.address_book import ReadOnlyAddressBook
from clinicbook.model.history import HistoryManager
from clinicbook.model.model_manager import ModelManager
from clinicbook.model.user_prefs import UserPrefs

logger = logging.getLogger(__name__)


class Store(QObject):
    """
    Central state store with signals for view sync.
    Owns the HistoryManager, the ModelManager and the CommandExecutor.
    """
    patients_changed = Signal(object)
    appointments_changed = Signal(object)
    bills_changed = Signal(object)

    # (can_undo, can_redo)
    history_changed = Signal(bool, bool)

    def __init__(self, address_book: Optional[ReadOnlyAddressBook] = None,
                 user_prefs: Optional[UserPrefs] = None) -> None:
        super().__init__()
        self.history = HistoryManager()
        self.model = ModelManager(address_book, user_prefs, self.history)
        self.executor = CommandExecutor(self.model)

        self.model.filtered_patient_list.subscribe(
            lambda: self.patients_changed.emit(self.model.filtered_patient_list))
        self.model.filtered_appointment_list.subscribe(
            lambda: self.appointments_changed.emit(self.model.filtered_appointment_list))
        self.model.filtered_bill_list.subscribe(
            lambda: self.bills_changed.emit(self.model.filtered_bill_list))

    def can_undo(self) -> bool:
        return self.history.can_undo()

    def can_redo(self) -> bool:
        return self.history.can_redo()

    def _emit_history(self) -> None:
        self.history_changed.emit(self.can_undo(), self.can_redo())

    def execute(self, action: Callable[[ModelManager], None], feedback: str = "") -> CommandResult:
        result = self.executor.execute(action, feedback)
        self._emit_history()
        return result

    def undo(self) -> CommandResult:
        """Raises CommandError when there is nothing to undo."""
        result = self.executor.undo()
        self._emit_history()
        return result

    def redo(self) -> CommandResult:
        """Raises CommandError when there is nothing to redo."""
        result = self.executor.redo()
        self._emit_history()
        return result
