"""
Command Executor
================
Runs commands against the ModelManager and records the history after each one.

Why is this file needed?
------------------------
The undo arithmetic in `HistoryManager` only holds if the state is recorded
after every command. This class is the single place where that happens:
1. Forward commands are recorded and truncate the redo branch.
2. Undo and redo are recorded without touching the redo branch.
3. History failures are turned into a CommandError carrying the message the
   user should see. Nothing is recorded for a failed command.

Classes:
    CommandResult: Feedback of a successful command.
    CommandError: Failure shown to the user.
    CommandExecutor: The runner.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable
import logging

from clinicbook.model.exceptions import HistoryError
from clinicbook.model.model_manager import ModelManager

logger = logging.getLogger(__name__)

UNDO_SUCCESS_MESSAGE = "Undo success!"
REDO_SUCCESS_MESSAGE = "Redo success!"


@dataclass(frozen=True)
class CommandResult:
    feedback: str


class CommandError(Exception):
    """A command failed in a way the user should be told about."""


class CommandExecutor:
    def __init__(self, model: ModelManager) -> None:
        self.model = model
        # The initial state is the bottom of the undo stack
        self.model.update_history()

    def execute(self, action: Callable[[ModelManager], None], feedback: str = "") -> CommandResult:
        """
        Runs a forward (state-changing or filter-changing) command.

        Exceptions raised by `action` propagate and nothing is recorded.
        A command that changed neither the store nor a filter is not
        recorded either.
        """
        action(self.model)
        if self._changed_since_last_record():
            self.model.update_history(clear_redo=True)
        else:
            logger.debug("Command changed nothing; history left as is.")
        logger.info(f"Command executed: {feedback or getattr(action, '__name__', 'action')}")
        return CommandResult(feedback)

    def _changed_since_last_record(self) -> bool:
        history = self.model.history
        if history.undo_size == 0:
            return True
        return (self.model.address_book.snapshot() != history.latest()
                or self.model.current_filters() != history.latest_filters())

    def undo(self) -> CommandResult:
        try:
            self.model.undo()
        except HistoryError as e:
            logger.warning(f"Undo refused: {e}")
            raise CommandError(str(e)) from e
        self.model.update_history(clear_redo=False)
        logger.info("Undo executed.")
        return CommandResult(UNDO_SUCCESS_MESSAGE)

    def redo(self) -> CommandResult:
        try:
            self.model.redo()
        except HistoryError as e:
            logger.warning(f"Redo refused: {e}")
            raise CommandError(str(e)) from e
        self.model.update_history(clear_redo=False)
        logger.info("Redo executed.")
        return CommandResult(REDO_SUCCESS_MESSAGE)
