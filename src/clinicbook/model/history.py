"""
Undo/Redo History
=================
Versioned full-state history of the address book and of the three list
filters.

Why is this file needed?
------------------------
1. Undo/Redo: It keeps the stacks of Snapshots and filter predicates that let
   the model travel back and forth.
2. Ownership: The stacks are owned here only. The ModelManager receives a
   HistoryManager at construction and talks to it through the methods below.

Push discipline
---------------
The orchestrator records the state after EVERY command, undo and redo
included. The top of the undo stack is therefore always "the state as of
right now" and the previous state sits one entry below it. `undo()` relies
on this: the target is the second-to-last entry, and both the top entry and
the target are popped (the orchestrator pushes the restored state back when
it records after the undo).

Classes:
    FilterState: The predicate of each filtered list at one instant.
    HistoryManager: The undo and redo stacks.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple
import logging

from clinicbook.model.address_book import Snapshot
from clinicbook.model.entities import Appointment, Bill, Patient
from clinicbook.model.exceptions import NoPriorHistoryError, NoRedoAvailableError

logger = logging.getLogger(__name__)

PatientPredicate = Optional[Callable[[Patient], bool]]
AppointmentPredicate = Optional[Callable[[Appointment], bool]]
BillPredicate = Optional[Callable[[Bill], bool]]


@dataclass(frozen=True)
class FilterState:
    """One predicate per collection. None means "show all"."""
    patients: PatientPredicate = None
    appointments: AppointmentPredicate = None
    bills: BillPredicate = None

    def shows_all(self) -> bool:
        return self.patients is None and self.appointments is None and self.bills is None


SHOW_ALL = FilterState()


class HistoryManager:
    """
    Two sets of stacks: the undo side and the mirrored redo side.
    Each side holds address-book Snapshots and, per collection, the filter
    predicates that were active when the snapshot was taken.
    """

    def __init__(self) -> None:
        self._undo_snapshots: List[Snapshot] = []
        self._undo_patient_filters: List[PatientPredicate] = []
        self._undo_appointment_filters: List[AppointmentPredicate] = []
        self._undo_bill_filters: List[BillPredicate] = []

        self._redo_snapshots: List[Snapshot] = []
        self._redo_patient_filters: List[PatientPredicate] = []
        self._redo_appointment_filters: List[AppointmentPredicate] = []
        self._redo_bill_filters: List[BillPredicate] = []

    # --- Sizes ---

    @property
    def undo_size(self) -> int:
        return len(self._undo_snapshots)

    @property
    def redo_size(self) -> int:
        return len(self._redo_snapshots)

    def can_undo(self) -> bool:
        return self.undo_size >= 2

    def can_redo(self) -> bool:
        return self.redo_size >= 1

    def latest(self) -> Snapshot:
        """The most recently recorded snapshot (the "current" entry)."""
        if not self._undo_snapshots:
            raise NoPriorHistoryError()
        return self._undo_snapshots[-1]

    def latest_filters(self) -> FilterState:
        """The filters recorded together with `latest()`."""
        if not self._undo_snapshots:
            raise NoPriorHistoryError()
        return FilterState(
            patients=self._undo_patient_filters[-1],
            appointments=self._undo_appointment_filters[-1],
            bills=self._undo_bill_filters[-1],
        )

    # --- Recording ---

    def record_undo(self, snapshot: Snapshot, filters: FilterState = SHOW_ALL,
                    clear_redo: bool = True) -> None:
        """
        Pushes a state onto the undo side.

        Args:
            snapshot: The address-book state to remember.
            filters: The filters active for that state.
            clear_redo: A new forward action invalidates the redo branch.
                History commands (undo/redo) record with False.
        """
        self._undo_snapshots.append(snapshot)
        self._undo_patient_filters.append(filters.patients)
        self._undo_appointment_filters.append(filters.appointments)
        self._undo_bill_filters.append(filters.bills)
        if clear_redo and self._redo_snapshots:
            logger.debug(f"Discarding {self.redo_size} redo entries.")
            self._clear_redo()
        logger.debug(f"Recorded undo entry #{self.undo_size}.")

    def record_redo(self, snapshot: Snapshot, filters: FilterState = SHOW_ALL) -> None:
        self._redo_snapshots.append(snapshot)
        self._redo_patient_filters.append(filters.patients)
        self._redo_appointment_filters.append(filters.appointments)
        self._redo_bill_filters.append(filters.bills)
        logger.debug(f"Recorded redo entry #{self.redo_size}.")

    def clear(self) -> None:
        self._undo_snapshots.clear()
        self._undo_patient_filters.clear()
        self._undo_appointment_filters.clear()
        self._undo_bill_filters.clear()
        self._clear_redo()

    def _clear_redo(self) -> None:
        self._redo_snapshots.clear()
        self._redo_patient_filters.clear()
        self._redo_appointment_filters.clear()
        self._redo_bill_filters.clear()

    # --- Travelling ---

    def undo(self, current: Snapshot, current_filters: FilterState) -> Tuple[Snapshot, FilterState]:
        """
        Steps one action back.

        Args:
            current: The address-book state before the undo.
            current_filters: The filters active before the undo.

        Returns:
            The Snapshot and FilterState to install.

        Raises:
            NoPriorHistoryError: if the history is too short, or if the
                previous state equals the current one while no filter is
                active (the undo would not change anything).
        """
        if self.undo_size < 2:
            raise NoPriorHistoryError()

        target = self._undo_snapshots[-2]
        target_filters = FilterState(
            patients=self._undo_patient_filters[-2],
            appointments=self._undo_appointment_filters[-2],
            bills=self._undo_bill_filters[-2],
        )
        should_skip = target == current and current_filters.shows_all()
        if should_skip:
            raise NoPriorHistoryError()

        self.record_redo(current, current_filters)
        # Pop the "current" entry, then the restored one
        self._pop_undo()
        self._pop_undo()
        logger.info(f"Undo: {self.undo_size} undo / {self.redo_size} redo entries left.")
        return target, target_filters

    def redo(self) -> Tuple[Snapshot, FilterState]:
        """
        Steps one undone action forward.

        Raises:
            NoRedoAvailableError: if there is nothing to redo.
        """
        if not self._redo_snapshots:
            raise NoRedoAvailableError()

        snapshot = self._redo_snapshots.pop()
        filters = FilterState(
            patients=self._redo_patient_filters.pop(),
            appointments=self._redo_appointment_filters.pop(),
            bills=self._redo_bill_filters.pop(),
        )
        logger.info(f"Redo: {self.undo_size} undo / {self.redo_size} redo entries left.")
        return snapshot, filters

    def _pop_undo(self) -> None:
        self._undo_snapshots.pop()
        self._undo_patient_filters.pop()
        self._undo_appointment_filters.pop()
        self._undo_bill_filters.pop()
