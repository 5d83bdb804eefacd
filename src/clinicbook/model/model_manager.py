"""
Model Manager (Facade)
======================
The in-memory model of the clinic, as seen by the command layer.

Why is this file needed?
------------------------
1. Cascades: Appointments and Bills hold copies of the Patient name and of
   the Appointment. Deleting or editing a parent must be propagated to the
   children, child-first on delete and propagate-then-replace on edit.
2. Views: It owns the three filtered lists the display layer shows.
3. History: It installs the Snapshots and filters supplied by the
   HistoryManager on undo/redo.

Classes:
    ModelManager: The facade over AddressBook, UserPrefs and HistoryManager.
"""
from __future__ import annotations

from typing import Callable, Optional
import logging

from clinicbook.model.address_book import AddressBook, ReadOnlyAddressBook
from clinicbook.model.entities import Appointment, Bill, Patient
from clinicbook.model.history import (
    AppointmentPredicate,
    BillPredicate,
    FilterState,
    HistoryManager,
    PatientPredicate,
)
from clinicbook.model.observable import FilteredList
from clinicbook.model.user_prefs import GuiSettings, UserPrefs

logger = logging.getLogger(__name__)

PREDICATE_SHOW_ALL = None


class ModelManager:
    """
    Represents the in-memory model of the address book data.
    Pass this instance to your Controllers and Views.
    """

    def __init__(self, address_book: Optional[ReadOnlyAddressBook] = None,
                 user_prefs: Optional[UserPrefs] = None,
                 history: Optional[HistoryManager] = None) -> None:
        logger.debug(f"Initializing with address book: {address_book} and user prefs {user_prefs}")

        self._address_book = AddressBook(address_book)
        self._user_prefs = user_prefs.copy() if user_prefs is not None else UserPrefs()
        self._history = history if history is not None else HistoryManager()

        self._filtered_patients: FilteredList[Patient] = FilteredList(self._address_book.patient_list)
        self._filtered_appointments: FilteredList[Appointment] = FilteredList(
            self._address_book.appointment_list)
        self._filtered_bills: FilteredList[Bill] = FilteredList(self._address_book.bill_list)

    # =========== UserPrefs ===========

    @property
    def user_prefs(self) -> UserPrefs:
        return self._user_prefs

    def set_user_prefs(self, user_prefs: UserPrefs) -> None:
        self._user_prefs.reset_data(user_prefs)

    @property
    def gui_settings(self) -> GuiSettings:
        return self._user_prefs.gui_settings

    def set_gui_settings(self, gui_settings: GuiSettings) -> None:
        self._user_prefs.gui_settings = gui_settings

    @property
    def address_book_file_path(self) -> str:
        return self._user_prefs.address_book_file_path

    def set_address_book_file_path(self, path: str) -> None:
        self._user_prefs.address_book_file_path = path

    # =========== AddressBook ===========

    @property
    def address_book(self) -> ReadOnlyAddressBook:
        return self._address_book

    def set_address_book(self, address_book: ReadOnlyAddressBook) -> None:
        self._address_book.reset_data(address_book)

    # --- Patients ---

    def has_patient(self, patient: Patient) -> bool:
        return self._address_book.has_patient(patient)

    def has_patient_name(self, name: str) -> bool:
        return self._address_book.has_patient_name(name)

    def add_patient(self, patient: Patient) -> None:
        self._address_book.add_patient(patient)
        self.update_filtered_patient_list(PREDICATE_SHOW_ALL)

    def delete_patient(self, target: Patient) -> None:
        self.delete_relative_appointments(target)
        self._address_book.remove_patient(target)
        logger.debug(f"Deleted patient '{target.name}'.")

    def set_patient(self, target: Patient, edited: Patient) -> None:
        """Renames the patient's appointments (and their bills) first, then the patient."""
        if not target.is_same_patient(edited) and self.has_patient(edited):
            # Checked up front so no cascade runs for a rejected edit
            raise ValueError(f"Patient '{edited.name}' already exists.")
        linked = [a for a in self._address_book.appointment_list if a.name == target.name]
        for appointment in linked:
            self.set_appointment(appointment, appointment.with_name(edited.name))
        self._address_book.set_patient(target, edited)

    def delete_relative_appointments(self, patient: Patient) -> None:
        to_delete = [a for a in self._address_book.appointment_list if a.name == patient.name]
        for appointment in to_delete:
            self.delete_appointment(appointment)
        if to_delete:
            logger.debug(f"Cascade deleted {len(to_delete)} appointment(s) of '{patient.name}'.")

    def sort_patients(self, key: Callable[[Patient], object], ascending: bool = True) -> None:
        self._address_book.sort_patients(key, ascending)

    # --- Appointments ---

    def has_appointment(self, appointment: Appointment) -> bool:
        return self._address_book.has_appointment(appointment)

    def add_appointment(self, appointment: Appointment) -> None:
        self._address_book.add_appointment(appointment)
        self.update_filtered_appointment_list(PREDICATE_SHOW_ALL)

    def delete_appointment(self, target: Appointment) -> None:
        self.delete_relative_bills(target)
        self._address_book.remove_appointment(target)

    def set_appointment(self, target: Appointment, edited: Appointment) -> None:
        """Re-points the bills of `target` to `edited` first, then replaces the appointment."""
        if not target.is_same_appointment(edited) and self.has_appointment(edited):
            # Checked up front so no bill is re-pointed for a rejected edit
            raise ValueError(f"Appointment {edited} already exists.")
        linked = [b for b in self._address_book.bill_list if b.appointment.is_same_appointment(target)]
        for bill in linked:
            self.set_bill(bill, bill.with_appointment(edited))
        self._address_book.set_appointment(target, edited)

    def delete_relative_bills(self, appointment: Appointment) -> None:
        to_delete = [b for b in self._address_book.bill_list if b.appointment == appointment]
        for bill in to_delete:
            self.delete_bill(bill)
        if to_delete:
            logger.debug(f"Cascade deleted {len(to_delete)} bill(s) of {appointment}.")

    def sort_appointments(self, key: Callable[[Appointment], object], ascending: bool = True) -> None:
        self._address_book.sort_appointments(key, ascending)

    # --- Bills ---

    def has_bill(self, bill: Bill) -> bool:
        return self._address_book.has_bill(bill)

    def add_bill(self, bill: Bill) -> None:
        self._address_book.add_bill(bill)

    def delete_bill(self, target: Bill) -> None:
        self._address_book.remove_bill(target)

    def set_bill(self, target: Bill, edited: Bill) -> None:
        self._address_book.set_bill(target, edited)

    def set_bill_as_paid(self, bill: Bill) -> None:
        self._address_book.set_bill_as_paid(bill)

    def set_bill_as_unpaid(self, bill: Bill) -> None:
        self._address_book.set_bill_as_unpaid(bill)

    def sort_bills(self, key: Callable[[Bill], object], ascending: bool = True) -> None:
        self._address_book.sort_bills(key, ascending)

    # =========== Filtered lists ===========

    @property
    def filtered_patient_list(self) -> FilteredList[Patient]:
        return self._filtered_patients

    @property
    def filtered_appointment_list(self) -> FilteredList[Appointment]:
        return self._filtered_appointments

    @property
    def filtered_bill_list(self) -> FilteredList[Bill]:
        return self._filtered_bills

    def update_filtered_patient_list(self, predicate: PatientPredicate) -> None:
        self._filtered_patients.set_predicate(predicate)

    def update_filtered_appointment_list(self, predicate: AppointmentPredicate) -> None:
        self._filtered_appointments.set_predicate(predicate)

    def update_filtered_bill_list(self, predicate: BillPredicate) -> None:
        self._filtered_bills.set_predicate(predicate)

    def select_patient(self, patient: Patient) -> None:
        """Shows only the appointments and bills of `patient`."""
        name = patient.name
        self.update_filtered_appointment_list(lambda appointment: appointment.name == name)
        self.update_filtered_bill_list(lambda bill: bill.appointment.name == name)

    def select_appointment(self, appointment: Appointment) -> None:
        """Shows only the bills of `appointment`."""
        self.update_filtered_bill_list(lambda bill: bill.appointment == appointment)

    def current_filters(self) -> FilterState:
        return FilterState(
            patients=self._filtered_patients.predicate,
            appointments=self._filtered_appointments.predicate,
            bills=self._filtered_bills.predicate,
        )

    def _apply_filters(self, filters: FilterState) -> None:
        self._filtered_patients.set_predicate(filters.patients)
        self._filtered_appointments.set_predicate(filters.appointments)
        self._filtered_bills.set_predicate(filters.bills)

    # =========== History ===========

    @property
    def history(self) -> HistoryManager:
        return self._history

    def update_history(self, clear_redo: bool = True) -> None:
        """Records the current state and filters as the newest undo entry."""
        self._history.record_undo(self._address_book.snapshot(), self.current_filters(), clear_redo)

    def update_redo_history(self) -> None:
        self._history.record_redo(self._address_book.snapshot(), self.current_filters())

    def undo(self) -> None:
        """
        Restores the previous recorded state and its filters.

        Raises:
            NoPriorHistoryError: if there is nothing to undo.
        """
        snapshot, filters = self._history.undo(self._address_book.snapshot(), self.current_filters())
        self.set_address_book(snapshot)
        self._apply_filters(filters)

    def redo(self) -> None:
        """
        Re-applies the most recently undone state and its filters.

        Raises:
            NoRedoAvailableError: if there is nothing to redo.
        """
        snapshot, filters = self._history.redo()
        self.set_address_book(snapshot)
        self._apply_filters(filters)

    # =========== Comparison ===========

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, ModelManager):
            return NotImplemented
        return (
            self._address_book == other._address_book
            and self._user_prefs == other._user_prefs
            # Visible patients, not predicates: lambdas never compare equal
            and list(self._filtered_patients) == list(other._filtered_patients)
        )

    __hash__ = None
