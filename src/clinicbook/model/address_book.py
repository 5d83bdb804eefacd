"""
Address Book (Entity Store)
===========================
Owns the three entity collections of the clinic.

Why is this file needed?
------------------------
1. Storage: It holds the patients, appointments and bills as observable
   lists, so filtered views can follow them.
2. Local rules: It enforces the rules that only concern a single collection
   (no duplicate patients/appointments, targets must exist).
3. Snapshots: It produces and consumes immutable Snapshots, the unit of the
   undo/redo history and of persistence.

Cascades between collections are NOT done here, see `ModelManager`.

Classes:
    ReadOnlyAddressBook: Read access shared by AddressBook and Snapshot.
    Snapshot: Frozen copy of the full state at one instant.
    AddressBook: The mutable store.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Sequence, Tuple
import logging

from clinicbook.model.entities import Appointment, Bill, Patient, PaymentStatus
from clinicbook.model.observable import ObservableList

logger = logging.getLogger(__name__)


class ReadOnlyAddressBook(ABC):
    """Unmodifiable view of an address book."""

    @property
    @abstractmethod
    def patient_list(self) -> Sequence[Patient]:
        pass

    @property
    @abstractmethod
    def appointment_list(self) -> Sequence[Appointment]:
        pass

    @property
    @abstractmethod
    def bill_list(self) -> Sequence[Bill]:
        pass


@dataclass(frozen=True)
class Snapshot(ReadOnlyAddressBook):
    """
    Immutable copy of all three collections.
    Entities are frozen, so copying the containers is enough to make
    the copy deep.
    """
    patients: Tuple[Patient, ...] = ()
    appointments: Tuple[Appointment, ...] = ()
    bills: Tuple[Bill, ...] = ()

    @property
    def patient_list(self) -> Sequence[Patient]:
        return self.patients

    @property
    def appointment_list(self) -> Sequence[Appointment]:
        return self.appointments

    @property
    def bill_list(self) -> Sequence[Bill]:
        return self.bills

    @staticmethod
    def of(book: ReadOnlyAddressBook) -> Snapshot:
        return Snapshot(
            patients=tuple(book.patient_list),
            appointments=tuple(book.appointment_list),
            bills=tuple(book.bill_list),
        )


class AddressBook(ReadOnlyAddressBook):
    """
    Wraps all data at the address-book level.
    Removal and update operations expect their target to be present; a
    missing target is a programmer error and raises ValueError.
    """

    def __init__(self, to_be_copied: ReadOnlyAddressBook | None = None) -> None:
        self._patients: ObservableList[Patient] = ObservableList()
        self._appointments: ObservableList[Appointment] = ObservableList()
        self._bills: ObservableList[Bill] = ObservableList()
        if to_be_copied is not None:
            self.reset_data(to_be_copied)

    # --- Whole-state operations ---

    @property
    def patient_list(self) -> ObservableList[Patient]:
        return self._patients

    @property
    def appointment_list(self) -> ObservableList[Appointment]:
        return self._appointments

    @property
    def bill_list(self) -> ObservableList[Bill]:
        return self._bills

    def set_patients(self, patients: Sequence[Patient]) -> None:
        names = [p.name for p in patients]
        if len(names) != len(set(names)):
            raise ValueError("Patients must not contain duplicate names.")
        self._patients.set_all(patients)

    def set_appointments(self, appointments: Sequence[Appointment]) -> None:
        if len(appointments) != len(set(appointments)):
            raise ValueError("Appointments must not contain duplicates.")
        self._appointments.set_all(appointments)

    def set_bills(self, bills: Sequence[Bill]) -> None:
        self._bills.set_all(bills)

    def reset_data(self, new_data: ReadOnlyAddressBook) -> None:
        """Replaces the whole content with a copy of `new_data`."""
        self.set_patients(list(new_data.patient_list))
        self.set_appointments(list(new_data.appointment_list))
        self.set_bills(list(new_data.bill_list))
        logger.debug(
            f"Address book reset: {len(self._patients)} patients, "
            f"{len(self._appointments)} appointments, {len(self._bills)} bills."
        )

    def snapshot(self) -> Snapshot:
        return Snapshot.of(self)

    # --- Patients ---

    def has_patient(self, patient: Patient) -> bool:
        return any(p.is_same_patient(patient) for p in self._patients)

    def has_patient_name(self, name: str) -> bool:
        return any(p.name == name for p in self._patients)

    def add_patient(self, patient: Patient) -> None:
        if self.has_patient(patient):
            raise ValueError(f"Patient '{patient.name}' already exists.")
        self._patients.append(patient)
        logger.debug(f"Added patient '{patient.name}'.")

    def set_patient(self, target: Patient, edited: Patient) -> None:
        if target not in self._patients:
            raise ValueError(f"Patient '{target.name}' not found.")
        if not target.is_same_patient(edited) and self.has_patient(edited):
            raise ValueError(f"Patient '{edited.name}' already exists.")
        self._patients.replace(target, edited)
        logger.debug(f"Replaced patient '{target.name}' with '{edited.name}'.")

    def remove_patient(self, patient: Patient) -> None:
        if patient not in self._patients:
            raise ValueError(f"Patient '{patient.name}' not found.")
        self._patients.remove(patient)
        logger.debug(f"Removed patient '{patient.name}'.")

    def sort_patients(self, key: Callable[[Patient], object], ascending: bool = True) -> None:
        self._patients.sort(key=key, reverse=not ascending)

    # --- Appointments ---

    def has_appointment(self, appointment: Appointment) -> bool:
        return any(a.is_same_appointment(appointment) for a in self._appointments)

    def add_appointment(self, appointment: Appointment) -> None:
        if self.has_appointment(appointment):
            raise ValueError(f"Appointment {appointment} already exists.")
        self._appointments.append(appointment)
        logger.debug(f"Added appointment {appointment}.")

    def set_appointment(self, target: Appointment, edited: Appointment) -> None:
        if target not in self._appointments:
            raise ValueError(f"Appointment {target} not found.")
        if not target.is_same_appointment(edited) and self.has_appointment(edited):
            raise ValueError(f"Appointment {edited} already exists.")
        self._appointments.replace(target, edited)
        logger.debug(f"Replaced appointment {target} with {edited}.")

    def remove_appointment(self, appointment: Appointment) -> None:
        if appointment not in self._appointments:
            raise ValueError(f"Appointment {appointment} not found.")
        self._appointments.remove(appointment)
        logger.debug(f"Removed appointment {appointment}.")

    def sort_appointments(self, key: Callable[[Appointment], object], ascending: bool = True) -> None:
        self._appointments.sort(key=key, reverse=not ascending)

    # --- Bills ---

    def has_bill(self, bill: Bill) -> bool:
        # Bills are assumed never to be duplicated, but the scan is still done.
        return any(b.is_same_bill(bill) for b in self._bills)

    def add_bill(self, bill: Bill) -> None:
        self._bills.append(bill)
        logger.debug(f"Added bill {bill}.")

    def set_bill(self, target: Bill, edited: Bill) -> None:
        if target not in self._bills:
            raise ValueError(f"Bill {target} not found.")
        self._bills.replace(target, edited)
        logger.debug(f"Replaced bill {target} with {edited}.")

    def remove_bill(self, bill: Bill) -> None:
        if bill not in self._bills:
            raise ValueError(f"Bill {bill} not found.")
        self._bills.remove(bill)
        logger.debug(f"Removed bill {bill}.")

    def sort_bills(self, key: Callable[[Bill], object], ascending: bool = True) -> None:
        self._bills.sort(key=key, reverse=not ascending)

    def set_bill_as_paid(self, bill: Bill) -> None:
        self.set_bill(bill, bill.with_status(PaymentStatus.PAID))

    def set_bill_as_unpaid(self, bill: Bill) -> None:
        self.set_bill(bill, bill.with_status(PaymentStatus.UNPAID))

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReadOnlyAddressBook):
            return NotImplemented
        return (
            tuple(self.patient_list) == tuple(other.patient_list)
            and tuple(self.appointment_list) == tuple(other.appointment_list)
            and tuple(self.bill_list) == tuple(other.bill_list)
        )

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return (
            f"AddressBook({len(self._patients)} patients, "
            f"{len(self._appointments)} appointments, {len(self._bills)} bills)"
        )
