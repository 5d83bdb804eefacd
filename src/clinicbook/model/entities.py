"""
Clinic Entities
===============
Defines the value types stored in the address book.

Why is this file needed?
------------------------
1. Identity: Each entity knows how it is compared against the others
   (a Patient by name, Appointments and Bills structurally).
2. Weak references: An Appointment stores a copy of its patient's name and a
   Bill stores a copy of its Appointment. There are no live links between
   entities; the ModelManager cascades keep the copies consistent.

Classes:
    Patient: A person registered at the clinic.
    Appointment: A medical test booked for a patient.
    Bill: The charge raised for an appointment.
    PaymentStatus: Paid/Unpaid flag of a bill.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from decimal import Decimal
from enum import StrEnum
from typing import FrozenSet


class PaymentStatus(StrEnum):
    PAID = "Paid"
    UNPAID = "Unpaid"


@dataclass(frozen=True)
class Patient:
    """
    A patient of the clinic.
    Two patients with the same name are the same patient, even if the other
    details differ (the name is the identity key).
    """
    name: str
    phone: str = ""
    email: str = ""
    address: str = ""
    tags: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Patient name must not be blank.")

    def is_same_patient(self, other: Patient | None) -> bool:
        """Case-sensitive exact match on the name."""
        return other is not None and other.name == self.name


@dataclass(frozen=True)
class Appointment:
    """A medical test booked in a time slot with a doctor."""
    name: str
    medical_test: str
    slot: datetime
    doctor: str

    def is_same_appointment(self, other: Appointment | None) -> bool:
        return other is not None and other == self

    def with_name(self, name: str) -> Appointment:
        """Copy of this appointment booked for another patient name."""
        return replace(self, name=name)


@dataclass(frozen=True)
class Bill:
    """A bill raised for an appointment."""
    appointment: Appointment
    amount: Decimal
    bill_date: date
    payment_status: PaymentStatus = PaymentStatus.UNPAID

    @property
    def is_paid(self) -> bool:
        return self.payment_status == PaymentStatus.PAID

    def is_same_bill(self, other: Bill | None) -> bool:
        return other is not None and other == self

    def with_status(self, status: PaymentStatus) -> Bill:
        return replace(self, payment_status=status)

    def with_appointment(self, appointment: Appointment) -> Bill:
        # Amount, date and status stay untouched
        return replace(self, appointment=appointment)
