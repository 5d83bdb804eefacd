"""
Unit tests for the AddressBook store and its Snapshots.
"""
from decimal import Decimal

import pytest

from clinicbook.model.address_book import AddressBook, Snapshot
from clinicbook.model.entities import Bill, Patient, PaymentStatus


@pytest.fixture
def book(alice, bob, alice_appointment, alice_bill):
    book = AddressBook()
    book.add_patient(alice)
    book.add_patient(bob)
    book.add_appointment(alice_appointment)
    book.add_bill(alice_bill)
    return book


def test_new_address_book_is_empty():
    book = AddressBook()
    assert len(book.patient_list) == 0
    assert len(book.appointment_list) == 0
    assert len(book.bill_list) == 0
    assert book == Snapshot()


def test_has_checks(book, alice, bob_appointment, alice_appointment, alice_bill, bob_bill):
    assert book.has_patient(Patient(name="Alice", phone="different"))
    assert book.has_patient_name("Alice")
    assert not book.has_patient_name("alice")
    assert book.has_appointment(alice_appointment)
    assert not book.has_appointment(bob_appointment)
    assert book.has_bill(alice_bill)
    assert not book.has_bill(bob_bill)


def test_duplicates_are_rejected(book, alice, alice_appointment):
    with pytest.raises(ValueError):
        book.add_patient(Patient(name="Alice"))
    with pytest.raises(ValueError):
        book.add_appointment(alice_appointment)


def test_missing_targets_fail_fast(book, bob_appointment, bob_bill):
    with pytest.raises(ValueError):
        book.remove_patient(Patient(name="Nobody"))
    with pytest.raises(ValueError):
        book.set_patient(Patient(name="Nobody"), Patient(name="Somebody"))
    with pytest.raises(ValueError):
        book.remove_appointment(bob_appointment)
    with pytest.raises(ValueError):
        book.remove_bill(bob_bill)
    with pytest.raises(ValueError):
        book.set_bill_as_paid(bob_bill)


def test_set_patient_keeps_position_and_rejects_clash(book, alice, bob):
    edited = Patient(name="Alicia", phone=alice.phone)
    book.set_patient(alice, edited)
    assert list(book.patient_list) == [edited, bob]

    with pytest.raises(ValueError):
        book.set_patient(edited, Patient(name="Bob"))


def test_store_does_not_cascade(book, alice):
    """Removing a patient at this level leaves the appointments alone."""
    book.remove_patient(alice)
    assert len(book.appointment_list) == 1
    assert len(book.bill_list) == 1


def test_sorting(book, alice, bob):
    book.sort_patients(key=lambda p: p.name, ascending=False)
    assert list(book.patient_list) == [bob, alice]
    book.sort_patients(key=lambda p: p.name)
    assert list(book.patient_list) == [alice, bob]


def test_sort_bills_by_amount(book, bob_appointment, alice_bill):
    cheap = Bill(bob_appointment, Decimal("5"), alice_bill.bill_date)
    book.add_bill(cheap)
    book.sort_bills(key=lambda b: b.amount)
    assert list(book.bill_list) == [cheap, alice_bill]
    book.sort_bills(key=lambda b: b.amount, ascending=False)
    assert list(book.bill_list) == [alice_bill, cheap]


def test_payment_status_toggles(book, alice_bill):
    book.set_bill_as_paid(alice_bill)
    paid = book.bill_list[0]
    assert paid.payment_status == PaymentStatus.PAID
    assert paid.amount == alice_bill.amount

    book.set_bill_as_unpaid(paid)
    assert book.bill_list[0] == alice_bill


def test_snapshot_is_a_frozen_copy(book, bob_appointment):
    snapshot = book.snapshot()
    book.add_appointment(bob_appointment)

    assert len(snapshot.appointments) == 1
    assert snapshot != book.snapshot()
    assert book != snapshot


def test_reset_data_and_copy_constructor(book):
    snapshot = book.snapshot()
    copy = AddressBook(snapshot)
    assert copy == book
    assert copy == snapshot

    other = AddressBook()
    other.reset_data(book)
    assert other == book
    other.remove_patient(other.patient_list[0])
    assert other != book


def test_reset_data_rejects_duplicate_patients():
    bad = Snapshot(patients=(Patient(name="Alice"), Patient(name="Alice", phone="1")))
    with pytest.raises(ValueError):
        AddressBook(bad)
