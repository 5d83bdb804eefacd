"""
Pytest configuration file for the clinicbook test suite.

Defines the shared entities (two patients with an appointment and a bill
each) and fixtures that build empty or pre-populated models for the tests.
"""
from datetime import date, datetime
from decimal import Decimal

import pytest

from clinicbook.controller.executor import CommandExecutor
from clinicbook.model.entities import Appointment, Bill, Patient, PaymentStatus
from clinicbook.model.model_manager import ModelManager


@pytest.fixture
def alice():
    return Patient(name="Alice", phone="91234567", email="alice@example.com", address="1 Main St")


@pytest.fixture
def bob():
    return Patient(name="Bob", phone="98765432", email="bob@example.com", address="2 High St")


@pytest.fixture
def alice_appointment():
    return Appointment(name="Alice", medical_test="Dental", slot=datetime(2024, 1, 1, 10, 0), doctor="Dr X")


@pytest.fixture
def bob_appointment():
    return Appointment(name="Bob", medical_test="X-Ray", slot=datetime(2024, 1, 2, 14, 30), doctor="Dr Y")


@pytest.fixture
def alice_bill(alice_appointment):
    return Bill(appointment=alice_appointment, amount=Decimal("50.00"),
                bill_date=date(2024, 1, 1), payment_status=PaymentStatus.UNPAID)


@pytest.fixture
def bob_bill(bob_appointment):
    return Bill(appointment=bob_appointment, amount=Decimal("120.00"),
                bill_date=date(2024, 1, 2), payment_status=PaymentStatus.PAID)


@pytest.fixture
def model():
    """A fresh model with no data and no recorded history."""
    return ModelManager()


@pytest.fixture
def populated_model(model, alice, bob, alice_appointment, bob_appointment, alice_bill, bob_bill):
    """A model holding Alice and Bob, one appointment and one bill each."""
    model.add_patient(alice)
    model.add_patient(bob)
    model.add_appointment(alice_appointment)
    model.add_appointment(bob_appointment)
    model.add_bill(alice_bill)
    model.add_bill(bob_bill)
    return model


@pytest.fixture
def executor(model):
    """An executor over the empty model; the initial state is already recorded."""
    return CommandExecutor(model)
