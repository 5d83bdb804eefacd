"""
Application Initialization
==========================
This module constructs the application state and its logging.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up the package logger (console + optional file).
2. Instantiates the Qt Store, which owns the history, the model and the
   command executor.
3. Keeps the wiring out of the model and controller packages, so they never
   import each other in a cycle.
"""
import logging
from typing import Optional

from clinicbook.app.state import Store
from clinicbook.logging_config import setup_logging
from clinicbook.model.address_book import ReadOnlyAddressBook
from clinicbook.model.user_prefs import UserPrefs


def build_store(address_book: Optional[ReadOnlyAddressBook] = None,
                user_prefs: Optional[UserPrefs] = None,
                level: int = logging.INFO,
                log_file: Optional[str] = None) -> Store:
    # 1. Setup Logging
    logger = setup_logging(level=level, log_file=log_file)

    # 2. Initialize the state; the initial snapshot is already recorded
    store = Store(address_book, user_prefs)
    book = store.model.address_book
    logger.info(
        f"Store ready: {len(book.patient_list)} patients, "
        f"{len(book.appointment_list)} appointments, {len(book.bill_list)} bills."
    )
    return store


def main() -> None:
    build_store()


if __name__ == "__main__":
    main()
