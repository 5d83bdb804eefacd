"""
Tests for the application root: logging is installed and the Store is wired.
"""
import logging

import pytest

from clinicbook.app.state import Store
from clinicbook.main import build_store, main
from clinicbook.model.address_book import Snapshot


@pytest.fixture
def package_logger():
    logger = logging.getLogger("clinicbook")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_build_store_sets_up_logging_and_history(package_logger, tmp_path):
    log_file = tmp_path / "app.log"
    store = build_store(level=logging.DEBUG, log_file=str(log_file))

    assert isinstance(store, Store)
    assert store.history.undo_size == 1
    assert len(package_logger.handlers) == 2
    for handler in package_logger.handlers:
        handler.flush()
    assert "Store ready: 0 patients" in log_file.read_text(encoding="utf-8")


def test_build_store_seeds_address_book(package_logger, alice, alice_appointment):
    store = build_store(Snapshot(patients=(alice,), appointments=(alice_appointment,)))
    assert list(store.model.filtered_patient_list) == [alice]
    assert not store.can_undo()


def test_main_runs(package_logger):
    assert main() is None
    assert package_logger.handlers
