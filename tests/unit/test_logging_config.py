"""
tests/unit/test_logging_config.py — Root logger handler management.
"""
from __future__ import annotations

import logging

import pytest

from clinic_api.logging_config import HANDLER_NAME, configure_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield root
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def own_handlers(root: logging.Logger) -> list[logging.Handler]:
    return [h for h in root.handlers if h.get_name() == HANDLER_NAME]


def test_foreign_handlers_survive_reconfiguration(root_logger):
    foreign = logging.NullHandler()
    root_logger.addHandler(foreign)

    configure_logging("INFO")
    configure_logging("DEBUG", json=True)

    assert foreign in root_logger.handlers
    assert len(own_handlers(root_logger)) == 1
    assert root_logger.level == logging.DEBUG


def test_records_still_reach_log_capture(caplog):
    configure_logging("INFO")
    logging.getLogger("clinic_api.test").warning("still captured")
    assert "still captured" in caplog.text
