from __future__ import annotations

import logging

from combinable.utils.logging import ROOT_LOGGER_NAME, configure_logging, get_logger


def test_get_logger_namespaces() -> None:
    assert get_logger("demo").name == "combinable.demo"
    assert get_logger("combinable.generators.retry").name == "combinable.generators.retry"
    assert get_logger(ROOT_LOGGER_NAME).name == ROOT_LOGGER_NAME


def test_configure_logging_is_idempotent() -> None:
    root = configure_logging(verbose=True)
    count = len(root.handlers)
    configure_logging(verbose=False)
    assert len(root.handlers) == count
    assert root.level == logging.WARNING
