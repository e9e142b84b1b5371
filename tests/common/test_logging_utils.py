"""
Tests for the selection trace logging helpers.
"""

import logging
from queue import Queue

from assembly_toolkit.common.logging_utils import (
    TRACE_LOGGER,
    QueueLogHandler,
    attach_queue_handler,
    capture_trace,
    detach_queue_handler,
    drain,
)
from assembly_toolkit.core.models import Frame, Section
from assembly_toolkit.generate import SimpleCallback


def test_capture_trace_when_select_then_debug_line_recorded(two_piece_lexis, c1):
    # Arrange
    cb = SimpleCallback(two_piece_lexis)

    # Act
    with capture_trace() as trace:
        cb.select(Frame(), Section.build("A", [c1]), 0, c1)
    entries = drain(trace)

    # Assert
    assert ("assembly_toolkit.generate.callbacks.phased: A[0] -> new B@1 via c1+", "DEBUG") in entries


def test_capture_trace_when_done_then_logger_level_restored():
    logger = logging.getLogger(TRACE_LOGGER)
    before = logger.level

    with capture_trace(logging.DEBUG):
        assert logger.getEffectiveLevel() == logging.DEBUG

    assert logger.level == before
    assert not any(isinstance(h, QueueLogHandler) for h in logger.handlers)


def test_drain_when_called_twice_then_second_is_empty():
    log_queue = Queue()
    handler = attach_queue_handler(log_queue, "assembly_toolkit.test_drain", logging.INFO)
    try:
        logging.getLogger("assembly_toolkit.test_drain").info("hello")
    finally:
        detach_queue_handler(handler, "assembly_toolkit.test_drain")

    assert drain(log_queue) == [("assembly_toolkit.test_drain: hello", "INFO")]
    assert drain(log_queue) == []


def test_queue_handler_when_below_level_then_ignored():
    log_queue = Queue()
    handler = attach_queue_handler(log_queue, "assembly_toolkit.test_level", logging.WARNING)
    try:
        logger = logging.getLogger("assembly_toolkit.test_level")
        logger.info("quiet")
        logger.warning("loud")
    finally:
        detach_queue_handler(handler, "assembly_toolkit.test_level")

    assert [msg for msg, _ in drain(log_queue)] == ["assembly_toolkit.test_level: loud"]
