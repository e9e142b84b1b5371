"""
Logging utilities for capturing the selection trace.

The callbacks log every selection at DEBUG, every solution at INFO and
degraded input at WARNING, all under the ``assembly_toolkit`` logger
hierarchy. A driver (or a test) can attach a queue handler to read that
trace back without touching the root logger.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from queue import Empty, Queue
from typing import Iterator, List, Optional, Tuple

TRACE_LOGGER = "assembly_toolkit"

LogEntry = Tuple[str, str]


class QueueLogHandler(logging.Handler):
    """
    A logging handler that sends (message, level) pairs to a queue.
    """

    def __init__(self, log_queue: Queue, level: int = logging.DEBUG):
        super().__init__(level)
        self.log_queue = log_queue
        self.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.log_queue.put((self.format(record), record.levelname))
        except Exception:
            self.handleError(record)


def attach_queue_handler(
    log_queue: Queue,
    logger_name: Optional[str] = TRACE_LOGGER,
    level: int = logging.DEBUG,
) -> QueueLogHandler:
    """
    Attach a QueueLogHandler to the specified logger.

    The logger's own level is lowered to ``level`` if needed so the
    records actually reach the handler.

    Args:
        log_queue: Queue to send log entries to.
        logger_name: Name of logger to attach to. None = root logger.
        level: Lowest level to capture.

    Returns:
        The attached handler (for later removal).
    """
    logger = logging.getLogger(logger_name)
    handler = QueueLogHandler(log_queue, level)
    logger.addHandler(handler)
    if logger.getEffectiveLevel() > level:
        logger.setLevel(level)
    return handler


def detach_queue_handler(handler: QueueLogHandler, logger_name: Optional[str] = TRACE_LOGGER) -> None:
    """
    Remove a QueueLogHandler from the specified logger.

    Args:
        handler: The handler to remove.
        logger_name: Name of logger to detach from. None = root logger.
    """
    logging.getLogger(logger_name).removeHandler(handler)


def drain(log_queue: Queue) -> List[LogEntry]:
    """Pop every entry currently in the queue."""
    entries: List[LogEntry] = []
    while True:
        try:
            entries.append(log_queue.get_nowait())
        except Empty:
            return entries


@contextmanager
def capture_trace(level: int = logging.DEBUG) -> Iterator[Queue]:
    """
    Capture the selection trace for the duration of a ``with`` block.

    Example:
        >>> with capture_trace() as trace:
        ...     callback.select(frame, a, 0, c1)
        >>> drain(trace)
        [('assembly_toolkit.generate.callbacks.phased: A[0] -> new B@1 via c1+', 'DEBUG')]
    """
    log_queue: Queue = Queue()
    logger = logging.getLogger(TRACE_LOGGER)
    previous = logger.level
    handler = attach_queue_handler(log_queue, TRACE_LOGGER, level)
    try:
        yield log_queue
    finally:
        detach_queue_handler(handler, TRACE_LOGGER)
        logger.setLevel(previous)
