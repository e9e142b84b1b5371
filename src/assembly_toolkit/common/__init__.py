"""Shared helpers used across assembly_toolkit."""

from .logging_utils import (
    QueueLogHandler,
    attach_queue_handler,
    capture_trace,
    detach_queue_handler,
    drain,
)

__all__ = [
    "QueueLogHandler",
    "attach_queue_handler",
    "capture_trace",
    "detach_queue_handler",
    "drain",
]
