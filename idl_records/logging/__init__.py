"""
Structured Logging for idl_records
==================================

Bounded Context: Observability

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from idl_records.logging import create_logger, LogEvent
    >>> logger = create_logger("codec")
    >>> logger.info(event=LogEvent.CONFIG_LOADED, message="Loaded config")
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
