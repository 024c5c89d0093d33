"""
CDR Wire Primitives
===================

Bounded Context: Binary Encoding

Public API
----------
    CdrWriter, CdrReader: Primitive stream access
    CdrError, CdrRangeError, CdrTruncatedError: Codec failures
"""

from .stream import (
    CdrWriter,
    CdrReader,
    CdrError,
    CdrRangeError,
    CdrTruncatedError,
    INT32_MIN,
    INT32_MAX,
)

__all__ = [
    'CdrWriter',
    'CdrReader',
    'CdrError',
    'CdrRangeError',
    'CdrTruncatedError',
    'INT32_MIN',
    'INT32_MAX',
]
