"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

This module defines typed event names for structured logging.

Event Naming Convention:
    <component>.<category>.<action>

    component: cdr, config, error
    category: encode, decode, loaded
    action: success

Example Log Query (CloudWatch Insights):
    fields @timestamp, event, message, metadata.type_name
    | filter event = "error.deserialization"
    | stats count() by metadata.type_name
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - cdr.*: Codec activity
    - config.*: Configuration lifecycle
    - error.*: Error conditions
    """

    # ========== Codec Events ==========
    CDR_ENCODED = "cdr.encode.success"
    """Value encoded to CDR bytes."""

    CDR_DECODED = "cdr.decode.success"
    """Value decoded from CDR bytes."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Configuration file parsed and validated."""

    # ========== Error Events ==========
    SERIALIZATION_ERROR = "error.serialization"
    """Failed to encode a value."""

    DESERIALIZATION_ERROR = "error.deserialization"
    """Failed to decode a value."""

    CONFIG_ERROR = "error.config"
    """Configuration file missing or invalid."""

