"""
Structured Logging Tests
========================

JSON log records emitted by StructuredLogger and by the codec.
"""

import json
import logging

import pytest

from idl_records import CdrCodec, CdrError, Point
from idl_records.logging import LogEvent, StructuredLogger, create_logger


def _entries(caplog, logger_name):
    return [
        json.loads(record.getMessage())
        for record in caplog.records
        if record.name == logger_name
    ]


def test_info_entry_shape(caplog):
    logger = StructuredLogger("shape_test", logger_name="idl_records.test.info")
    logger.info(
        event=LogEvent.CONFIG_LOADED,
        message="Loaded config",
        metadata={'path': 'records.yaml'}
    )

    [entry] = _entries(caplog, "idl_records.test.info")
    assert entry['level'] == "INFO"
    assert entry['component'] == "shape_test"
    assert entry['event'] == "config.loaded"
    assert entry['message'] == "Loaded config"
    assert entry['metadata'] == {'path': 'records.yaml'}
    assert 'timestamp' in entry


def test_error_entry_includes_exception(caplog):
    logger = StructuredLogger("error_test", logger_name="idl_records.test.error")
    logger.error(
        event=LogEvent.DESERIALIZATION_ERROR,
        message="Failed",
        exc_info=CdrError("bad bytes")
    )

    [entry] = _entries(caplog, "idl_records.test.error")
    assert entry['exception'] == {'type': 'CdrError', 'message': 'bad bytes'}
    assert 'metadata' not in entry


def test_debug_filtered_at_info(caplog):
    logger = StructuredLogger("debug_test", logger_name="idl_records.test.debug")
    logger.debug(event=LogEvent.CDR_ENCODED, message="hidden")
    assert _entries(caplog, "idl_records.test.debug") == []

    logger.set_level(logging.DEBUG)
    logger.debug(event=LogEvent.CDR_ENCODED, message="shown")
    assert [e['message'] for e in _entries(caplog, "idl_records.test.debug")] == ["shown"]


def test_create_logger_default_name():
    logger = create_logger("factory_test", level=logging.WARNING)
    assert logger.logger_name == "idl_records.factory_test"
    assert logger.logger.level == logging.WARNING


def test_codec_logs_success_at_debug(caplog):
    logger = StructuredLogger(
        "codec", level=logging.DEBUG, logger_name="idl_records.test.codec_ok"
    )
    codec = CdrCodec(logger=logger)
    codec.decode(Point, codec.encode(Point(1, 2)))

    entries = _entries(caplog, "idl_records.test.codec_ok")
    assert [e['event'] for e in entries] == ["cdr.encode.success", "cdr.decode.success"]
    assert entries[0]['metadata'] == {'type_name': 'Shapes::Point', 'size': 8}
    assert entries[1]['metadata']['consumed'] == 8


def test_codec_logs_failure(caplog):
    logger = StructuredLogger("codec", logger_name="idl_records.test.codec_err")
    codec = CdrCodec(logger=logger)

    with pytest.raises(CdrError):
        codec.decode(Point, b'\x00')

    [entry] = _entries(caplog, "idl_records.test.codec_err")
    assert entry['level'] == "ERROR"
    assert entry['event'] == "error.deserialization"
    assert entry['exception']['type'] == "CdrTruncatedError"
    assert entry['metadata'] == {'type_name': 'Shapes::Point', 'size': 1}


def test_logger_without_level_keeps_existing_level():
    """A second logger on the same name does not reset an explicit level."""
    name = "idl_records.test.shared_level"
    StructuredLogger("shared", level=logging.DEBUG, logger_name=name)
    StructuredLogger("shared", logger_name=name)

    assert logging.getLogger(name).level == logging.DEBUG


def test_default_codec_keeps_debug_codec_level():
    debug_codec = CdrCodec(logger=StructuredLogger("codec", level=logging.DEBUG))
    try:
        CdrCodec()
        assert debug_codec.logger.logger.level == logging.DEBUG
    finally:
        debug_codec.logger.set_level(logging.INFO)
