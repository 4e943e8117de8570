import json
import logging

import pytest
import structlog

from embedded_postgres.logging import (
    CompactJSONRenderer,
    add_timestamp,
    configure_logging,
    get_logger,
)


def test_compact_json_renderer():
    """Test events render as single-line JSON"""
    renderer = CompactJSONRenderer()

    output = renderer(None, "info", {
        "event": "storage_created",
        "level": "info",
        "timestamp": "2024-01-01T00:00:00",
        "directory": "/tmp/db",
    })

    assert "\n" not in output
    assert json.loads(output) == {
        "ts": "2024-01-01T00:00:00",
        "lvl": "info",
        "msg": "storage_created",
        "data": {"directory": "/tmp/db"},
    }


def test_compact_json_renderer_without_data():
    output = CompactJSONRenderer()(None, "info", {"event": "x", "level": "debug"})
    assert "data" not in json.loads(output)


def test_add_timestamp_keeps_existing():
    assert add_timestamp(None, "info", {"timestamp": "t"}) == {"timestamp": "t"}
    assert "timestamp" in add_timestamp(None, "info", {})


def test_configure_logging():
    configure_logging("DEBUG")

    assert logging.getLogger("embedded_postgres").level == logging.DEBUG
    assert structlog.is_configured()


def test_get_logger_logs_through_stdlib(caplog):
    """Test structured events reach stdlib handlers"""
    configure_logging("DEBUG")
    caplog.set_level(logging.DEBUG, logger="embedded_postgres.test")

    get_logger("embedded_postgres.test").info({"event": "hello", "port": 5432})

    assert any("hello" in record.getMessage() for record in caplog.records)


def test_configure_logging_lowercase_level():
    configure_logging("warning")

    assert logging.getLogger("embedded_postgres").level == logging.WARNING


def test_library_logging_is_silent_by_default(capsys, temp_root, version):
    """Test nothing is printed unless the application configures logging"""
    from embedded_postgres.config.storage import StorageSpec
    from embedded_postgres.distribution.resolver import resolve_artifact
    from embedded_postgres.types import BitSize, Command, Distribution, Platform

    resolve_artifact(Distribution(version, Platform.LINUX, BitSize.B64), Command.POSTGRES)
    StorageSpec.create("testdb", temp_root=temp_root)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_package_logger_has_null_handler():
    handlers = logging.getLogger("embedded_postgres").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
