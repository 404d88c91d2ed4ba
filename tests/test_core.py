from __future__ import annotations

import logging

import pytest
from uvicorn.config import LOG_LEVELS

from address_book_api.app.core.config import Settings
from address_book_api.app.core.logging_config import UVICORN_LEVELS, resolve_log_level, setup_logging


def test_person_base_path_combines_prefix_and_collection():
    assert Settings(api_prefix="", contacts_path="/contacts").person_base_path == "/contacts/person"
    assert Settings(api_prefix="/api", contacts_path="/people").person_base_path == "/api/people/person"


@pytest.mark.parametrize(
    "configured, expected",
    [
        ("INFO", "info"),
        ("Debug", "debug"),
        ("WARN", "warning"),
        ("warning", "warning"),
        ("FATAL", "critical"),
        ("trace", "trace"),
        ("verbose", "info"),
        ("", "info"),
    ],
)
def test_resolve_log_level_returns_a_uvicorn_name(configured, expected):
    level = resolve_log_level(configured)

    assert level == expected
    assert level in UVICORN_LEVELS


def test_uvicorn_accepts_every_resolved_level():
    for configured in ("WARN", "FATAL", "nonsense", "TRACE"):
        assert resolve_log_level(configured) in LOG_LEVELS


def test_setup_logging_uses_settings(tmp_path, monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    previous_level = root.level
    logfile = tmp_path / "address_book.log"
    try:
        level = setup_logging(Settings(log_level="WARN", log_file=str(logfile)))

        assert level == "warning"
        assert root.level == logging.WARNING
        assert len(root.handlers) == 2
        assert any(isinstance(h, logging.FileHandler) for h in root.handlers)

        # A second call keeps the existing handlers.
        assert setup_logging(Settings(log_level="debug", log_file=None)) == "debug"
        assert len(root.handlers) == 2
        assert root.level == logging.WARNING
    finally:
        for handler in root.handlers:
            handler.close()
        root.setLevel(previous_level)


def test_setup_logging_without_file_adds_only_console(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    previous_level = root.level
    try:
        setup_logging(Settings(log_level="info", log_file=None))

        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0], logging.FileHandler)
    finally:
        root.setLevel(previous_level)
