"""Tests for logging configuration."""
import json

import pytest
from loguru import logger

from usagi.config.settings import UsagiSettings
from usagi.services.list_service import ShoppingList
from usagi.utils.logger import get_logger, setup_logging


@pytest.fixture
def log_file(tmp_path):
    """Configure logging to a temporary file."""
    path = tmp_path / "logs" / "usagi.log"
    setup_logging(UsagiSettings(LOG_FILE=path, LOG_LEVEL="DEBUG"))
    yield path
    logger.remove()


def read_records(path):
    logger.complete()
    return [json.loads(line)["record"] for line in path.read_text(encoding="utf-8").splitlines()]


def test_get_logger_prefixes_name(log_file):
    """Test that logger names are placed under usagi."""
    get_logger("services").info("hello")

    records = read_records(log_file)
    assert records[-1]["extra"]["name"] == "usagi.services"
    assert records[-1]["message"] == "hello"


def test_service_actions_are_logged(log_file):
    """Test that store operations log structured context."""
    list_ = ShoppingList()
    list_.add("milk")
    list_.remove(7)

    records = read_records(log_file)
    added = next(r for r in records if r["message"] == "add_item: success")
    assert added["extra"]["item"] == "milk"
    assert added["extra"]["name"] == "usagi.ShoppingList"

    failed = next(r for r in records if r["message"] == "remove_item: failed")
    assert failed["level"]["name"] == "WARNING"
    assert failed["extra"]["code"] == "INVALID_INDEX"
    assert failed["extra"]["position"] == 7


def test_item_text_with_braces_is_logged(log_file):
    """Test that user text is never used as a format string."""
    ShoppingList().add("{weird} item")

    records = read_records(log_file)
    assert records[-1]["extra"]["item"] == "{weird} item"


def test_no_file_sink_when_disabled(tmp_path):
    """Test that an empty log file setting installs no file sink."""
    setup_logging(UsagiSettings(LOG_FILE=None))
    try:
        get_logger("quiet").info("nothing")
        assert list(tmp_path.iterdir()) == []
    finally:
        logger.remove()


def test_unexpected_storage_error_logs_traceback(log_file, tmp_path, monkeypatch):
    """Test that unexpected failures are logged with their exception."""
    from usagi.services.file_service import FileService

    service = FileService()

    def broken_read(filename):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(service, "_read_lines", broken_read)
    service.load(ShoppingList(), tmp_path / "list.txt")

    records = read_records(log_file)
    failed = next(r for r in records if r["message"] == "Failed to load list")
    assert failed["level"]["name"] == "ERROR"
    assert failed["exception"]["type"] == "RuntimeError"
