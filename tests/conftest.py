"""Test configuration and fixtures for Usagi."""
import pytest
from unittest.mock import Mock

from usagi.config.settings import clear_settings_cache
from usagi.services.list_service import ShoppingList
from usagi.services.file_service import FileService
from usagi.cli.commands import CommandDispatcher
from usagi.cli.session import SessionController


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    """Isolate every test from the developer's environment."""
    for name in ("LOG_LEVEL", "LOG_FORMAT", "ASSISTANT_NAME", "COMMAND_PREFIX", "FILE_ENCODING"):
        monkeypatch.delenv(f"USAGI_{name}", raising=False)
    # Empty value disables the log file sink
    monkeypatch.setenv("USAGI_LOG_FILE", "")
    monkeypatch.setenv("USAGI_LOG_TO_CONSOLE", "false")
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def shopping_list() -> ShoppingList:
    """Create an empty shopping list."""
    return ShoppingList()


@pytest.fixture
def filled_list() -> ShoppingList:
    """Create a shopping list with two items."""
    return ShoppingList(["milk", "eggs"])


@pytest.fixture
def file_service() -> FileService:
    """Create a file service using the default encoding."""
    return FileService()


@pytest.fixture
def output():
    """Collect user-facing lines instead of printing them."""
    lines = []
    collector = Mock(side_effect=lines.append)
    collector.lines = lines
    return collector


@pytest.fixture
def dispatcher(shopping_list, output, file_service) -> CommandDispatcher:
    """Create a command dispatcher writing to the collector."""
    return CommandDispatcher(shopping_list, output, file_service=file_service)


@pytest.fixture
def prompts():
    """Collect prompts shown to the user."""
    return []


@pytest.fixture
def controller(shopping_list, output, prompts, file_service) -> SessionController:
    """Create a session controller driven without a terminal."""
    return SessionController(
        shopping_list=shopping_list,
        output=output,
        prompt=prompts.append,
        file_service=file_service
    )
