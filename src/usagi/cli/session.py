"""Conversation loop driving the shopping list."""
from typing import Callable, Iterable, Optional

import click

from usagi.config.settings import get_settings
from usagi.domain.types import SessionState
from usagi.services.file_service import FileService
from usagi.services.list_service import ShoppingList
from usagi.utils.logger import get_logger
from .commands import CommandDispatcher


logger = get_logger(__name__)


def _echo(line: str) -> None:
    click.echo(line)


class SessionController:
    """Two-state conversation: ask for an item, then ask for more.

    The controller owns its list and its state; ``handle_line`` performs a
    single transition so the loop can be driven without a real terminal.
    """

    def __init__(
        self,
        shopping_list: Optional[ShoppingList] = None,
        output: Callable[[str], None] = _echo,
        prompt: Optional[Callable[[str], None]] = None,
        file_service: Optional[FileService] = None
    ):
        settings = get_settings()
        self.shopping_list = shopping_list if shopping_list is not None else ShoppingList()
        self.output = output
        self.prompt = prompt or (lambda text: click.echo(text, nl=False))
        self.assistant = settings.ASSISTANT_NAME
        self.dispatcher = CommandDispatcher(
            self.shopping_list,
            output,
            file_service=file_service,
            prefix=settings.COMMAND_PREFIX
        )
        self.state = SessionState.AWAITING_ITEM

    def greet(self) -> None:
        self.output(f"Welcome to {self.assistant}'s Shopping List!")
        self.output(f"Type an item to add it. Type {self.dispatcher.prefix}help for commands.")
        self.output("")

    def show_prompt(self) -> None:
        if self.state == SessionState.AWAITING_ITEM:
            self.prompt(f"{self.assistant}: What do you want to add? \n> ")
        elif self.state == SessionState.AWAITING_CONFIRMATION:
            self.prompt(f"{self.assistant}: Anything else? (y/n) \n> ")

    def handle_line(self, line: Optional[str]) -> SessionState:
        """
        Apply one line of input to the current state.

        Args:
            line: Raw input line, or None at end of input

        Returns:
            The state after the transition
        """
        if self.state.is_terminal:
            return self.state

        if line is None:
            logger.info("End of input", state=self.state.value)
            self.state = SessionState.FINISHED
            return self.state

        text = line.strip()
        if self.state == SessionState.AWAITING_ITEM:
            self.state = self._handle_item(text)
        else:
            self.state = self._handle_confirmation(text)
        return self.state

    def finish(self) -> None:
        """Print the final summary."""
        self.output("")
        self.output("Final list:")
        self.dispatcher.print_list()

    def run(self, lines: Iterable[str]) -> SessionState:
        """
        Drive the conversation until it ends.

        Args:
            lines: Source of input lines, e.g. sys.stdin

        Returns:
            The terminal state; FINISHED has already printed the final list
        """
        self.greet()
        source = iter(lines)
        while not self.state.is_terminal:
            self.show_prompt()
            self.handle_line(next(source, None))

        if self.state == SessionState.FINISHED:
            self.finish()
        logger.info("Session ended", state=self.state.value, count=self.shopping_list.count)
        return self.state

    def _handle_item(self, text: str) -> SessionState:
        if not text:
            self.output("(no input)")
            return SessionState.AWAITING_ITEM

        if self.dispatcher.is_command(text):
            outcome = self.dispatcher.dispatch(text)
            return SessionState.QUIT if outcome.quit else SessionState.AWAITING_ITEM

        result = self.shopping_list.add(text)
        if not result.success:
            self.dispatcher.report(result)
            return SessionState.AWAITING_ITEM
        self.output(f"Added: {result.data}")
        return SessionState.AWAITING_CONFIRMATION

    def _handle_confirmation(self, text: str) -> SessionState:
        if not text:
            self.output("Please answer y or n.")
            return SessionState.AWAITING_CONFIRMATION

        answer = text[0]
        if answer in ("y", "Y"):
            return SessionState.AWAITING_ITEM
        if answer in ("n", "N"):
            return SessionState.FINISHED

        if self.dispatcher.is_command(text):
            outcome = self.dispatcher.dispatch(text)
            if outcome.quit:
                return SessionState.QUIT
            if not outcome.handled:
                self.output(
                    f"Please answer y or n or enter a command starting with {self.dispatcher.prefix}."
                )
            return SessionState.AWAITING_CONFIRMATION

        p = self.dispatcher.prefix
        self.output(f"Please answer y or n. You can also use {p}view, {p}save, {p}help, etc.")
        return SessionState.AWAITING_CONFIRMATION
