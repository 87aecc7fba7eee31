"""Slash command parsing and dispatch."""
import re
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from usagi.config.settings import get_settings
from usagi.domain.errors import InvalidArgumentError
from usagi.domain.types import ParsedCommand
from usagi.services.base_service import Result
from usagi.services.file_service import FileService
from usagi.services.list_service import ShoppingList
from usagi.utils.logger import get_logger


logger = get_logger(__name__)

# Optional sign followed by digits; anything after the digits is ignored
_LEADING_INT = re.compile(r"[+-]?\d+")

HELP_LINES = [
    "Commands:",
    "  /view            - show list",
    "  /remove INDEX    - remove item by number",
    "  /save FILE       - save list to file",
    "  /load FILE       - load items from file (appends)",
    "  /clear           - remove all items",
    "  /help            - show this help",
    "  /quit            - quit immediately",
]


@dataclass(frozen=True)
class CommandOutcome:
    """What the dispatcher did with a line."""
    handled: bool
    quit: bool = False


def parse_command(line: str, prefix: str = "/") -> Optional[ParsedCommand]:
    """
    Split a command line into its name and first argument.

    Args:
        line: Raw input line
        prefix: Command prefix character

    Returns:
        The parsed command, or None if the line is not a command
    """
    text = (line or "").strip()
    if not text.startswith(prefix):
        return None
    tokens = text.split()
    name = tokens[0][len(prefix):]
    argument = tokens[1] if len(tokens) > 1 else None
    return ParsedCommand(name=name, argument=argument)


def parse_position(argument: str) -> Result[int]:
    """
    Read a 1-based position from the leading integer of an argument.

    Args:
        argument: Raw argument text, e.g. "3" or "3rd"

    Returns:
        Result containing the position, or a failure if it is not positive
    """
    match = _LEADING_INT.match(argument.strip())
    position = int(match.group()) if match else 0
    if position <= 0:
        return Result.from_error(InvalidArgumentError(
            "Specify a positive index",
            metadata={"argument": argument}
        ))
    return Result.ok(position)


class CommandDispatcher:
    """Runs slash commands against a shopping list."""

    def __init__(
        self,
        shopping_list: ShoppingList,
        output: Callable[[str], None],
        file_service: Optional[FileService] = None,
        prefix: Optional[str] = None
    ):
        """
        Initialize the dispatcher.

        Args:
            shopping_list: List the commands operate on
            output: Callable receiving each line of user-facing text
            file_service: Persistence adapter for /save and /load
            prefix: Command prefix character (defaults to settings)
        """
        self.shopping_list = shopping_list
        self.output = output
        self.file_service = file_service or FileService()
        self.prefix = prefix or get_settings().COMMAND_PREFIX

        # Map command names to their handlers
        self.handlers: Dict[str, Callable[[Optional[str]], bool]] = {
            'view': self._handle_view,
            'remove': self._handle_remove,
            'save': self._handle_save,
            'load': self._handle_load,
            'clear': self._handle_clear,
            'help': self._handle_help,
            'quit': self._handle_quit,
        }

    def is_command(self, line: str) -> bool:
        return (line or "").strip().startswith(self.prefix)

    def dispatch(self, line: str) -> CommandOutcome:
        """
        Run the command on a line, if it is one.

        Every line starting with the prefix is consumed, including unknown
        commands, so callers never treat it as an item.

        Args:
            line: Raw input line

        Returns:
            Whether the line was handled and whether the session should quit
        """
        command = parse_command(line, self.prefix)
        if command is None:
            return CommandOutcome(handled=False)

        logger.debug("Dispatching command", command=command.name, argument=command.argument)
        handler = self.handlers.get(command.name)
        if handler is None:
            logger.info("Unknown command", command=command.name)
            self.output(f"Unknown command. Type {self.prefix}help for commands.")
            return CommandOutcome(handled=True)

        quit_requested = handler(command.argument)
        return CommandOutcome(handled=True, quit=quit_requested)

    def print_list(self) -> None:
        for line in self.shopping_list.render():
            self.output(line)

    def _usage(self, usage: str) -> None:
        self.output(f"Usage: {self.prefix}{usage}")

    def report(self, result: Result) -> None:
        """Print a failed result followed by its suggestions."""
        self.output(result.error)
        for suggestion in result.suggestions:
            self.output(f"  {suggestion}")

    def _handle_view(self, argument: Optional[str]) -> bool:
        self.print_list()
        return False

    def _handle_remove(self, argument: Optional[str]) -> bool:
        if not argument:
            self._usage("remove INDEX")
            return False

        position = parse_position(argument)
        if not position.success:
            self.report(position)
            return False

        result = self.shopping_list.remove(position.data)
        if not result.success:
            self.report(result)
        return False

    def _handle_save(self, argument: Optional[str]) -> bool:
        if not argument:
            self._usage("save filename")
            return False

        result = self.file_service.save(self.shopping_list, argument)
        if result.success:
            self.output(f"Saved {result.data} items to '{argument}'")
        else:
            self.report(result)
        return False

    def _handle_load(self, argument: Optional[str]) -> bool:
        if not argument:
            self._usage("load filename")
            return False

        result = self.file_service.load(self.shopping_list, argument)
        if result.success:
            self.output(f"Loaded items from '{argument}' (now {result.data} items)")
        else:
            self.report(result)
        return False

    def _handle_clear(self, argument: Optional[str]) -> bool:
        self.shopping_list.clear()
        self.output("Cleared the list")
        return False

    def _handle_help(self, argument: Optional[str]) -> bool:
        for line in HELP_LINES:
            self.output(line.replace("/", self.prefix, 1))
        return False

    def _handle_quit(self, argument: Optional[str]) -> bool:
        self.output("Goodbye!")
        return True
