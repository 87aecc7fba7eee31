"""Command-line entry point for Usagi."""
import sys

import click

from usagi import __version__
from usagi.config.settings import get_settings
from usagi.domain.types import SessionState
from usagi.services.list_service import ShoppingList
from usagi.utils.logger import get_logger, setup_logging
from .session import SessionController


logger = get_logger(__name__)

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


@click.command()
@click.option(
    '--log-level',
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help='Override USAGI_LOG_LEVEL for this run'
)
@click.version_option(__version__, prog_name='usagi')
def cli(log_level):
    """
    Interactive shopping list. Type items to add them, or /help for commands.
    """
    settings = get_settings()
    if log_level:
        settings = settings.model_copy(update={"LOG_LEVEL": log_level.upper()})
    setup_logging(settings)

    try:
        session = SessionController(shopping_list=ShoppingList())
    except MemoryError:
        click.echo("Out of memory", err=True)
        sys.exit(1)

    logger.info("Session started")
    state = session.run(sys.stdin)
    logger.info("Exiting", state=state.value)
    sys.exit(0 if state in (SessionState.FINISHED, SessionState.QUIT) else 1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
