"""Command line entry point: startup questions, then the window."""

import logging
from typing import Optional

import click

from .engine.db import CardStore
from .engine.errors import ImportFileError, MalformedRecordError, StorageUnavailableError
from .engine.session import FlashcardSession
from .utils.config import config
from .utils.logs import setup_logging

logger = logging.getLogger(__name__)

FILE_FORMAT_HELP = """
Note that the question and answer fields are mandatory. Expected content of the file:

Question;Answer
What is the capital of Czech Republic?;Prague
"""


def ask_start() -> str:
    click.echo("Do you want to create a new database of flashcards, or to use the latest created one?")
    return click.prompt(
        'Type "n" for "new" or "c" for "continue"',
        type=click.Choice(["n", "c"], case_sensitive=False),
        show_choices=False,
    ).lower()


def ask_source() -> str:
    click.echo("Do you want to download flashcards from the file, or to add them manually?")
    return click.prompt(
        'Type "f" for "file" or "m" for "manually"',
        type=click.Choice(["f", "m"], case_sensitive=False),
        show_choices=False,
    ).lower()


def ask_import_path() -> str:
    click.echo(FILE_FORMAT_HELP)
    return click.prompt("Type the path to the file with flashcards",
                        type=click.Path(exists=True, dir_okay=False))


@click.command()
@click.option("--db", "db_path", default=None, type=click.Path(dir_okay=False),
              help="Path to the SQLite database (defaults to the configured one).")
@click.option("--new/--continue", "new", default=None,
              help="Start an empty collection or continue the previous one.")
@click.option("--import", "import_path", default=None, type=click.Path(dir_okay=False),
              help="Import flashcards from a 'question;answer' text file.")
@click.option("--manual", is_flag=True, help="Skip the import question and add cards by hand.")
@click.option("--log-level", default=None,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              help="Logging verbosity.")
@click.option("--no-gui", is_flag=True, help="Prepare the database without opening the window.")
def main(db_path: Optional[str], new: Optional[bool], import_path: Optional[str],
         manual: bool, log_level: Optional[str], no_gui: bool) -> None:
    """Study and quiz yourself with flashcards."""
    setup_logging(log_level or config.get("log_level", "WARNING"))
    db_path = db_path or config.get_database_path()
    logger.info("Starting with database %s", db_path)

    try:
        store = CardStore(db_path)
    except StorageUnavailableError as e:
        raise click.ClickException(e.message) from e

    session = FlashcardSession(store)

    if new is None:
        new = ask_start() == "n"
    if new:
        session.start_new()

    if import_path is None and not manual and ask_source() == "f":
        import_path = ask_import_path()

    if import_path:
        try:
            session.import_file(import_path)
        except (MalformedRecordError, ImportFileError) as e:
            store.close()
            raise click.ClickException(e.message) from e
        click.echo(f"Loaded {len(session.cards)} flashcards.")

    if no_gui:
        store.close()
        return

    from .ui.main import run_app
    try:
        run_app(session)
    finally:
        store.close()


if __name__ == "__main__":
    main()
