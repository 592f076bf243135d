"""
CLI Application Logic

Provides the interactive command-line interface for the contact book.
"""
import logging
from typing import Callable, Optional
from contact_book import ContactBook
from contact_book.api import FAREWELL
from contact_book.config import Settings, load_settings

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def interactive_session(
    book: ContactBook,
    settings: Optional[Settings] = None,
    input_fn: Optional[InputFn] = None,
    output_fn: Optional[OutputFn] = None,
) -> None:
    """
    Run the read-handle-print loop until exit, end of input or Ctrl-C.

    Args:
        book: Contact book that executes each line
        settings: Runtime settings (prompt text); loaded from env if omitted
        input_fn: Line reader, `input` by default
        output_fn: Result writer, `print` by default
    """
    settings = settings or load_settings()
    input_fn = input_fn or input
    output_fn = output_fn or print

    output_fn("Contact book. Type 'help' for the list of commands.")
    logger.info("Interactive session started")

    while True:
        try:
            line = input_fn(settings.prompt).rstrip("\r\n")
            result = book.handle(line)
            output_fn(result.message)
            if result.should_exit:
                break
        except (KeyboardInterrupt, EOFError):
            output_fn(f"\n{FAREWELL}")
            break
        except Exception as e:
            logger.exception("Error while handling command: %s", e)

    logger.info("Interactive session ended (%d contacts)", len(book.store))


def run_cli(
    prompt: Optional[str] = None,
    export_dir: Optional[str] = None,
    log_level: Optional[str] = None,
    interactive: bool = True,
) -> ContactBook:
    """
    Run the CLI application.

    Args:
        prompt: Prompt override
        export_dir: Base directory override for relative export paths
        log_level: Log level override (validated, applied by the caller)
        interactive: Whether to start the interactive session

    Returns:
        The ContactBook used for the session
    """
    settings = load_settings(prompt=prompt, export_dir=export_dir, log_level=log_level)
    book = ContactBook(export_dir=settings.export_dir)

    if interactive:
        interactive_session(book, settings)

    return book
