"""
Core API for the Contact Book

This is the interface-agnostic executor that any front end (the CLI, a test,
a script) feeds raw command lines into.
"""
import logging
from typing import Optional, assert_never

from contact_book.models import (
    AddEmailCommand,
    AddPhoneCommand,
    Command,
    CommandResult,
    ExitCommand,
    ExportCommand,
    FindCommand,
    HelpCommand,
    ResultStatus,
    ShowCommand,
)
from contact_book.parsing import parse
from contact_book.storage import ContactStore
from contact_book.utils import (
    contacts_to_json,
    format_contact,
    format_found,
    format_help,
    resolve_export_path,
    write_text,
)

logger = logging.getLogger(__name__)

FAREWELL = "Goodbye!"


class ContactBook:
    """
    Executor for contact book commands.

    Every call returns a CommandResult; nothing raises past this class.

    Usage:
        book = ContactBook()
        book.handle("add Alice phone +123456789")
        print(book.handle("show Alice").message)
    """

    def __init__(self, store: Optional[ContactStore] = None, export_dir: Optional[str] = None):
        """
        Args:
            store: Store to operate on (a fresh empty one by default)
            export_dir: Base directory for relative export paths (defaults to cwd)
        """
        self.store = store if store is not None else ContactStore()
        self.export_dir = export_dir

    def handle(self, line: str) -> CommandResult:
        """Parse one raw line and execute the resulting command."""
        return self.execute(parse(line))

    def execute(self, command: Command) -> CommandResult:
        """
        Validate and apply a command.

        Args:
            command: A parsed command value

        Returns:
            The outcome; invalid commands are reported with their reason
            and leave the store untouched.
        """
        reason = command.validation_error()
        if reason is not None:
            logger.warning("Rejected %s command: %s", command.kind, reason)
            return CommandResult(ResultStatus.INVALID, f"Error: {reason}.")

        if isinstance(command, ExitCommand):
            return CommandResult(ResultStatus.EXIT, FAREWELL)
        if isinstance(command, HelpCommand):
            return CommandResult(ResultStatus.OK, format_help())
        if isinstance(command, AddPhoneCommand):
            return self._add_phone(command)
        if isinstance(command, AddEmailCommand):
            return self._add_email(command)
        if isinstance(command, ShowCommand):
            return self._show(command)
        if isinstance(command, FindCommand):
            return self._find(command)
        if isinstance(command, ExportCommand):
            return self._export(command)
        assert_never(command)

    def _add_phone(self, command: AddPhoneCommand) -> CommandResult:
        self.store.add_phone(command.name, command.phone)
        return CommandResult(
            ResultStatus.OK,
            f"Phone {command.phone} added to {command.name}.",
            data={"name": command.name, "phone": command.phone},
        )

    def _add_email(self, command: AddEmailCommand) -> CommandResult:
        self.store.add_email(command.name, command.email)
        return CommandResult(
            ResultStatus.OK,
            f"Email {command.email} added to {command.name}.",
            data={"name": command.name, "email": command.email},
        )

    def _show(self, command: ShowCommand) -> CommandResult:
        contact = self.store.get(command.name)
        if contact is None:
            return CommandResult(ResultStatus.NOT_FOUND, f"Contact {command.name} not found.")
        return CommandResult(ResultStatus.OK, format_contact(contact), data=contact.to_serializable())

    def _find(self, command: FindCommand) -> CommandResult:
        found = self.store.find(command.query)
        if not found:
            return CommandResult(
                ResultStatus.NOT_FOUND,
                f"No contacts found with phone or email {command.query}.",
                data=[],
            )
        return CommandResult(
            ResultStatus.OK,
            format_found(command.query, found),
            data=[c.name for c in found],
        )

    def _export(self, command: ExportCommand) -> CommandResult:
        text = contacts_to_json(self.store.contacts())
        try:
            target = resolve_export_path(command.path, self.export_dir)
            write_text(target, text)
        except (OSError, ValueError, RuntimeError) as e:
            # ValueError: NUL byte or unencodable text; RuntimeError: export dir "~user" unknown
            logger.error("Failed to export contacts to %s: %s", command.path, e)
            detail = getattr(e, "strerror", None) or str(e)
            return CommandResult(
                ResultStatus.IO_ERROR,
                f"Error: could not export to {command.path}: {detail}.",
            )
        logger.info("Exported %d contacts to %s", len(self.store), target)
        return CommandResult(ResultStatus.OK, f"Contacts exported to {command.path}.", data=str(target))
