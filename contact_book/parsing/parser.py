import logging
from typing import List

from contact_book.models import (
    AddEmailCommand,
    AddPhoneCommand,
    Command,
    ExitCommand,
    ExportCommand,
    FindCommand,
    HelpCommand,
    ShowCommand,
)

logger = logging.getLogger(__name__)


def tokenize(line: str) -> List[str]:
    """Split a command line on single spaces.

    There is no quoting: a value containing a space is cut at its first token,
    and consecutive spaces produce empty tokens.
    """
    return line.split(" ")


def parse(line: str) -> Command:
    """Turn one raw input line into a command.

    Never raises; anything unrecognized becomes a HelpCommand.
    """
    parts = tokenize(line)
    keyword = parts[0].lower()
    command: Command

    if line.lower() == "exit":
        command = ExitCommand()
    elif line.lower() == "help":
        command = HelpCommand()
    elif keyword == "show" and len(parts) == 2:
        command = ShowCommand(name=parts[1])
    elif keyword == "find" and len(parts) == 2:
        command = FindCommand(query=parts[1])
    elif keyword == "export" and len(parts) == 2:
        command = ExportCommand(path=parts[1])
    elif line.startswith("add ") and len(parts) >= 4:
        command = _parse_add(parts)
    else:
        command = HelpCommand()

    logger.debug("Parsed %r as %s", line, command.kind)
    return command


def _parse_add(parts: List[str]) -> Command:
    name, field_type, value = parts[1], parts[2].lower(), parts[3]
    if field_type == "phone":
        return AddPhoneCommand(name=name, phone=value)
    if field_type == "email":
        return AddEmailCommand(name=name, email=value)
    logger.debug("Unknown field type %r in add command", field_type)
    return HelpCommand()
