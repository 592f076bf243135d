"""Data models and command values"""
from .models import Contact, CommandResult, ResultStatus
from .commands import (
    Command,
    ExitCommand,
    HelpCommand,
    AddPhoneCommand,
    AddEmailCommand,
    ShowCommand,
    FindCommand,
    ExportCommand,
    PHONE_PATTERN,
    EMAIL_PATTERN,
)

__all__ = [
    "Contact",
    "CommandResult",
    "ResultStatus",
    "Command",
    "ExitCommand",
    "HelpCommand",
    "AddPhoneCommand",
    "AddEmailCommand",
    "ShowCommand",
    "FindCommand",
    "ExportCommand",
    "PHONE_PATTERN",
    "EMAIL_PATTERN",
]
