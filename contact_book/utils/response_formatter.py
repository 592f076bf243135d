"""Rendering of contacts and command listings to display text."""

from __future__ import annotations
from typing import Iterable, List, Tuple

from contact_book.models import Contact

# (syntax, description, example or "")
HELP_ENTRIES: List[Tuple[str, str, str]] = [
    ("exit", "quit the program", ""),
    ("help", "show this message", ""),
    ("add <name> phone <phone>", "add a phone number to a contact", "add Alice phone +123456789"),
    ("add <name> email <email>", "add an email address to a contact", "add Alice email alice@example.com"),
    ("show <name>", "show a contact by name", "show Alice"),
    ("find <phone or email>", "find contacts by phone or email", "find +123456789"),
    ("export <file>", "export all contacts to a JSON file", "export contacts.json"),
]


def format_help() -> str:
    """Return the static list of commands with their syntax and examples."""
    width = max(len(syntax) for syntax, _, _ in HELP_ENTRIES)
    lines = ["Available commands:"]
    for syntax, description, example in HELP_ENTRIES:
        line = f"  {syntax.ljust(width)}  {description}"
        if example:
            line += f" (example: {example})"
        lines.append(line)
    return "\n".join(lines)


def _join(values: List[str]) -> str:
    return ", ".join(values) if values else "-"


def format_contact(contact: Contact) -> str:
    return "\n".join([
        f"Contact {contact.name}:",
        f"  Phones: {_join(contact.phones)}",
        f"  Emails: {_join(contact.emails)}",
    ])


def format_found(query: str, contacts: Iterable[Contact]) -> str:
    names = [c.name for c in contacts]
    lines = [f"Contacts matching {query}:"]
    lines.extend(f"  {name}" for name in names)
    return "\n".join(lines)
