"""
Contact Book Core - command interpretation and contact storage

This is a pure library module with NO terminal I/O.
Import this in the CLI or any other front end.

Usage:
    from contact_book import ContactBook

    book = ContactBook()
    result = book.handle("add Alice phone +123456789")
"""

from contact_book.api import ContactBook
from contact_book.parsing import parse

__all__ = ["ContactBook", "parse"]
