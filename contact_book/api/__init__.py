"""
Core API for the Contact Book.

This package provides the interface-agnostic executor used by the CLI
and by tests.
"""
from .contact_book import ContactBook, FAREWELL

__all__ = ["ContactBook", "FAREWELL"]
