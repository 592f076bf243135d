"""Serialization, formatting and filesystem helpers"""
from .serialization import contacts_to_json
from .response_formatter import format_help, format_contact, format_found
from .fs import export_directory, resolve_export_path, write_text

__all__ = [
    "contacts_to_json",
    "format_help",
    "format_contact",
    "format_found",
    "export_directory",
    "resolve_export_path",
    "write_text",
]
