"""Command values produced by the parser and consumed by the executor."""
from __future__ import annotations

import re
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

PHONE_PATTERN = re.compile(r"^\+\d{1,15}$", re.ASCII)
EMAIL_PATTERN = re.compile(r"^[\w.]+@[\w.]+\.[A-Za-z]{2,}$", re.ASCII)


class _CommandBase(BaseModel):
    """Shared behaviour for every command variant."""

    model_config = ConfigDict(frozen=True)

    def validation_error(self) -> Optional[str]:
        """Return the reason this command cannot run, or None if it is valid."""
        return None

    def is_valid(self) -> bool:
        return self.validation_error() is None


class ExitCommand(_CommandBase):
    kind: Literal["exit"] = "exit"


class HelpCommand(_CommandBase):
    kind: Literal["help"] = "help"


class AddPhoneCommand(_CommandBase):
    kind: Literal["add_phone"] = "add_phone"
    name: str = Field(..., description="Contact name")
    phone: str = Field(..., description="Phone number, e.g. +123456789")

    def validation_error(self) -> Optional[str]:
        # fullmatch: `$` alone would accept a trailing newline
        if PHONE_PATTERN.fullmatch(self.phone) is None:
            return "invalid phone format (expected '+' followed by 1-15 digits)"
        return None


class AddEmailCommand(_CommandBase):
    kind: Literal["add_email"] = "add_email"
    name: str = Field(..., description="Contact name")
    email: str = Field(..., description="Email address, e.g. name@example.com")

    def validation_error(self) -> Optional[str]:
        if EMAIL_PATTERN.fullmatch(self.email) is None:
            return "invalid email format (expected name@example.com)"
        return None


class ShowCommand(_CommandBase):
    kind: Literal["show"] = "show"
    name: str

    def validation_error(self) -> Optional[str]:
        if not self.name.strip():
            return "contact name must not be empty"
        return None


class FindCommand(_CommandBase):
    kind: Literal["find"] = "find"
    query: str

    def validation_error(self) -> Optional[str]:
        if not self.query.strip():
            return "search query must not be empty"
        return None


class ExportCommand(_CommandBase):
    kind: Literal["export"] = "export"
    path: str

    def validation_error(self) -> Optional[str]:
        if not self.path.strip():
            return "export path must not be empty"
        return None


Command = Annotated[
    Union[
        ExitCommand,
        HelpCommand,
        AddPhoneCommand,
        AddEmailCommand,
        ShowCommand,
        FindCommand,
        ExportCommand,
    ],
    Field(discriminator="kind"),
]
