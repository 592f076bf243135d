from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


@dataclass
class Contact:
    name: str
    phones: List[str] = field(default_factory=list)
    emails: List[str] = field(default_factory=list)

    def has_value(self, value: str) -> bool:
        """Return True if value is one of this contact's phones or emails."""
        return value in self.phones or value in self.emails

    def to_serializable(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "phones": list(self.phones),
            "emails": list(self.emails),
        }


class ResultStatus(str, Enum):
    OK = "ok"
    INVALID = "invalid"
    NOT_FOUND = "not_found"
    IO_ERROR = "io_error"
    EXIT = "exit"


@dataclass(frozen=True)
class CommandResult:
    """Outcome of executing one command; every command yields exactly one."""
    status: ResultStatus
    message: str
    data: Optional[Any] = None

    @property
    def should_exit(self) -> bool:
        return self.status is ResultStatus.EXIT

    @property
    def ok(self) -> bool:
        return self.status in (ResultStatus.OK, ResultStatus.EXIT)
