"""JSON snapshot of the contact store."""

from __future__ import annotations
import json
from typing import Iterable

from contact_book.models import Contact


def contacts_to_json(contacts: Iterable[Contact]) -> str:
    """Serialize contacts to a compact JSON array.

    Each element is {"name": ..., "phones": [...], "emails": [...]} and the
    input order is kept. Strings are escaped by the json encoder.
    """
    payload = [c.to_serializable() for c in contacts]
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
