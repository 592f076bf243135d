import logging
from typing import Dict, Iterator, List, Optional

from contact_book.models import Contact

logger = logging.getLogger(__name__)


class ContactStore:
    """In-memory contacts keyed by name, kept in creation order."""

    def __init__(self) -> None:
        # dict preserves insertion order, which export relies on
        self._contacts: Dict[str, Contact] = {}

    def _get_or_create(self, name: str) -> Contact:
        contact = self._contacts.get(name)
        if contact is None:
            contact = Contact(name=name)
            self._contacts[name] = contact
            logger.info("Created contact %s", name)
        return contact

    def add_phone(self, name: str, phone: str) -> Contact:
        """Append a phone to the named contact, creating the contact if needed.

        The caller is responsible for validating the phone first.
        """
        contact = self._get_or_create(name)
        contact.phones.append(phone)
        logger.info("Added phone %s to %s", phone, name)
        return contact

    def add_email(self, name: str, email: str) -> Contact:
        """Append an email to the named contact, creating the contact if needed."""
        contact = self._get_or_create(name)
        contact.emails.append(email)
        logger.info("Added email %s to %s", email, name)
        return contact

    def get(self, name: str) -> Optional[Contact]:
        return self._contacts.get(name)

    def find(self, query: str) -> List[Contact]:
        """Return contacts with a phone or email exactly equal to query."""
        matches = [c for c in self._contacts.values() if c.has_value(query)]
        logger.debug("Find %r matched %d contacts", query, len(matches))
        return matches

    def contacts(self) -> List[Contact]:
        return list(self._contacts.values())

    def __len__(self) -> int:
        return len(self._contacts)

    def __contains__(self, name: object) -> bool:
        return name in self._contacts

    def __iter__(self) -> Iterator[Contact]:
        return iter(self.contacts())
