"""Add and list contacts. One manager per use session; nothing outlives it."""

import logging
from collections.abc import Iterator

from contactbook.application.ports import ContactRepository
from contactbook.domain import Contact, InvalidContactError
from contactbook.infrastructure.memory_repository import InMemoryContactRepository

logger = logging.getLogger(__name__)


class ContactManager:
    """Core flow: add contact -> stored in insertion order. List all."""

    def __init__(self, repository: ContactRepository | None = None) -> None:
        self._repo = repository if repository is not None else InMemoryContactRepository()

    def add_contact(
        self, first_name: str | None, last_name: str | None, phone_number: str | None
    ) -> None:
        """Build a Contact and store it. Raises InvalidContactError if any field is None."""
        try:
            contact = Contact(
                first_name=first_name,
                last_name=last_name,
                phone_number=phone_number,
            )
        except InvalidContactError as e:
            logger.warning("Contact rejected: %s", e)
            raise
        self._repo.add(contact)
        logger.debug("Contact added: %s", contact.full_name)

    def get_all_contacts(self) -> tuple[Contact, ...]:
        """Return a snapshot of all contacts in insertion order."""
        return tuple(self._repo.list_all())

    def __len__(self) -> int:
        return len(self._repo.list_all())

    def __iter__(self) -> Iterator[Contact]:
        return iter(self.get_all_contacts())
