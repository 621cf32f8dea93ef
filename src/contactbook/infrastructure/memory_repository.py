"""In-memory implementation of ContactRepository (no DB)."""

from contactbook.domain import Contact


class InMemoryContactRepository:
    """Stores contacts in memory. Order preserved by insertion."""

    def __init__(self) -> None:
        self._contacts: list[Contact] = []

    def add(self, contact: Contact) -> None:
        self._contacts.append(contact)

    def list_all(self) -> list[Contact]:
        return list(self._contacts)
