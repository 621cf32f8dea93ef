"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from contactbook.domain import Contact


class ContactRepository(Protocol):
    """Stores contacts for one manager."""

    def add(self, contact: Contact) -> None:
        """Store a contact. Duplicates are kept."""
        ...

    def list_all(self) -> list[Contact]:
        """Return all contacts in insertion order."""
        ...
