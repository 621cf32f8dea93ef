"""
Contactbook core: clean-architecture layout.

- domain: Contact value object and InvalidContactError. No outer dependencies.
- application: use case (ContactManager) and port (ContactRepository).
- infrastructure: adapters (InMemoryContactRepository).
"""

from contactbook.application import ContactManager, ContactRepository
from contactbook.domain import Contact, InvalidContactError
from contactbook.infrastructure import InMemoryContactRepository

__all__ = [
    "Contact",
    "ContactManager",
    "ContactRepository",
    "InMemoryContactRepository",
    "InvalidContactError",
]
