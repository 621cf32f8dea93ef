"""Application layer: use cases and ports. Depends only on domain."""

from contactbook.application.contact_manager import ContactManager
from contactbook.application.ports import ContactRepository

__all__ = ["ContactManager", "ContactRepository"]
