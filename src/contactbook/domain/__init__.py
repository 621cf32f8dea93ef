"""Domain layer: value objects and errors. No dependencies on outer layers."""

from contactbook.domain.entities import Contact, InvalidContactError

__all__ = ["Contact", "InvalidContactError"]
