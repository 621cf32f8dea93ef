"""Domain entities: Contact and the error raised when one cannot be built."""

from dataclasses import dataclass


class InvalidContactError(ValueError):
    """Raised when a Contact is built with a missing field."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Contact {field} must not be None.")
        self.field = field


@dataclass(frozen=True)
class Contact:
    """
    A person's first name, last name and phone number.
    Only absence is rejected; empty strings and any phone format are kept as given.
    """

    first_name: str
    last_name: str
    phone_number: str

    def __post_init__(self):
        for name in ("first_name", "last_name", "phone_number"):
            if getattr(self, name) is None:
                raise InvalidContactError(name)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
