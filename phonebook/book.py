"""A fixed-size phone book that overwrites its oldest entries."""

from __future__ import annotations

from phonebook.contact import Contact

MAX_CONTACTS = 8


class PhoneBook:
    """Holds up to MAX_CONTACTS contacts; further additions overwrite the oldest slot."""

    def __init__(self) -> None:
        self._slots: list[Contact] = [Contact() for _ in range(MAX_CONTACTS)]
        self._added = 0

    def add(self, contact: Contact) -> None:
        """Store a contact, replacing the oldest one once the book is full."""
        self._slots[self._added % MAX_CONTACTS] = contact
        self._added += 1

    def summary_rows(self) -> list[str]:
        """Return the table rows of all stored contacts in slot order."""
        return [contact.summary_row(index) for index, contact in enumerate(self._slots[: len(self)])]

    def get(self, index: int) -> Contact:
        """Return the contact in a slot; raise IndexError for an empty or invalid slot."""
        if not 0 <= index < len(self):
            raise IndexError(f"no contact at index {index}")
        return self._slots[index]

    def __len__(self) -> int:
        return min(self._added, MAX_CONTACTS)