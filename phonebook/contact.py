"""A single phone book entry."""

from __future__ import annotations

from dataclasses import dataclass

from phonebook.utils import COLUMN_WIDTH, truncate


@dataclass(frozen=True)
class Contact:
    """Personal details of one contact."""

    first_name: str = ""
    last_name: str = ""
    nickname: str = ""
    phone_number: str = ""
    secret: str = ""

    def summary_row(self, index: int) -> str:
        """Return the table row for this contact at the given index."""
        cells = (
            str(index),
            truncate(self.first_name),
            truncate(self.last_name),
            truncate(self.nickname),
        )
        return "|".join(f"{cell:>{COLUMN_WIDTH}}" for cell in cells)

    def full_details(self) -> str:
        """Return every field of the contact as a block of lines."""
        return "\n".join(
            (
                "",
                "--- Contact Details ---",
                f"First name     : {self.first_name}",
                f"Last name      : {self.last_name}",
                f"Nickname       : {self.nickname}",
                f"Phone number   : {self.phone_number}",
                f"Darkest secret : {self.secret}",
                "------------------------",
            )
        )