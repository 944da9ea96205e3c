"""Interactive phone book session."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from phonebook.book import MAX_CONTACTS, PhoneBook
from phonebook.contact import Contact
from phonebook.utils import error_text, parse_index, search_header

Reader = Callable[[], str]
Writer = Callable[[str], object]

_BANNER = "-------------------------------"

_FIELDS = (
    "First name     : ",
    "Last name      : ",
    "Nickname       : ",
    "Phone number   : ",
    "Darkest secret : ",
)

_MENU = (
    "\nPlease enter a command:\n"
    "  ADD\t- Add a new contact\n"
    "  SEARCH - Search and display a contact\n"
    "  EXIT\t- Exit the program\n"
    "\n"
)


def add_contact(book: PhoneBook, read: Reader, write: Writer) -> Contact:
    """Prompt for every field of a new contact and store it in the book."""
    write(f"{_BANNER}\n        Add New Contact        \n{_BANNER}\n")
    values = []
    for prompt in _FIELDS:
        write(prompt)
        values.append(read())
    contact = Contact(*values)
    book.add(contact)
    write("✅ Contact saved!\n")
    return contact


def search(book: PhoneBook, read: Reader, write: Writer) -> None:
    """Show the contact table and the full details of one chosen contact."""
    if len(book) == 0:
        write(error_text("No Contacts in Phonebook") + "\n")
        return
    write(search_header() + "\n")
    for row in book.summary_rows():
        write(row + "\n")
    write(f"\nEnter the index of the contact you want to view (0-{MAX_CONTACTS - 1}): ")
    try:
        index = parse_index(read())
    except ValueError:
        index = -1
    if not 0 <= index < MAX_CONTACTS:
        write(error_text("❌ Invalid index") + "\n")
        return
    try:
        contact = book.get(index)
    except IndexError:
        write(error_text("Wrong Index") + "\n")
        return
    write(contact.full_details() + "\n")


def run(read: Reader, write: Writer) -> PhoneBook:
    """Run the command loop until EXIT or end of input; return the book."""
    book = PhoneBook()
    write("Welcome to my Phonebook 📞📖\n")
    try:
        while True:
            write(_MENU)
            write("> ")
            command = read()
            if command == "ADD":
                add_contact(book, read, write)
            elif command == "SEARCH":
                search(book, read, write)
            elif command == "EXIT":
                break
    except EOFError:
        pass
    return book


def _read_stdin() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line.removesuffix("\n")


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Start an interactive phone book on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="phonebook", description="Keep up to eight contacts in memory."
    )
    parser.parse_args(argv)
    run(_read_stdin, _write_stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())