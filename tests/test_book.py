import pytest

from phonebook.book import MAX_CONTACTS, PhoneBook
from phonebook.contact import Contact


def make(name):
    return Contact(name, "Last", "nick", "1", "secret")


def test_new_book_is_empty():
    book = PhoneBook()
    assert len(book) == 0
    assert book.summary_rows() == []
    with pytest.raises(IndexError):
        book.get(0)


def test_add_and_get():
    book = PhoneBook()
    first, second = make("Ann"), make("Bob")
    book.add(first)
    book.add(second)
    assert len(book) == 2
    assert book.get(0) == first
    assert book.get(1) == second


def test_capacity_is_eight():
    book = PhoneBook()
    for i in range(20):
        book.add(make(f"n{i}"))
    assert MAX_CONTACTS == 8
    assert len(book) == 8
    assert len(book.summary_rows()) == 8
    with pytest.raises(IndexError):
        book.get(8)


def test_ninth_contact_replaces_oldest():
    book = PhoneBook()
    contacts = [make(f"n{i}") for i in range(MAX_CONTACTS + 1)]
    for contact in contacts:
        book.add(contact)
    assert len(book) == MAX_CONTACTS
    assert book.get(0) == contacts[-1]
    assert book.get(1) == contacts[1]


def test_wrap_around_continues():
    book = PhoneBook()
    contacts = [make(f"n{i}") for i in range(MAX_CONTACTS + 3)]
    for contact in contacts:
        book.add(contact)
    assert [book.get(i) for i in range(3)] == contacts[MAX_CONTACTS:]
    assert book.get(3) == contacts[3]


@pytest.mark.parametrize("index", [-1, 2, MAX_CONTACTS, 100])
def test_get_rejects_bad_index(index):
    book = PhoneBook()
    book.add(make("Ann"))
    book.add(make("Bob"))
    with pytest.raises(IndexError):
        book.get(index)


def test_summary_rows_match_contacts():
    book = PhoneBook()
    for i in range(MAX_CONTACTS + 2):
        book.add(make(f"n{i}"))
    rows = book.summary_rows()
    assert len(rows) == MAX_CONTACTS
    assert rows == [book.get(i).summary_row(i) for i in range(MAX_CONTACTS)]
    assert [row.split("|")[0].strip() for row in rows] == [str(i) for i in range(MAX_CONTACTS)]