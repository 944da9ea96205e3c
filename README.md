# phonebook

`phonebook` is a small terminal phone book that holds up to eight contacts.
Once all eight slots are used, each new contact overwrites the oldest one. The
package also includes `megaphone`, which prints its arguments in upper case.

## Installation

```
pip install .
```

## The phone book

```
phonebook
```

Type one of these commands at the `>` prompt:

- `ADD` asks for a first name, last name, nickname, phone number and darkest
  secret. It then saves the contact.
- `SEARCH` prints a table of the saved contacts. The columns are index, first
  name, last name and nickname. Each column is right-aligned and ten characters
  wide. A value longer than ten characters is cut to nine and followed by a `.`.
  You are then asked for an index from 0 to 7, and that contact is shown in
  full:
  - If the input is not a whole number in that range, you get `Invalid index`.
  - If the number points at a slot with no contact, you get `Wrong Index`.
  - If the book is empty, you get `No Contacts in Phonebook` and no table.
- `EXIT` ends the program. The program also ends when input runs out.

The prompt ignores anything else you type. Commands are case-sensitive.

## What it does not do

All contacts live in memory only. Nothing is written to disk, so every contact
is lost when the program ends. You cannot edit or delete a contact, except
that a new one overwrites the oldest when the book is full.

## The megaphone

```
megaphone "shhhhh... I think the students are asleep..."
SHHHHH... I THINK THE STUDENTS ARE ASLEEP...
```

When you pass several arguments, they are joined with no separator between
them. Only ASCII letters are upper-cased. With no arguments, the command prints
`* LOUD AND UNBEARABLE FEEDBACK NOISE *`.

## Using it from Python

```python
from phonebook.book import PhoneBook
from phonebook.contact import Contact

book = PhoneBook()
book.add(Contact("Ada", "Lovelace", "ada", "000", "secret"))
print(len(book))
for row in book.summary_rows():
    print(row)
print(book.get(0).full_details())
```

`PhoneBook.get` raises `IndexError` for a slot that holds no contact.

`phonebook.megaphone.shout(words)` returns the text that the `megaphone`
command would print.

You can also drive an interactive session with your own input and output
functions: `phonebook.cli.run(read, write)` returns the book once the session
ends.