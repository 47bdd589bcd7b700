# contactbook

A small terminal phone book that holds up to eight contacts. The package also
has a `megaphone` command that shouts whatever you give it.

## Installation

```
pip install .
```

## The phone book

```
phonebook
```

You can also start it with `python -m contactbook.cli`.

At the `Phonebook:` prompt, type one of these commands:

- `ADD` asks for a first name, a last name, a nickname, a phone number and a
  darkest secret, one after another. Each answer has surrounding spaces and
  tabs removed. A blank answer is refused with `..<field> cannot be empty!`.
  A phone number that has anything other than the digits `0`–`9` is refused
  with `..Phone number can only contain numbers!`. If any answer is refused,
  nothing is saved. Contacts go into slots 0 to 7 in turn. Once all eight
  slots are used, each new contact replaces the oldest one.
- `SEARCH` lists the slots that hold a contact. Each one shows its index,
  first name, last name and nickname in right-aligned columns ten characters
  wide. A value longer than ten characters is cut to nine and ends in `.`.
  You are then asked for an `Index:`. A single digit from `0` to `7` shows
  every field of that slot, even if the slot is empty. Anything else prints
  `..Invalid index!`.
- `EXIT` quits.

Any other input is ignored, and the prompt comes back.

At end of input (Ctrl+D), whether at the command prompt or partway through
`ADD`, the program prints `..EOF detected` and stops. On the way out it always
prints `..Exiting program.`.

Contacts are kept in memory only. Nothing is saved to disk, so the phone book
starts empty every time you run it.

## The megaphone

```
megaphone "hello" world
```

This prints `HELLOWORLD`. The arguments are joined with no spaces between
them, and the ASCII letters are turned into capitals. Other characters are
left as they are. With no arguments, it prints
`* LOUD AND UNBEARABLE FEEDBACK NOISE *`.

## Using it from Python

```python
import io
from contactbook.phonebook import PhoneBook, truncate
from contactbook.megaphone import shout

print(shout(["hi", "there"]))       # HITHERE
print(truncate("Darkest secret"))   # Darkest s.

answers = io.StringIO("Ada\nLovelace\nCountess\n0123\nnone\n")
with PhoneBook(0, answers, io.StringIO()) as book:
    book.add()
    print(book.contacts()[0].first_name)   # Ada
```

- `PhoneBook(start, stdin, stdout)` reads its answers from `stdin` and writes
  its prompts to `stdout`. These default to the standard streams. `start` is
  the first slot to fill, from 0 to 7. Any other value raises `ValueError`.
- `add()` and `search()` do the same work as the commands of the same name.
- `contacts()` returns all eight slots as `Contact` objects, in slot order.
- `eof` becomes true once the input runs out.
- `close()` prints `..Exiting program.`. It prints it only once, and leaving
  a `with` block calls it.
- `Contact` is a frozen dataclass with the fields `first_name`, `last_name`,
  `nickname`, `phone_number` and `darkest_secret`. Its `is_empty()` method
  returns true when there is no first name.
- `contactbook.cli.run(stdin, stdout)` runs the command loop on the streams
  you give it.

## Running the tests

```
pip install .[test]
pytest
```