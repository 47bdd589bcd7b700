import io

import pytest

from contactbook.contact import Contact
from contactbook.phonebook import CAPACITY, PhoneBook, truncate


def make(text, start=0):
    out = io.StringIO()
    return PhoneBook(start, io.StringIO(text), out), out


def entry(first, last="Lovelace", nick="Ada", number="0123", secret="secret"):
    return "\n".join([first, last, nick, number, secret]) + "\n"


def test_truncate_short_text_unchanged():
    assert truncate("Ada") == "Ada"


def test_truncate_ten_characters_unchanged():
    assert truncate("abcdefghij") == "abcdefghij"


@pytest.mark.parametrize("text", ["Phone number", "Darkest secret", "abcdefghijk"])
def test_truncate_long_text(text):
    result = truncate(text)
    assert len(result) == 10
    assert result.endswith(".")
    assert text.startswith(result[:9])


def test_add_stores_contact():
    book, _ = make(entry("Ada"))
    book.add()
    assert book.contacts()[0] == Contact("Ada", "Lovelace", "Ada", "0123", "secret")
    assert all(c.is_empty() for c in book.contacts()[1:])


def test_add_strips_blanks():
    book, _ = make(entry("  Grace\t "))
    book.add()
    assert book.contacts()[0].first_name == "Grace"


def test_add_rejects_blank_field():
    book, out = make(" \t\n")
    book.add()
    assert "..First name cannot be empty!" in out.getvalue()
    assert all(c.is_empty() for c in book.contacts())


def test_add_rejects_non_digit_number():
    book, out = make(entry("Ada", number="01-23"))
    book.add()
    assert "..Phone number can only contain numbers!" in out.getvalue()
    assert all(c.is_empty() for c in book.contacts())


def test_add_wraps_around_after_eight():
    names = [f"Name{n}" for n in range(CAPACITY + 1)]
    book, _ = make("".join(entry(name) for name in names))
    for _ in names:
        book.add()
    firsts = [c.first_name for c in book.contacts()]
    assert firsts[0] == names[-1]
    assert firsts[1:] == names[1:CAPACITY]


def test_start_slot_is_used():
    book, _ = make(entry("Ada"), start=3)
    book.add()
    assert book.contacts()[3].first_name == "Ada"
    assert book.contacts()[0].is_empty()


@pytest.mark.parametrize("start", [-1, CAPACITY])
def test_invalid_start_raises(start):
    with pytest.raises(ValueError):
        PhoneBook(start, io.StringIO(), io.StringIO())


def test_add_at_eof_stores_nothing_and_sets_eof():
    book, out = make("Ada\n")
    book.add()
    assert book.eof is True
    assert "cannot be empty" not in out.getvalue()
    assert all(c.is_empty() for c in book.contacts())


@pytest.mark.parametrize("answer", ["8", "12", "", "a"])
def test_search_invalid_index(answer):
    book, out = make(answer + "\n")
    book.search()
    assert out.getvalue().endswith("..Invalid index!\n")


def test_search_shows_contact():
    book, out = make(entry("Ada") + "0\n")
    book.add()
    book.search()
    text = out.getvalue()
    detail = text.split("Index:")[-1].splitlines()
    cells = detail[1].split("|")[:-1]
    assert [c.strip() for c in cells] == ["0", "Ada", "Lovelace", "Ada", "0123", "secret"]
    assert all(len(c) == 10 for c in cells)


def test_search_lists_only_filled_slots():
    book, out = make(entry("Ada") + "5\n")
    book.add()
    book.search()
    listing = out.getvalue().split("Darkest secret:")[-1].split("Index:")[0]
    rows = [line for line in listing.splitlines() if line]
    assert len(rows) == 2
    assert rows[1].split("|")[1].strip() == "Ada"


def test_close_writes_once():
    book, out = make("")
    book.close()
    book.close()
    assert out.getvalue() == "..Exiting program.\n"


def test_context_manager_closes():
    out = io.StringIO()
    with PhoneBook(0, io.StringIO(), out) as book:
        assert book.contacts()[0].is_empty()
    assert out.getvalue() == "..Exiting program.\n"