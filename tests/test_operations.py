"""
Tests for the operation table
"""

import pytest

from bookshelf.exceptions import BookshelfError, UnknownOperationError
from bookshelf.operations import (
    OPERATIONS,
    OperationKind,
    dispatch,
    get_operation,
    mutations,
    queries,
)
from bookshelf.store import SEED_BOOKS


def test_registered_operations():
    assert set(OPERATIONS) == {"books", "book", "addBook"}
    assert queries() == ["books", "book"]
    assert mutations() == ["addBook"]
    assert get_operation("addBook").kind is OperationKind.MUTATION


def test_books_returns_all(store):
    assert dispatch(store, "books") == list(SEED_BOOKS)


def test_book_found(store):
    book = dispatch(store, "book", id=2)

    assert book.title == "City of Glass"


def test_book_missing_is_none(store):
    assert dispatch(store, "book", id=999) is None


def test_add_book_appends(store):
    book = dispatch(store, "addBook", title="Dune", author="Frank Herbert")

    assert book.id == 3
    assert dispatch(store, "books")[-1] == book


def test_add_book_without_arguments(store):
    book = dispatch(store, "addBook")

    assert book.title is None
    assert book.author is None
    assert store.count() == 3


def test_interleaved_reads_and_writes_keep_order(store):
    added = []
    for title in ("A", "B", "C"):
        added.append(dispatch(store, "addBook", title=title))
        assert dispatch(store, "books") == list(SEED_BOOKS) + added


def test_unknown_operation(store):
    with pytest.raises(UnknownOperationError) as exc_info:
        dispatch(store, "deleteBook", id=1)

    assert exc_info.value.name == "deleteBook"
    assert isinstance(exc_info.value, BookshelfError)
    assert store.count() == 2
