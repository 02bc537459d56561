from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...operations import dispatch
from ..context import get_store_from_info

if TYPE_CHECKING:
    from ...store import BookRecord
    from ..types.book import Book

logger = get_logger(__name__)


def to_graphql_book(record: BookRecord) -> Book:
    from ..types.book import Book as BookType

    return BookType(id=record.id, title=record.title, author=record.author)


# Query resolvers
async def resolve_books(info: strawberry.Info) -> list[Book]:
    """Resolve every book in insertion order."""
    store = get_store_from_info(info)
    records = dispatch(store, "books")
    return [to_graphql_book(record) for record in records]


async def resolve_book_by_id(info: strawberry.Info, id: int) -> Book | None:
    """
    Resolve a book by its ID.

    A missing book is a normal outcome and resolves to None.
    """
    store = get_store_from_info(info)
    record = dispatch(store, "book", id=id)

    if record is None:
        logger.debug("Book not found", book_id=id)
        return None

    return to_graphql_book(record)


# Mutation resolvers
async def add_book(info: strawberry.Info, title: str | None, author: str | None) -> Book:
    """Add a book to the store and return it."""
    store = get_store_from_info(info)
    record = dispatch(store, "addBook", title=title, author=author)

    logger.info("Book added", book_id=record.id, total_books=store.count())
    return to_graphql_book(record)
