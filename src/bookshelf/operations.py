"""
Operation table mapping named queries and mutations to store calls.

The table is plain Python and knows nothing about GraphQL or HTTP; the GraphQL
resolvers and any other front end dispatch through it by name.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .exceptions import UnknownOperationError
from .logging import get_logger
from .store import BookRecord, BookStore

logger = get_logger(__name__)


class OperationKind(str, Enum):
    QUERY = "query"
    MUTATION = "mutation"


@dataclass(frozen=True)
class Operation:
    """A named operation and the handler that performs it."""

    name: str
    kind: OperationKind
    handler: Callable[..., Any]
    description: str = ""


def _list_books(store: BookStore) -> list[BookRecord]:
    return store.list_all()


def _find_book(store: BookStore, id: int) -> BookRecord | None:
    return store.find_by_id(id)


def _add_book(store: BookStore, title: str | None = None, author: str | None = None) -> BookRecord:
    return store.insert(title=title, author=author)


OPERATIONS: dict[str, Operation] = {
    op.name: op
    for op in (
        Operation("books", OperationKind.QUERY, _list_books, "List every book."),
        Operation("book", OperationKind.QUERY, _find_book, "Get a book by id."),
        Operation("addBook", OperationKind.MUTATION, _add_book, "Add a new book."),
    )
}


def get_operation(name: str) -> Operation:
    try:
        return OPERATIONS[name]
    except KeyError:
        raise UnknownOperationError(name) from None


def dispatch(store: BookStore, name: str, **arguments: Any) -> Any:
    """Run the operation registered under ``name`` against ``store``.

    Raises:
        UnknownOperationError: If no operation has that name
    """
    operation = get_operation(name)
    logger.debug("Dispatching operation", operation=name, kind=operation.kind.value)
    return operation.handler(store, **arguments)


def queries() -> list[str]:
    return [op.name for op in OPERATIONS.values() if op.kind is OperationKind.QUERY]


def mutations() -> list[str]:
    return [op.name for op in OPERATIONS.values() if op.kind is OperationKind.MUTATION]
