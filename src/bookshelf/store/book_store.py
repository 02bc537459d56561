"""
In-memory book store.

The store owns an ordered list of immutable ``BookRecord`` objects. Records are
only ever appended; there is no update or delete. Every operation is synchronous
and completes without yielding, so callers running on a single event loop never
observe a half-applied insert. No locking is done beyond that.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..config import IdPolicy
from ..logging import get_logger
from .models import BookRecord
from .seed import SEED_BOOKS

logger = get_logger(__name__)


class BookStore:
    """Ordered, append-only collection of books."""

    def __init__(
        self,
        books: Iterable[BookRecord] = (),
        id_policy: IdPolicy = IdPolicy.SEQUENCE,
    ):
        self._books: list[BookRecord] = list(books)
        self.id_policy = IdPolicy(id_policy)
        self._next_id = max((book.id for book in self._books), default=0) + 1

    @classmethod
    def seeded(cls, id_policy: IdPolicy = IdPolicy.SEQUENCE) -> BookStore:
        """Create a store preloaded with the seed books."""
        return cls(SEED_BOOKS, id_policy=id_policy)

    def __len__(self) -> int:
        return len(self._books)

    def count(self) -> int:
        return len(self._books)

    def list_all(self) -> list[BookRecord]:
        """Return every book in insertion order."""
        return list(self._books)

    def find_by_id(self, id: int) -> BookRecord | None:
        """Return the first book with the given id, or None."""
        for book in self._books:
            if book.id == id:
                return book
        return None

    def insert(self, title: str | None = None, author: str | None = None) -> BookRecord:
        """Append a new book and return it.

        Title and author are stored as given; neither is required.
        """
        book = BookRecord(id=self._assign_id(), title=title, author=author)
        self._books.append(book)
        logger.debug("Book inserted", book_id=book.id, id_policy=self.id_policy.value)
        return book

    def _assign_id(self) -> int:
        if self.id_policy is IdPolicy.LENGTH:
            # May collide with an existing id; kept for compatibility
            return len(self._books)

        assigned = self._next_id
        self._next_id += 1
        return assigned
