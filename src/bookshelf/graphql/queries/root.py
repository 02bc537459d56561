"""
Root GraphQL query definitions
"""

import strawberry

from ..types.book import Book


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def books(self, info: strawberry.Info) -> list[Book]:
        """Get every book."""
        from ..resolvers.book import resolve_books

        return await resolve_books(info)

    @strawberry.field
    async def book(self, info: strawberry.Info, id: int) -> Book | None:
        """Get a book by ID."""
        from ..resolvers.book import resolve_book_by_id

        return await resolve_book_by_id(info, id)
