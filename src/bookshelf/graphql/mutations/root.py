"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.book import Book


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addBook")
    async def add_book(
        self,
        info: strawberry.Info,
        title: str | None = None,
        author: str | None = None,
    ) -> Book:
        """Add a new book."""
        from ..resolvers.book import add_book

        return await add_book(info, title, author)
