"""
Book GraphQL type definitions
"""

import strawberry


@strawberry.type
class Book:
    """Book type for GraphQL API."""

    id: int
    title: str | None
    author: str | None
