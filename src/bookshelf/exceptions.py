"""
Exception types raised by the Bookshelf service
"""


class BookshelfError(Exception):
    """Base class for Bookshelf errors."""

    pass


class UnknownOperationError(BookshelfError):
    """Raised when dispatching an operation name that is not registered."""

    def __init__(self, name: str):
        super().__init__(f"Unknown operation: {name}")
        self.name = name


class SchemaValidationError(BookshelfError):
    """Raised when the GraphQL schema fails validation at startup."""

    pass
