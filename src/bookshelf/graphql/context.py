"""
Helpers for reading per-request state out of the GraphQL context
"""

from typing import Any

import strawberry

from ..store import BookStore


def get_store_from_info(info: strawberry.Info) -> BookStore:
    """Return the book store attached to the current request context."""
    context: Any = info.context
    if isinstance(context, dict):
        store = context.get("store")
    else:
        store = getattr(context, "store", None)

    if store is None:
        raise RuntimeError("No book store in GraphQL context")
    return store
