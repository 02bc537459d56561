"""In-memory book storage."""

from .book_store import BookStore
from .models import BookRecord
from .seed import SEED_BOOKS

__all__ = ["BookRecord", "BookStore", "SEED_BOOKS"]
