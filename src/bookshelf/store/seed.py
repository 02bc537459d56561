"""
Records every seeded store starts with.
"""

from .models import BookRecord

SEED_BOOKS: tuple[BookRecord, ...] = (
    BookRecord(id=1, title="The Awakening", author="Kate Chopin"),
    BookRecord(id=2, title="City of Glass", author="Paul Auster"),
)
