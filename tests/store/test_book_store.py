"""
Tests for the in-memory book store
"""

import pytest
from pydantic import ValidationError

from bookshelf.config import IdPolicy
from bookshelf.store import SEED_BOOKS, BookRecord, BookStore


class TestSeededStore:
    def test_seed_books_in_order(self, store):
        books = store.list_all()

        assert books == list(SEED_BOOKS)
        assert [b.id for b in books] == [1, 2]
        assert books[0].title == "The Awakening"
        assert books[0].author == "Kate Chopin"
        assert books[1].title == "City of Glass"
        assert books[1].author == "Paul Auster"

    def test_len_and_count(self, store):
        assert len(store) == 2
        assert store.count() == 2

    def test_seeded_stores_are_independent(self):
        first = BookStore.seeded()
        second = BookStore.seeded()

        first.insert(title="Dune")

        assert first.count() == 3
        assert second.count() == 2

    def test_empty_store(self):
        store = BookStore()

        assert store.list_all() == []
        assert store.find_by_id(1) is None
        assert store.insert(title="First").id == 1


class TestListAll:
    def test_repeated_reads_are_equal(self, store):
        assert store.list_all() == store.list_all()

    def test_returned_list_is_a_copy(self, store):
        books = store.list_all()
        books.clear()

        assert store.count() == 2

    def test_inserts_follow_seeds_in_order(self, store):
        added = [
            store.insert(title="Dune", author="Frank Herbert"),
            store.insert(title="Solaris", author="Stanislaw Lem"),
            store.insert(),
        ]

        assert store.list_all() == list(SEED_BOOKS) + added

    @pytest.mark.parametrize("n", [0, 1, 5, 20])
    def test_length_grows_by_one_per_insert(self, store, n):
        for i in range(n):
            store.insert(title=f"Book {i}")

        assert len(store.list_all()) == 2 + n


class TestFindById:
    def test_known_id(self, store):
        book = store.find_by_id(1)

        assert book == BookRecord(id=1, title="The Awakening", author="Kate Chopin")

    def test_unknown_id(self, store):
        assert store.find_by_id(999) is None
        assert store.find_by_id(0) is None
        assert store.find_by_id(-1) is None

    def test_first_match_wins_on_duplicate_ids(self, legacy_store):
        legacy_store.insert(title="Dune", author="Frank Herbert")

        assert legacy_store.find_by_id(2).title == "City of Glass"


class TestInsertSequencePolicy:
    def test_default_policy_is_sequence(self, store):
        assert store.id_policy is IdPolicy.SEQUENCE

    def test_first_insert_follows_highest_seed_id(self, store):
        book = store.insert(title="Dune", author="Frank Herbert")

        assert book == BookRecord(id=3, title="Dune", author="Frank Herbert")

    def test_ids_are_unique(self, store):
        for _ in range(10):
            store.insert()

        ids = [b.id for b in store.list_all()]
        assert len(ids) == len(set(ids))
        assert ids == sorted(ids)

    def test_counter_starts_after_highest_provided_id(self):
        store = BookStore([BookRecord(id=7, title="Seven"), BookRecord(id=3, title="Three")])

        assert store.insert().id == 8

    def test_insert_without_title_or_author(self, store):
        book = store.insert()

        assert book.id == 3
        assert book.title is None
        assert book.author is None
        assert store.find_by_id(3) is book

    def test_empty_strings_are_stored_as_given(self, store):
        book = store.insert(title="", author="")

        assert book.title == ""
        assert book.author == ""


class TestInsertLengthPolicy:
    def test_id_equals_size_before_insert(self, legacy_store):
        book = legacy_store.insert(title="Dune", author="Frank Herbert")

        assert book == BookRecord(id=2, title="Dune", author="Frank Herbert")

    def test_id_collides_with_seed(self, legacy_store):
        legacy_store.insert(title="Dune", author="Frank Herbert")

        ids = [b.id for b in legacy_store.list_all()]
        assert ids == [1, 2, 2]

    def test_policy_accepts_string_value(self):
        store = BookStore.seeded(id_policy="length")

        assert store.id_policy is IdPolicy.LENGTH
        assert store.insert().id == 2


class TestBookRecord:
    def test_records_are_immutable(self, store):
        book = store.find_by_id(1)

        with pytest.raises(ValidationError):
            book.title = "Changed"

        assert store.find_by_id(1).title == "The Awakening"
