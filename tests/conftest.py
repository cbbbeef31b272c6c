import os
from datetime import datetime, timedelta
from types import SimpleNamespace
from unittest.mock import patch

# Must be set before backend.app is imported anywhere
os.environ["PREWARM_CACHE"] = "false"
os.environ["CACHE_BACKEND"] = "memory"

import pytest

from backend.database.context import DatabaseContext
from shared.modules.cache.in_memory_cache_store import InMemoryCacheStore


class FakeCursor:
    """Minimal stand-in for pymongo.cursor.Cursor over a list of documents."""

    def __init__(self, docs, calls):
        self._docs = list(docs)
        self._calls = calls

    def sort(self, key_or_list):
        self._calls.append(("sort", key_or_list))
        for field, direction in reversed(key_or_list):
            self._docs.sort(key=lambda d: d[field], reverse=direction < 0)
        return self

    def skip(self, count):
        self._calls.append(("skip", count))
        self._docs = self._docs[count:]
        return self

    def limit(self, count):
        self._calls.append(("limit", count))
        self._docs = self._docs[:count]
        return self

    def __iter__(self):
        return iter(self._docs)


class FakeCollection:
    def __init__(self, docs):
        self.docs = docs
        self.calls = []
        self.find_count = 0
        self.count_count = 0

    def find(self, filter=None, projection=None):
        self.find_count += 1
        self.calls.append(("find", filter, projection))
        return FakeCursor(self.docs, self.calls)

    def count_documents(self, filter):
        self.count_count += 1
        return len(self.docs)


class BrokenCollection:
    def __init__(self, error):
        self.error = error

    def find(self, *args, **kwargs):
        raise self.error

    def count_documents(self, *args, **kwargs):
        raise self.error


def make_books(count):
    """Books whose price rank, title rank and age all follow their number."""
    start = datetime(2024, 1, 1)
    return [
        {
            "_id": f"book-{n:02d}",
            "title": f"Title {n:02d}",
            "price": float(n),
            "createdAt": start + timedelta(days=n),
        }
        for n in range(1, count + 1)
    ]


@pytest.fixture
def books():
    return make_books(25)


@pytest.fixture
def books_collection(books):
    collection = FakeCollection(books)
    with patch.object(DatabaseContext, "get_mongo_db", return_value=SimpleNamespace(books=collection)):
        yield collection


@pytest.fixture
def cache_store():
    return InMemoryCacheStore(maxsize=64, ttl_seconds=60)


@pytest.fixture
def empty_books_collection():
    collection = FakeCollection([])
    with patch.object(DatabaseContext, "get_mongo_db", return_value=SimpleNamespace(books=collection)):
        yield collection


@pytest.fixture
def unreachable_books_collection():
    from pymongo.errors import ServerSelectionTimeoutError

    collection = BrokenCollection(ServerSelectionTimeoutError("localhost:27017: connection refused"))
    with patch.object(DatabaseContext, "get_mongo_db", return_value=SimpleNamespace(books=collection)):
        yield collection


@pytest.fixture
def referenced_books_collection():
    """Books carrying ObjectId references the way real documents do."""
    from bson import ObjectId

    docs = [
        {
            "_id": ObjectId(),
            "title": f"Title {n:02d}",
            "price": float(n),
            "category": ObjectId(),
            "authors": [{"author_id": ObjectId(), "name": f"Author {n}"}],
        }
        for n in range(1, 8)
    ]
    collection = FakeCollection(docs)
    with patch.object(DatabaseContext, "get_mongo_db", return_value=SimpleNamespace(books=collection)):
        yield collection
