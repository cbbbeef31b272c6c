import logging
from unittest.mock import MagicMock

from pymongo.errors import ServerSelectionTimeoutError

from backend.modules.book.models.book_model import BookModel
from backend.modules.book.services.book_page_cache_service import BookPageCacheService
from backend.modules.book.services.cache_prewarm_service import CachePrewarmService


def test_prewarm_fills_homepage_entry(books_collection, cache_store):
    page_service = BookPageCacheService(BookModel, cache_store)

    CachePrewarmService(page_service).prewarm()

    cached = cache_store.get('books:{"limit":6,"page":1,"sort":"createdAt_desc"}')
    assert cached is not None
    assert cached.results == 6
    assert cached.data[0]["_id"] == "book-25"

    page_service.get_page(1, 6, "createdAt_desc")
    assert books_collection.find_count == 1


def test_prewarm_uses_fixed_homepage_arguments():
    page_service = MagicMock()

    CachePrewarmService(page_service).prewarm()

    page_service.get_page.assert_called_once_with(1, 6, "createdAt_desc")


def test_prewarm_swallows_and_logs_storage_failure(caplog):
    page_service = MagicMock()
    page_service.get_page.side_effect = ServerSelectionTimeoutError("localhost:27017: connection refused")

    with caplog.at_level(logging.ERROR):
        result = CachePrewarmService(page_service).prewarm()

    assert result is None
    assert "Cache prewarm failed" in caplog.text
    assert "connection refused" in caplog.text


def test_warm_page_captures_outcome():
    page_service = MagicMock()
    page_service.get_page.side_effect = [None, RuntimeError("boom")]
    prewarm_service = CachePrewarmService(page_service)

    ok = prewarm_service.warm_page(1, 6, "createdAt_desc")
    failed = prewarm_service.warm_page(2, 6, "createdAt_desc")

    assert ok.succeeded and ok.error is None
    assert not failed.succeeded
    assert failed.error == "boom"
    assert failed.page == 2


def test_prewarm_with_unreachable_storage_returns_normally(unreachable_books_collection, cache_store, caplog):
    prewarm_service = CachePrewarmService(BookPageCacheService(BookModel, cache_store))

    with caplog.at_level(logging.ERROR):
        prewarm_service.prewarm()

    assert "connection refused" in caplog.text
    assert len(cache_store) == 0
