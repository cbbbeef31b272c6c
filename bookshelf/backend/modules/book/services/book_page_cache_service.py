import logging
from typing import Any, Optional

from shared.modules.book.models.page_request import PageRequest
from shared.modules.book.models.page_response import PageResponse
from shared.modules.book.services.sort_resolver import SortResolver
from shared.modules.cache.cache_key_generator import CacheKeyGenerator
from shared.modules.cache.cache_store import CacheStore


class BookPageCacheService:
    """
    Read-through cache for the paginated books listing.

    A page is looked up by its (page, limit, sort) key first. On a miss the
    books collection is queried (sorted window + total count), the response
    envelope is stored, and then returned. Storage errors are not caught here,
    so nothing is cached for a failed query.

    Concurrent misses on the same key are not coalesced: each one queries
    storage and writes the same value.
    """

    def __init__(self, book_model, cache_store: CacheStore,
                 sort_resolver: Optional[SortResolver] = None, logger=None):
        self.book_model = book_model
        self.cache_store = cache_store
        self.sort_resolver = sort_resolver or SortResolver()
        self.logger = logger or logging.getLogger(self.__class__.__name__)

    def get_page(self, page: Any, limit: Any, sort: Optional[str]) -> PageResponse:
        """
        Return page `page` of `limit` books ordered by `sort`.

        Raises:
            ValueError: page or limit is not an integer >= 1.
        """
        page_request = PageRequest(page=page, limit=limit, sort=sort)
        cache_key = CacheKeyGenerator.generate_page_key(page_request)

        cached = self.cache_store.get(cache_key)
        if cached is not None:
            self.logger.debug(f"Cache hit: {cache_key}")
            return cached

        self.logger.debug(f"Cache miss: {cache_key}")
        response = self._load_page(page_request)
        self.cache_store.set(cache_key, response)
        return response

    def _load_page(self, page_request: PageRequest) -> PageResponse:
        sort_spec = self.sort_resolver.resolve(page_request.sort)

        books = self.book_model.find_sorted_page(sort_spec, page_request.offset, page_request.limit)
        total = self.book_model.count_all()

        return PageResponse.build(page_request, books, total)
