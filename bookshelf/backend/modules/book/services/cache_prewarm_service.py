"""
Cache prewarm for the homepage listing.

Runs the read-through path once for the first page in default order so the
first visitor finds it cached. Failures never leave this module: they are
captured in a PrewarmOutcome, logged, and dropped.
"""
import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict

from shared.modules.book.enums.sort_order_enum import SortOrder
from backend.modules.book.services.book_page_cache_service import BookPageCacheService


HOMEPAGE_PAGE = 1
HOMEPAGE_LIMIT = 6
HOMEPAGE_SORT = SortOrder.NEWEST.value


class PrewarmOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: int
    limit: int
    sort: str
    succeeded: bool
    error: Optional[str] = None


class CachePrewarmService:

    def __init__(self, page_cache_service: BookPageCacheService, logger=None):
        self.page_cache_service = page_cache_service
        self.logger = logger or logging.getLogger(self.__class__.__name__)

    def warm_page(self, page: int, limit: int, sort: str) -> PrewarmOutcome:
        """
        Run get_page once and capture the result instead of raising.
        """
        try:
            self.page_cache_service.get_page(page, limit, sort)
        except Exception as e:
            return PrewarmOutcome(
                page=page,
                limit=limit,
                sort=sort,
                succeeded=False,
                error=str(e) or e.__class__.__name__,
            )
        return PrewarmOutcome(page=page, limit=limit, sort=sort, succeeded=True)

    def prewarm(self) -> None:
        """
        Warm the homepage view (page 1, 6 books, newest first). Never raises.
        """
        outcome = self.warm_page(HOMEPAGE_PAGE, HOMEPAGE_LIMIT, HOMEPAGE_SORT)
        if outcome.succeeded:
            self.logger.info(
                f"Cache prewarmed: page={outcome.page} limit={outcome.limit} "
                f"sort={outcome.sort}"
            )
        else:
            self.logger.error(f"Cache prewarm failed: {outcome.error}")
