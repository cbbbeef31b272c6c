"""
Service Factory for creating business service instances with proper dependencies.
"""
from backend.database.context import DatabaseContext
from backend.modules.book.models.book_model import BookModel
from backend.modules.book.services.book_page_cache_service import BookPageCacheService
from backend.modules.book.services.cache_prewarm_service import CachePrewarmService
from shared.modules.book.services.sort_resolver import SortResolver


class ServiceFactory:
    """
    Factory for creating service instances with injected dependencies.
    Works in both Flask request context and application context.
    """

    @staticmethod
    def create_book_page_cache_service() -> BookPageCacheService:
        """
        Create a BookPageCacheService wired to the books collection and the
        process-wide cache store.
        """
        cache_store = DatabaseContext.get_cache_store()
        return BookPageCacheService(BookModel, cache_store, SortResolver())

    @staticmethod
    def create_cache_prewarm_service() -> CachePrewarmService:
        return CachePrewarmService(ServiceFactory.create_book_page_cache_service())
