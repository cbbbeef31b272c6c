from typing import Any, Dict, List

from pymongo.collection import Collection
from shared.modules.book.models.sort_spec import SortSpec
from backend.models.base_nosql_model import BaseNoSqlModel


class BookModel(BaseNoSqlModel):
    """
    MongoDB persistence wrapper for the books collection.
    Inherits common query operations from BaseNoSqlModel.
    """

    @property
    def collection(self) -> Collection:
        """Get the books collection from the database."""
        return self.db.books

    @classmethod
    def find_sorted_page(cls, sort_spec: SortSpec, skip: int, limit: int) -> List[Dict[str, Any]]:
        """
        Books ordered by sort_spec, skipping `skip` and returning at most `limit`.
        """
        return cls.find_page(sort_spec.to_mongo(), skip, limit)
