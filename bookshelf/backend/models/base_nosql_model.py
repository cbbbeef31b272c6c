"""
Base model class for MongoDB operations using Flask context.
Provides Rails-like ActiveRecord pattern without explicit dependency injection.
"""
from typing import Optional, Any, Dict, List, Tuple
from bson import ObjectId
from bson.decimal128 import Decimal128
from backend.database.context import DatabaseContext


class BaseNoSqlModel:
    """
    Base class for MongoDB models that automatically handles database connection
    through Flask context without requiring explicit dependency injection.

    Similar to Rails ActiveRecord pattern where models automatically
    have access to the database connection and common query operations.
    """

    def __init__(self):
        """Initialize model without requiring database parameter."""
        pass

    @property
    def db(self):
        """Get database instance from Flask context automatically."""
        return DatabaseContext.get_mongo_db()

    @property
    def collection(self):
        """
        Get the MongoDB collection for this model.
        Override in subclasses to specify collection name.
        """
        raise NotImplementedError("Subclasses must implement collection property")

    # -------------------------------------------------------------------------
    # Common query operations (Rails-like class methods)
    # -------------------------------------------------------------------------

    @classmethod
    def find_page(
        cls,
        sort: List[Tuple[str, int]],
        skip: int,
        limit: int,
        projection: Optional[Dict[str, Any]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Fetch one ordered window of documents as plain dicts.
        Rails-like: BookModel.order(...).offset(skip).limit(limit)
        """
        instance = cls()
        cursor = instance.collection.find({}, projection).sort(sort).skip(skip).limit(limit)
        return [cls._detach(doc) for doc in cursor]

    @classmethod
    def count_all(cls) -> int:
        """
        Count every document in the collection, unfiltered.
        Rails-like: BookModel.count
        """
        instance = cls()
        return instance.collection.count_documents({})

    @classmethod
    def _detach(cls, doc: Dict[str, Any]) -> Dict[str, Any]:
        """
        Turn a raw MongoDB document into a plain, serializable dict.
        ObjectIds become strings and Decimal128 becomes Decimal, at any depth.
        """
        return cls._to_plain(doc)

    @classmethod
    def _to_plain(cls, value: Any) -> Any:
        if isinstance(value, ObjectId):
            return str(value)
        if isinstance(value, Decimal128):
            return value.to_decimal()
        if isinstance(value, dict):
            return {key: cls._to_plain(item) for key, item in value.items()}
        if isinstance(value, (list, tuple)):
            return [cls._to_plain(item) for item in value]
        return value
