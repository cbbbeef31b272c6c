"""
Access to the books database and the listing cache created in backend.app.
"""
from flask import g


class DatabaseContext:

    @staticmethod
    def get_mongo_db():
        """
        The bookshelf database, memoized on `g` inside an app context.
        """
        from backend.app import mongo

        try:
            if 'mongo_db' not in g:
                g.mongo_db = mongo.db
            return g.mongo_db
        except RuntimeError:
            # Outside any app context `g` is unbound
            return mongo.db

    @staticmethod
    def get_cache_store():
        from backend.app import cache_store
        return cache_store
