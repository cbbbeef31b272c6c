from flask import Flask
from flask_pymongo import PyMongo
import threading
import logging
import os

from backend.factories.cache_store_factory import CacheStoreFactory

app = Flask(__name__)

# MongoDB config
app.config["MONGO_URI"] = os.environ.get(
    "MONGO_URI", "mongodb://localhost:27017/bookshelf"
)
mongo = PyMongo(app)

# Process-wide cache store, created once and shared by every request
cache_store = CacheStoreFactory.create_cache_store()

# Import and register blueprint after mongo and the cache are initialized
from backend.api.book_controller import bp as book_controller_bp
app.register_blueprint(book_controller_bp)

from backend.factories.service_factory import ServiceFactory

# No-op when a WSGI server has already configured logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("bookshelf")


def prewarm_homepage_cache():
    """
    Prime the cache for the homepage listing. Failures are logged by the
    prewarm service and never reach the caller.
    """
    with app.app_context():
        ServiceFactory.create_cache_prewarm_service().prewarm()


def start_cache_prewarm():
    """
    Run the prewarm in a background thread so startup never waits on MongoDB.
    """
    if os.environ.get("PREWARM_CACHE", "true").lower() in ("0", "false", "no"):
        logger.info("Cache prewarm disabled by PREWARM_CACHE")
        return None

    thread = threading.Thread(target=prewarm_homepage_cache, daemon=True)
    thread.start()
    return thread


# Prewarm as soon as the module is imported
# This works with both Flask development server and production deployments.
# Run as a script, this file is "__main__" and defers to the real backend.app
# module so the cache store and prewarm thread exist only once.
if __name__ != "__main__":
    start_cache_prewarm()


if __name__ == "__main__":
    from backend.app import app as backend_app
    backend_app.run(host="0.0.0.0", port=8000, debug=False)
