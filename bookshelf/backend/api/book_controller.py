from flask import Blueprint, request, jsonify
from pydantic import ValidationError
from backend.factories.service_factory import ServiceFactory
from shared.modules.book.enums.sort_order_enum import SortOrder

bp = Blueprint("book_controller", __name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 6
MAX_LIMIT = 100


@bp.route("/books", methods=["GET"])
def list_books():
    """
    List one page of books.

    Query params:
        page  - 1-based page number (default 1)
        limit - books per page, at most 100 (default 6)
        sort  - title_asc | title_desc | price_asc | price_desc | createdAt_desc
    """
    try:
        page = request.args.get("page", DEFAULT_PAGE, type=int)
        limit = request.args.get("limit", DEFAULT_LIMIT, type=int)
        sort = request.args.get("sort", SortOrder.NEWEST.value)

        # type=int falls back to the default on garbage, so only range is left to check
        if limit > MAX_LIMIT:
            return jsonify({"error": f"'limit' must be at most {MAX_LIMIT}"}), 400

        service = ServiceFactory.create_book_page_cache_service()
        response = service.get_page(page, limit, sort)
        return jsonify(response.to_json_dict()), 200

    except ValidationError as e:
        # Validation errors (from the PageRequest model)
        return jsonify({"error": f"Validation error: {str(e)}"}), 400
    except Exception as e:
        # Storage and serialization errors
        return jsonify({"error": str(e)}), 500
