# Cache key construction for listing pages

import json

from shared.modules.book.models.page_request import PageRequest


class CacheKeyGenerator:
    @staticmethod
    def generate(namespace, key_data):
        # sort_keys fixes the field order no matter how key_data was built
        key_str = json.dumps(key_data, sort_keys=True, separators=(",", ":"))
        return f"{namespace}:{key_str}"

    @staticmethod
    def generate_page_key(page_request: PageRequest, namespace="books"):
        key_data = {
            "page": page_request.page,
            "limit": page_request.limit,
            "sort": page_request.sort
        }
        return CacheKeyGenerator.generate(namespace, key_data)
