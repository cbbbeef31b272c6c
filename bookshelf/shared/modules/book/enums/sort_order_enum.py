from enum import Enum
from typing import Any


class SortOrder(str, Enum):
    TITLE_ASC = "title_asc"
    TITLE_DESC = "title_desc"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    NEWEST = "createdAt_desc"

    @classmethod
    def from_token(cls, token: Any) -> "SortOrder":
        """
        Map a raw sort token to a SortOrder.
        Anything outside the known set falls back to NEWEST.
        """
        try:
            return cls(token)
        except (ValueError, TypeError):
            return cls.NEWEST
