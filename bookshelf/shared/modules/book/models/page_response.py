from __future__ import annotations
import math
from typing import Any, Dict, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .page_request import PageRequest


class PageResponse(BaseModel):
    """
    Envelope returned for one page of books.
    Serialized with camelCase keys (totalItems, totalPages) for API clients.
    The same instance is handed to every cache hit, so data is a tuple and the
    book dicts inside it must be treated as read-only.
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    status: str = "success"
    sort: Optional[str] = None
    page: int
    limit: int
    total_items: int
    total_pages: int
    results: int
    data: Tuple[Dict[str, Any], ...] = ()

    @classmethod
    def build(cls, page_request: PageRequest, data: List[Dict[str, Any]], total_items: int) -> PageResponse:
        """
        Assemble a successful response for page_request.
        total_pages is ceil(total_items / limit), which is 0 for an empty collection.
        """
        return cls(
            sort=page_request.sort,
            page=page_request.page,
            limit=page_request.limit,
            total_items=total_items,
            total_pages=math.ceil(total_items / page_request.limit),
            results=len(data),
            data=tuple(data),
        )

    def to_json_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")
