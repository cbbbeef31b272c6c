from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from ..enums.sort_order_enum import SortOrder


class PageRequest(BaseModel):
    """
    One listing request: which page, how many items, which sort token.
    Integer-like strings are coerced, anything below 1 is rejected.
    """
    model_config = ConfigDict(frozen=True)

    page: int = Field(1, ge=1, description="1-based page number")
    limit: int = Field(6, ge=1, description="Items per page")
    sort: Optional[str] = Field(SortOrder.NEWEST.value, description="Raw sort token, echoed back to the client")

    @property
    def offset(self) -> int:
        """Number of records to skip before this page starts."""
        return (self.page - 1) * self.limit
