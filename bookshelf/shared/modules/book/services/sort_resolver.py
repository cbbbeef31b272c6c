from typing import Any, Dict

from ..enums.sort_order_enum import SortOrder
from ..enums.sort_field_enum import SortField
from ..enums.sort_direction_enum import SortDirection
from ..models.sort_spec import SortSpec


DEFAULT_SORT_SPEC = SortSpec(field=SortField.CREATED_AT, direction=SortDirection.DESCENDING)

SORT_SPECS: Dict[SortOrder, SortSpec] = {
    SortOrder.TITLE_ASC: SortSpec(field=SortField.TITLE, direction=SortDirection.ASCENDING),
    SortOrder.TITLE_DESC: SortSpec(field=SortField.TITLE, direction=SortDirection.DESCENDING),
    SortOrder.PRICE_ASC: SortSpec(field=SortField.PRICE, direction=SortDirection.ASCENDING),
    SortOrder.PRICE_DESC: SortSpec(field=SortField.PRICE, direction=SortDirection.DESCENDING),
    SortOrder.NEWEST: DEFAULT_SORT_SPEC,
}


class SortResolver:
    """
    Resolves client sort tokens into SortSpec directives.

    Recognized tokens:
      - title_asc / title_desc
      - price_asc / price_desc

    Every other value, including empty strings and None, resolves to
    createdAt descending. resolve() never raises.
    """

    def resolve(self, token: Any) -> SortSpec:
        return SORT_SPECS[SortOrder.from_token(token)]


def resolve_sort(token: Any) -> SortSpec:
    return SortResolver().resolve(token)
