from enum import Enum


class SortField(str, Enum):
    TITLE = "title"
    PRICE = "price"
    CREATED_AT = "createdAt"
