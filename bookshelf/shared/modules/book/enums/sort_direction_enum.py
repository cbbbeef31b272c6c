from enum import IntEnum

import pymongo


class SortDirection(IntEnum):
    ASCENDING = pymongo.ASCENDING
    DESCENDING = pymongo.DESCENDING
