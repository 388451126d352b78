"""Paginated review listing"""

from .payload import MAX_REVIEWS_PER_REQUEST, build_initial_payload, build_paginated_payload
from .paginator import RequestOptions, PaginationState, ReviewPaginator

__all__ = [
    "MAX_REVIEWS_PER_REQUEST",
    "build_initial_payload",
    "build_paginated_payload",
    "RequestOptions",
    "PaginationState",
    "ReviewPaginator",
]
