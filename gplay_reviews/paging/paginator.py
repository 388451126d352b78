"""
Continuation-token pagination over Google Play reviews
"""
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from google_play_scraper import Sort

from ..decoding.path import get_array, get_str
from ..decoding.review import Review, parse_review
from ..transport.batchexecute import BatchExecuteTransport
from .payload import MAX_REVIEWS_PER_REQUEST, build_initial_payload, build_paginated_payload

# (country, language, payload) -> parsed response tree
Transport = Callable[[str, str, str], Any]

# Receives one page of reviews, returns True to stop paging
Consumer = Callable[[List[Review]], bool]

RECORDS_PATH = "0"
TOKEN_PATH = "1.1"


@dataclass
class RequestOptions:
    """Per-query settings for a review listing"""
    app_id: str
    country: str = "us"
    language: str = "en"
    number: int = MAX_REVIEWS_PER_REQUEST
    sorting: Sort = Sort.MOST_RELEVANT
    
    def __post_init__(self):
        if self.number <= 0:
            self.number = MAX_REVIEWS_PER_REQUEST
    
    @property
    def page_size(self) -> int:
        """Requested page size clamped to what one request may return"""
        return min(self.number, MAX_REVIEWS_PER_REQUEST)


@dataclass
class PaginationState:
    """Where one paging run currently is"""
    payload: str
    token: str = ""
    pages: int = 0


class ReviewPaginator:
    """Walks the review listing of one app page by page"""
    
    def __init__(self, options: RequestOptions, transport: Optional[Transport] = None):
        if transport is None:
            transport = BatchExecuteTransport()
        self.options = options
        self.transport = transport
    
    def fetch_page(self, payload: str) -> Tuple[List[Review], str]:
        """
        Request one page and decode it
        
        Args:
            payload: Initial or paginated request payload
        
        Returns:
            Tuple of (decoded reviews in source order, continuation token)
        """
        response = self.transport(self.options.country, self.options.language, payload)
        
        token = get_str(response, TOKEN_PATH)
        results = []
        for raw_review in get_array(response, RECORDS_PATH):
            review = parse_review(raw_review)
            if review is not None:
                results.append(review)
        
        return results, token
    
    def run_paging(self, consumer: Consumer) -> int:
        """
        Fetch pages until the consumer asks to stop or the listing runs out
        
        The run ends after a page whose consumer call returned True, whose
        token is empty, or which decoded to no reviews. Transport errors are
        raised to the caller; pages already handed to the consumer stay there.
        
        Args:
            consumer: Called once per page with that page's reviews
        
        Returns:
            Number of pages fetched
        """
        sort = self.options.sorting
        page_size = self.options.page_size
        app_id = self.options.app_id
        
        state = PaginationState(payload=build_initial_payload(sort, page_size, app_id))
        while True:
            results, state.token = self.fetch_page(state.payload)
            state.pages += 1
            
            if consumer(results):
                return state.pages
            if not state.token or not results:
                return state.pages
            
            state.payload = build_paginated_payload(sort, page_size, state.token, app_id)
