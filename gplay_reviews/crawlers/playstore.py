"""
Google Play Store review crawler
"""
import time
from typing import List, Optional

from google_play_scraper import Sort

from ..decoding.review import PLATFORM_NAME, Review
from ..exceptions import TransportError
from ..paging import MAX_REVIEWS_PER_REQUEST, RequestOptions, ReviewPaginator
from ..paging.paginator import Transport
from .base import BaseCrawler


class PlayStoreCrawler(BaseCrawler):
    """Google Play Store review crawler"""
    
    def __init__(self, app_package: str, country: str = 'us', language: str = 'en',
                 sort: Sort = Sort.MOST_RELEVANT, transport: Optional[Transport] = None):
        super().__init__(app_package)
        self.app_package = app_package
        self.country = country
        self.language = language
        self.sort = sort
        self.transport = transport
    
    def collect_reviews(self, count: int = 100) -> List[Review]:
        """
        Collect up to count reviews, walking as many pages as needed
        
        Args:
            count: Number of reviews to collect
        
        Returns:
            List of reviews; on a transport failure, the reviews collected
            before the failure
        """
        print(f"📱 App Package: {self.app_package}")
        print(f"📊 Requested Count: {count} (sort: {self.sort.name}, {self.language}-{self.country})")
        
        collected: List[Review] = []
        if count <= 0:
            return collected
        
        options = RequestOptions(
            app_id=self.app_package,
            country=self.country,
            language=self.language,
            number=min(count, MAX_REVIEWS_PER_REQUEST),
            sorting=self.sort,
        )
        paginator = ReviewPaginator(options, transport=self.transport)
        
        def consume(batch: List[Review]) -> bool:
            collected.extend(batch)
            print(f"  Batch: fetched {len(batch)} reviews (kept: {min(len(collected), count)})")
            return len(collected) >= count
        
        start_time = time.time()
        try:
            pages = paginator.run_paging(consume)
        except TransportError as e:
            print(f"❌ Error fetching Play Store reviews: {e}")
            print(f"ℹ️  Keeping {len(collected)} reviews collected before the failure")
            return collected[:count]
        
        print(f"  ⏱️  {pages} page(s) in {time.time() - start_time:.2f}s")
        print(f"✓ Fetched {min(len(collected), count)} reviews from Play Store")
        return collected[:count]
    
    def get_platform_name(self) -> str:
        """Get the platform name"""
        return PLATFORM_NAME
