"""
Configuration settings for Google Play review extraction
"""
import os

from google_play_scraper import Sort


class Config:
    """Configuration settings read from the environment"""
    
    # Target app and locale
    PLAYSTORE_APP_PACKAGE = os.getenv('PLAYSTORE_APP_PACKAGE', 'com.kakao.yellowid')
    PLAYSTORE_COUNTRY = os.getenv('PLAYSTORE_COUNTRY', 'us')
    PLAYSTORE_LANGUAGE = os.getenv('PLAYSTORE_LANGUAGE', 'en')
    
    # Collection settings
    REVIEW_SORT = os.getenv('REVIEW_SORT', 'MOST_RELEVANT')
    REVIEW_COUNT = int(os.getenv('REVIEW_COUNT', '1000'))
    DAYS = int(os.getenv('ANALYSIS_DAYS', '7'))
    
    # Transport settings
    BATCHEXECUTE_URL = os.getenv(
        'BATCHEXECUTE_URL', 'https://play.google.com/_/PlayStoreUi/data/batchexecute')
    REQUEST_TIMEOUT = float(os.getenv('REQUEST_TIMEOUT', '30'))
    
    @classmethod
    def get_sort(cls) -> Sort:
        """Get the configured sort order, falling back to most relevant"""
        try:
            return Sort[cls.REVIEW_SORT.strip().upper()]
        except KeyError:
            print(f"⚠️  Unknown REVIEW_SORT '{cls.REVIEW_SORT}', using MOST_RELEVANT")
            return Sort.MOST_RELEVANT
