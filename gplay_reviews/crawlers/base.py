"""
Base crawler class for app store review collection
"""
from abc import ABC, abstractmethod
from typing import List

from ..decoding.review import Review


class BaseCrawler(ABC):
    """Abstract base class for app store crawlers"""
    
    def __init__(self, app_id: str):
        self.app_id = app_id
    
    @abstractmethod
    def collect_reviews(self, count: int = 100) -> List[Review]:
        """
        Collect reviews from the app store
        
        Args:
            count: Number of reviews to collect
        
        Returns:
            List of Review records in the order the store returned them
        """
        pass
    
    @abstractmethod
    def get_platform_name(self) -> str:
        """Get the platform name"""
        pass
