"""
Review filtering into a dated DataFrame
"""
import pandas as pd
from datetime import datetime, timedelta
from typing import List, Optional

from ..decoding.review import Review


class ReviewFilter:
    """Filter collected reviews down to a trailing window of days"""
    
    def __init__(self, days: int = 7, today: Optional[datetime] = None):
        self.days = days
        today = today or datetime.now()
        self.end_date = (today - timedelta(days=1)).date()
        self.start_date = (self.end_date - timedelta(days=days-1))
    
    def process_reviews(self, reviews: List[Review]) -> Optional[pd.DataFrame]:
        """
        Turn reviews into a DataFrame restricted to the date window
        
        Args:
            reviews: Decoded reviews, in any order
        
        Returns:
            DataFrame sorted by 'at', or None if no review falls in the window
        """
        print(f"📅 Filter Date Range: {self.start_date} to {self.end_date}")
        
        if not reviews:
            print("❌ No review data to process.")
            return None
        
        df = pd.DataFrame([review.to_dict() for review in reviews])
        df.rename(columns={'content': 'review'}, inplace=True)
        df['at'] = pd.to_datetime(df['at'], utc=True)
        
        before_filter_count = len(df)
        dates = df['at'].dt.date
        df = df[(dates >= self.start_date) & (dates <= self.end_date)]
        
        print(f"🔍 Date filtering results:")
        print(f"   • Before filter: {before_filter_count} reviews")
        print(f"   • After filter: {len(df)} reviews")
        
        if df.empty:
            print(f"❌ No reviews found for the last {self.days} days ({self.start_date} to {self.end_date}).")
            return None
        
        return df.sort_values('at').reset_index(drop=True)
    
    def get_date_range(self):
        """Get the date range for filtering"""
        return self.start_date, self.end_date
