#!/usr/bin/env python3
"""
Google Play review extraction
Collects reviews for the configured app and filters them to recent days
"""

from gplay_reviews.config import Config
from gplay_reviews.crawlers import PlayStoreCrawler
from gplay_reviews.preprocessing import ReviewFilter


def main():
    """Collect and filter Play Store reviews"""
    try:
        print("=== Google Play Review Extraction Started ===")
        
        crawler = PlayStoreCrawler(
            Config.PLAYSTORE_APP_PACKAGE,
            country=Config.PLAYSTORE_COUNTRY,
            language=Config.PLAYSTORE_LANGUAGE,
            sort=Config.get_sort(),
        )
        review_filter = ReviewFilter(Config.DAYS)
        
        start_date, end_date = review_filter.get_date_range()
        print(f"Collecting reviews from the last {Config.DAYS} days ({start_date} ~ {end_date})...")
        
        reviews = crawler.collect_reviews(Config.REVIEW_COUNT)
        replied = sum(1 for review in reviews if review.has_reply)
        
        print(f"\n📊 Collection Summary:")
        print(f"   • Reviews: {len(reviews)}")
        print(f"   • With developer reply: {replied}")
        
        df = review_filter.process_reviews(reviews)
        if df is None or df.empty:
            print("❌ No reviews to process. Exiting.")
            return
        
        print(f"   • In date range: {len(df)} (average score {df['score'].mean():.2f})")
        print("=== Google Play Review Extraction Complete ===")
    
    except Exception as e:
        print(f"❌ Error occurred: {str(e)}")
        raise


if __name__ == "__main__":
    main()
